"""
Derived values computed from stored record fields.

None of these are persisted; they are recomputed every time they are read.
"""

from datetime import date
from typing import Optional


def full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    """Join first and last name with a single space."""
    return f"{first_name} {last_name}"


def calculate_age(date_of_birth: Optional[date], today: Optional[date] = None) -> Optional[int]:
    """
    Age as the difference between the current year and the birth year.

    This is a plain year subtraction: it does not check whether the
    birthday has already happened this year, so it can be one year ahead
    of calendar age until the birthday passes.
    """
    if date_of_birth is None:
        return None
    today = today or date.today()
    return today.year - date_of_birth.year


def calculate_bmi(height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
    """
    Body mass index, weight / (height in meters)^2.

    Returns None unless both height and weight are present and height is
    positive.
    """
    if height_cm is None or weight_kg is None or height_cm <= 0:
        return None
    height_m = float(height_cm) / 100.0
    return float(weight_kg) / (height_m * height_m)
