"""
Domain enums for the fitness center application.
Contains all enumeration types used across the domain models.
"""

import enum


class Gender(str, enum.Enum):
    """Gender of a member or trainer"""

    MALE = "MALE"
    FEMALE = "FEMALE"
    OTHER = "OTHER"


class MemberStatus(str, enum.Enum):
    """Membership lifecycle states"""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"
    EXPIRED = "EXPIRED"
    CANCELLED = "CANCELLED"


class TrainerStatus(str, enum.Enum):
    """Employment states of a trainer"""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    ON_LEAVE = "ON_LEAVE"
    TERMINATED = "TERMINATED"


class PlanType(str, enum.Enum):
    """Membership plan tiers"""

    BASIC = "BASIC"
    PREMIUM = "PREMIUM"
    VIP = "VIP"
    STUDENT = "STUDENT"
    SENIOR = "SENIOR"
    FAMILY = "FAMILY"


class PlanStatus(str, enum.Enum):
    """Whether a plan can still be sold"""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    DISCONTINUED = "DISCONTINUED"


class PaymentMethod(str, enum.Enum):
    CASH = "CASH"
    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    BANK_TRANSFER = "BANK_TRANSFER"
    ONLINE = "ONLINE"


class PaymentStatus(str, enum.Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class SessionStatus(str, enum.Enum):
    """Workout session outcome"""

    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"


class ClassType(str, enum.Enum):
    """Group class categories"""

    YOGA = "YOGA"
    PILATES = "PILATES"
    SPINNING = "SPINNING"
    HIIT = "HIIT"
    ZUMBA = "ZUMBA"
    STRENGTH = "STRENGTH"
    CARDIO = "CARDIO"
    BOXING = "BOXING"
    OTHER = "OTHER"


class ClassStatus(str, enum.Enum):
    SCHEDULED = "SCHEDULED"
    ONGOING = "ONGOING"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
