"""
Per-kind rule tables.

Field names match the model attribute names. Person fields are shared by
members and trainers.
"""

from decimal import Decimal

from app.exceptions import Violation
from domain.enums import (
    Gender,
    MemberStatus,
    TrainerStatus,
    PlanType,
    PlanStatus,
    PaymentMethod,
    PaymentStatus,
    SessionStatus,
    ClassType,
    ClassStatus,
)
from domain.validation.rules import (
    PHONE_PATTERN,
    DecimalPlaces,
    Email,
    Length,
    MaxValue,
    MinValue,
    OneOf,
    PastDate,
    Pattern,
    Required,
)
from domain.validation.validator import RuleTable


# Largest values the Numeric(8, 2) and Numeric(10, 2) columns can hold
MAX_NUMERIC_8_2 = Decimal("999999.99")
MAX_NUMERIC_10_2 = Decimal("99999999.99")


PERSON_FIELDS = {
    "first_name": (Required(), Length(2, 50)),
    "last_name": (Required(), Length(2, 50)),
    "email": (Required(), Length(max=255), Email()),
    "phone_number": (
        Required(),
        Pattern(PHONE_PATTERN, "Phone number should be valid"),
    ),
    "date_of_birth": (Required(), PastDate()),
    "address": (Required(), Length(max=500)),
    "city": (Length(max=100),),
    "state": (Length(max=100),),
    "postal_code": (Length(max=20),),
    "gender": (OneOf(Gender),),
    "profile_image_url": (Length(max=500),),
}


MEMBER_RULES = RuleTable(
    kind="Member",
    fields={
        "member_id": (Required(), Length(max=50)),
        **PERSON_FIELDS,
        "height": (MinValue(0, inclusive=False),),
        "weight": (MinValue(0, inclusive=False),),
        "fitness_goals": (Length(max=1000),),
        "health_conditions": (Length(max=1000),),
        "emergency_contact_name": (Length(max=100),),
        "emergency_contact_phone": (Length(max=16),),
        "join_date": (Required(),),
        "status": (Required(), OneOf(MemberStatus)),
    },
)


TRAINER_RULES = RuleTable(
    kind="Trainer",
    fields={
        "trainer_id": (Required(), Length(max=50)),
        **PERSON_FIELDS,
        "certification": (Required(), Length(max=255)),
        "years_experience": (Required(), MinValue(0)),
        "specialization": (Required(), Length(max=255)),
        "bio": (Length(max=1000),),
        "hourly_rate": (
            Required(),
            MinValue(0, inclusive=False),
            MaxValue(MAX_NUMERIC_8_2),
            DecimalPlaces(2),
        ),
        "hire_date": (Required(),),
        "status": (Required(), OneOf(TrainerStatus)),
        "availability_schedule": (Length(max=1000),),
    },
)


MEMBERSHIP_PLAN_RULES = RuleTable(
    kind="MembershipPlan",
    fields={
        "plan_name": (Required(), Length(2, 100)),
        "description": (Length(max=1000),),
        "duration_months": (Required(), MinValue(1)),
        "price": (
            Required(),
            MinValue(0, inclusive=False),
            MaxValue(MAX_NUMERIC_10_2),
            DecimalPlaces(2),
        ),
        "setup_fee": (MinValue(0), MaxValue(MAX_NUMERIC_8_2), DecimalPlaces(2)),
        "plan_type": (OneOf(PlanType),),
        "personal_training_sessions": (MinValue(0),),
        "guest_passes": (MinValue(0),),
        "features": (Length(max=1000),),
        "status": (Required(), OneOf(PlanStatus)),
    },
)


PAYMENT_RULES = RuleTable(
    kind="MembershipPayment",
    fields={
        "member_id": (Required(),),
        "amount": (
            Required(),
            MinValue(0, inclusive=False),
            MaxValue(MAX_NUMERIC_10_2),
            DecimalPlaces(2),
        ),
        "payment_date": (Required(),),
        "payment_method": (Required(), OneOf(PaymentMethod)),
        "status": (Required(), OneOf(PaymentStatus)),
        "transaction_id": (Length(max=100),),
        "notes": (Length(max=500),),
    },
)


def _check_out_after_check_in(values):
    check_in = values.get("check_in_time")
    check_out = values.get("check_out_time")
    if check_in is not None and check_out is not None and check_out <= check_in:
        yield Violation(
            "check_out_time", "after", "Check out time must be after check in time"
        )


CHECK_IN_RULES = RuleTable(
    kind="CheckIn",
    fields={
        "member_id": (Required(),),
        "check_in_time": (Required(),),
        "notes": (Length(max=500),),
    },
    checks=(_check_out_after_check_in,),
)


WORKOUT_SESSION_RULES = RuleTable(
    kind="WorkoutSession",
    fields={
        "member_id": (Required(),),
        "session_date": (Required(),),
        "duration_minutes": (Required(), MinValue(1), MaxValue(600)),
        "workout_type": (Required(), Length(2, 100)),
        "calories_burned": (MinValue(0),),
        "status": (Required(), OneOf(SessionStatus)),
        "notes": (Length(max=1000),),
    },
)


FITNESS_CLASS_RULES = RuleTable(
    kind="FitnessClass",
    fields={
        "trainer_id": (Required(),),
        "class_name": (Required(), Length(2, 100)),
        "description": (Length(max=1000),),
        "class_type": (Required(), OneOf(ClassType)),
        "start_time": (Required(),),
        "duration_minutes": (Required(), MinValue(1), MaxValue(600)),
        "max_capacity": (Required(), MinValue(1)),
        "room": (Length(max=100),),
        "status": (Required(), OneOf(ClassStatus)),
    },
)
