"""
Tests for the repository layer against a real (in-memory) database.

This test suite validates the storage-write path where the record lifecycle
happens:
- MemberRepository: defaults, validation, uniqueness, references, cascades
- TrainerRepository: owned sessions and classes
- MembershipPlanRepository: restricted vs cascading delete
- Activity repositories: lookups by owner, overdue payments, open visits
"""

import uuid
from unittest.mock import patch
from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest
from sqlalchemy.exc import DataError
from sqlalchemy.orm import Session

from test_fixtures import client, db_session, unique_email, unique_code
from app.exceptions import ConstraintViolation, RecordValidationError
from domain.enums import (
    Gender,
    MemberStatus,
    PaymentMethod,
    PaymentStatus,
    ClassType,
    PlanStatus,
)
from domain.models import (
    Member,
    Trainer,
    MembershipPlan,
    MembershipPayment,
    CheckIn,
    WorkoutSession,
    FitnessClass,
)
from repositories import (
    MemberRepository,
    TrainerRepository,
    MembershipPlanRepository,
    PaymentRepository,
    CheckInRepository,
    WorkoutSessionRepository,
    FitnessClassRepository,
)


def new_member(**overrides) -> Member:
    values = {
        "member_id": unique_code("M"),
        "first_name": "Jane",
        "last_name": "Doe",
        "email": unique_email("jane.doe"),
        "phone_number": "5551234567",
        "date_of_birth": date(1990, 5, 15),
        "address": "12 Elm Street",
        "gender": Gender.FEMALE,
    }
    values.update(overrides)
    return Member(**values)


def new_trainer(**overrides) -> Trainer:
    values = {
        "trainer_id": unique_code("T"),
        "first_name": "Marcus",
        "last_name": "Reed",
        "email": unique_email("marcus.reed"),
        "phone_number": "5557654321",
        "date_of_birth": date(1985, 2, 20),
        "address": "48 Oak Avenue",
        "certification": "NASM-CPT",
        "years_experience": 8,
        "specialization": "Strength",
        "hourly_rate": Decimal("45.00"),
    }
    values.update(overrides)
    return Trainer(**values)


def new_plan(**overrides) -> MembershipPlan:
    values = {
        "plan_name": f"Basic {uuid.uuid4().hex[:6]}",
        "duration_months": 1,
        "price": Decimal("29.99"),
    }
    values.update(overrides)
    return MembershipPlan(**values)


# =============================================================================
# MEMBER REPOSITORY TESTS
# =============================================================================


def test_member_create_applies_defaults(db_session: Session):
    """
    Verifies:
    - surrogate id, created_at and updated_at are assigned
    - status defaults to ACTIVE and join_date to today
    - version counter starts at 1
    """
    repo = MemberRepository(db_session)
    member = repo.create(new_member())

    assert isinstance(member.id, uuid.UUID)
    assert member.created_at is not None
    assert member.updated_at == member.created_at
    assert member.status == MemberStatus.ACTIVE
    assert member.join_date == date.today()
    assert member.version == 1

    assert repo.get_by_id(member.id) is member
    assert repo.get_by_member_id(member.member_id).id == member.id


def test_member_create_rejected_without_write(db_session: Session):
    """A record failing validation is never stored."""
    repo = MemberRepository(db_session)

    with pytest.raises(RecordValidationError) as exc_info:
        repo.create(new_member(first_name="J", phone_number="12"))

    assert exc_info.value.fields == {"first_name", "phone_number"}
    assert repo.count() == 0


def test_member_create_value_too_large_for_column(db_session: Session):
    """
    Verifies:
    - a database DataError on commit becomes RecordValidationError
    - the session is rolled back and nothing is stored
    """
    repo = MemberRepository(db_session)
    overflow = DataError("INSERT INTO members", {}, Exception("numeric field overflow"))

    with patch.object(db_session, "commit", side_effect=overflow):
        with pytest.raises(RecordValidationError) as exc_info:
            repo.create(new_member())

    assert exc_info.value.fields == {"record"}
    assert exc_info.value.violations[0].rule == "type"
    assert repo.count() == 0


def test_member_duplicate_email_and_member_id(db_session: Session):
    repo = MemberRepository(db_session)
    first = repo.create(new_member())

    with pytest.raises(ConstraintViolation) as exc_info:
        repo.create(new_member(email=first.email))
    assert exc_info.value.violations[0].field == "email"
    assert exc_info.value.violations[0].rule == "unique"

    with pytest.raises(ConstraintViolation) as exc_info:
        repo.create(new_member(member_id=first.member_id))
    assert exc_info.value.fields == {"member_id"}

    assert repo.count() == 1


def test_member_unknown_plan_reference(db_session: Session):
    repo = MemberRepository(db_session)

    with pytest.raises(ConstraintViolation) as exc_info:
        repo.create(new_member(membership_plan_id=uuid.uuid4()))

    assert exc_info.value.violations[0].rule == "reference"
    assert exc_info.value.fields == {"membership_plan_id"}


def test_member_update_refreshes_updated_at_only(db_session: Session):
    """
    Verifies:
    - changed fields are stored
    - created_at is unchanged and updated_at strictly increases
    - version increments
    """
    repo = MemberRepository(db_session)
    member = repo.create(new_member())
    created_at, updated_at = member.created_at, member.updated_at

    member = repo.update(member, {"city": "Shelbyville", "created_at": datetime(2000, 1, 1)})

    assert member.city == "Shelbyville"
    assert member.created_at == created_at
    assert member.updated_at > updated_at
    assert member.version == 2


def test_member_update_validates_merged_record(db_session: Session):
    repo = MemberRepository(db_session)
    member = repo.create(new_member())

    with pytest.raises(RecordValidationError) as exc_info:
        repo.update(member, {"first_name": "", "weight": -1})

    assert exc_info.value.fields == {"first_name", "weight"}
    db_session.refresh(member)
    assert member.first_name == "Jane"


def test_member_update_stale_version(db_session: Session):
    repo = MemberRepository(db_session)
    member = repo.create(new_member())
    repo.update(member, {"city": "Springfield"}, expected_version=1)

    with pytest.raises(ConstraintViolation) as exc_info:
        repo.update(member, {"city": "Capital City"}, expected_version=1)

    assert exc_info.value.violations[0].rule == "stale_version"
    assert member.city == "Springfield"


def test_member_update_duplicate_email(db_session: Session):
    repo = MemberRepository(db_session)
    first = repo.create(new_member())
    second = repo.create(new_member())

    with pytest.raises(ConstraintViolation):
        repo.update(second, {"email": first.email})

    # Updating to one's own email is not a conflict
    repo.update(first, {"email": first.email})


def test_member_email_normalized_on_write(db_session: Session):
    """
    Verifies:
    - an email set directly on the model is stored trimmed and lower-cased
    - lookup by email ignores case
    - duplicates differing only in case are rejected on create and update
    """
    repo = MemberRepository(db_session)
    member = repo.create(new_member(email="  Jane.Case@Example.com "))

    assert member.email == "jane.case@example.com"
    assert repo.get_by_email("Jane.Case@Example.com").id == member.id

    with pytest.raises(ConstraintViolation) as exc_info:
        repo.create(new_member(email="JANE.CASE@example.com"))
    assert exc_info.value.fields == {"email"}

    second = repo.create(new_member())
    with pytest.raises(ConstraintViolation) as exc_info:
        repo.update(second, {"email": "Jane.Case@EXAMPLE.com"})
    assert exc_info.value.fields == {"email"}
    assert repo.count() == 2


def test_member_delete_removes_owned_records(db_session: Session):
    """
    Verifies:
    - deleting a member removes their payments, check-ins and sessions
    - trainers referenced by those sessions are untouched
    """
    member = MemberRepository(db_session).create(new_member())
    trainer = TrainerRepository(db_session).create(new_trainer())

    PaymentRepository(db_session).create(
        MembershipPayment(
            member_id=member.id, amount=Decimal("29.99"), payment_method=PaymentMethod.CASH
        )
    )
    CheckInRepository(db_session).create(CheckIn(member_id=member.id))
    WorkoutSessionRepository(db_session).create(
        WorkoutSession(
            member_id=member.id,
            trainer_id=trainer.id,
            session_date=datetime.now(),
            duration_minutes=45,
            workout_type="Cardio",
        )
    )

    assert MemberRepository(db_session).delete(member.id) is True

    assert db_session.query(MembershipPayment).count() == 0
    assert db_session.query(CheckIn).count() == 0
    assert db_session.query(WorkoutSession).count() == 0
    assert TrainerRepository(db_session).exists(trainer.id)


def test_member_delete_missing(db_session: Session):
    assert MemberRepository(db_session).delete(uuid.uuid4()) is False


# =============================================================================
# TRAINER REPOSITORY TESTS
# =============================================================================


def test_trainer_create_defaults(db_session: Session):
    trainer = TrainerRepository(db_session).create(new_trainer())

    assert trainer.status.value == "ACTIVE"
    assert trainer.hire_date == date.today()
    assert trainer.full_name == "Marcus Reed"


def test_trainer_delete_removes_sessions_and_classes(db_session: Session):
    member = MemberRepository(db_session).create(new_member())
    trainer = TrainerRepository(db_session).create(new_trainer())

    WorkoutSessionRepository(db_session).create(
        WorkoutSession(
            member_id=member.id,
            trainer_id=trainer.id,
            session_date=datetime.now(),
            duration_minutes=30,
            workout_type="Boxing",
        )
    )
    FitnessClassRepository(db_session).create(
        FitnessClass(
            trainer_id=trainer.id,
            class_name="Morning Flow",
            class_type=ClassType.YOGA,
            start_time=datetime.now() + timedelta(days=1),
            duration_minutes=45,
            max_capacity=20,
        )
    )

    assert TrainerRepository(db_session).delete(trainer.id) is True
    assert db_session.query(WorkoutSession).count() == 0
    assert db_session.query(FitnessClass).count() == 0
    assert MemberRepository(db_session).exists(member.id)


# =============================================================================
# MEMBERSHIP PLAN REPOSITORY TESTS
# =============================================================================


def test_plan_flags_default_to_gym_only(db_session: Session):
    plan = MembershipPlanRepository(db_session).create(new_plan(towel_service=True))

    assert plan.entitlements() == {
        "gym_access": True,
        "pool_access": False,
        "group_classes_included": False,
        "nutrition_consultation": False,
        "locker_included": False,
        "towel_service": True,
    }


def test_plan_delete_restricted_while_in_use(db_session: Session):
    plan_repo = MembershipPlanRepository(db_session)
    plan = plan_repo.create(new_plan())
    member = MemberRepository(db_session).create(new_member(membership_plan_id=plan.id))

    with pytest.raises(ConstraintViolation) as exc_info:
        plan_repo.delete_plan(plan.id, cascade_members=False)

    assert exc_info.value.violations[0].rule == "restricted_delete"
    assert plan_repo.exists(plan.id)
    assert MemberRepository(db_session).exists(member.id)


def test_plan_delete_cascades_to_members(db_session: Session):
    """
    Verifies:
    - members on the plan and everything they own are deleted
    - members on other plans survive
    """
    plan_repo = MembershipPlanRepository(db_session)
    member_repo = MemberRepository(db_session)
    plan = plan_repo.create(new_plan())
    other_plan = plan_repo.create(new_plan())
    doomed = member_repo.create(new_member(membership_plan_id=plan.id))
    survivor = member_repo.create(new_member(membership_plan_id=other_plan.id))
    CheckInRepository(db_session).create(CheckIn(member_id=doomed.id))

    assert plan_repo.delete_plan(plan.id) is True

    assert not plan_repo.exists(plan.id)
    assert member_repo.count() == 1
    assert member_repo.exists(survivor.id)
    assert db_session.query(CheckIn).count() == 0


def test_plan_delete_clears_payment_reference(db_session: Session):
    plan_repo = MembershipPlanRepository(db_session)
    plan = plan_repo.create(new_plan())
    member = MemberRepository(db_session).create(new_member())
    payment = PaymentRepository(db_session).create(
        MembershipPayment(
            member_id=member.id,
            membership_plan_id=plan.id,
            amount=Decimal("29.99"),
            payment_method=PaymentMethod.ONLINE,
        )
    )

    assert plan_repo.delete_plan(plan.id) is True

    db_session.refresh(payment)
    assert payment.membership_plan_id is None


def test_plan_get_active_sorted_by_price(db_session: Session):
    repo = MembershipPlanRepository(db_session)
    repo.create(new_plan(price=Decimal("59.00")))
    repo.create(new_plan(price=Decimal("19.00")))
    repo.create(new_plan(price=Decimal("9.00"), status=PlanStatus.INACTIVE))

    prices = [p.price for p in repo.get_active()]
    assert prices == [Decimal("19.00"), Decimal("59.00")]


# =============================================================================
# ACTIVITY REPOSITORY TESTS
# =============================================================================


def test_payment_defaults_and_overdue(db_session: Session):
    member = MemberRepository(db_session).create(new_member())
    repo = PaymentRepository(db_session)

    overdue = repo.create(
        MembershipPayment(
            member_id=member.id,
            amount=Decimal("29.99"),
            payment_method=PaymentMethod.BANK_TRANSFER,
            due_date=date.today() - timedelta(days=3),
        )
    )
    repo.create(
        MembershipPayment(
            member_id=member.id,
            amount=Decimal("29.99"),
            payment_method=PaymentMethod.CASH,
            due_date=date.today() - timedelta(days=3),
            status=PaymentStatus.COMPLETED,
        )
    )

    assert overdue.status == PaymentStatus.PENDING
    assert overdue.payment_date == date.today()
    assert [p.id for p in repo.get_overdue()] == [overdue.id]


def test_payment_duplicate_transaction_id(db_session: Session):
    member = MemberRepository(db_session).create(new_member())
    repo = PaymentRepository(db_session)
    kwargs = dict(
        member_id=member.id,
        amount=Decimal("10.00"),
        payment_method=PaymentMethod.CASH,
        transaction_id="TX-1",
    )
    repo.create(MembershipPayment(**kwargs))

    with pytest.raises(ConstraintViolation) as exc_info:
        repo.create(MembershipPayment(**kwargs))
    assert exc_info.value.fields == {"transaction_id"}


def test_open_check_in_lookup(db_session: Session):
    member = MemberRepository(db_session).create(new_member())
    repo = CheckInRepository(db_session)
    start = datetime.now() - timedelta(hours=2)

    closed = repo.create(CheckIn(member_id=member.id, check_in_time=start))
    repo.update(closed, {"check_out_time": start + timedelta(minutes=50)})
    open_visit = repo.create(CheckIn(member_id=member.id))

    assert repo.get_open_for_member(member.id).id == open_visit.id
    assert closed.duration_minutes == 50


def test_second_open_check_in_rejected_by_index(db_session: Session):
    """
    Verifies:
    - the store allows one open visit per member even without the service check
    - the conflict is reported on member_id
    - once the visit is closed a new one can be opened
    """
    member = MemberRepository(db_session).create(new_member())
    other = MemberRepository(db_session).create(new_member())
    repo = CheckInRepository(db_session)
    first = repo.create(CheckIn(member_id=member.id))

    with pytest.raises(ConstraintViolation) as exc_info:
        repo.create(CheckIn(member_id=member.id))

    assert exc_info.value.violations[0].field == "member_id"
    assert exc_info.value.violations[0].rule == "open_visit"
    assert len(repo.get_by_member_id(member.id)) == 1

    # Another member's open visit is independent
    repo.create(CheckIn(member_id=other.id))

    repo.update(first, {"check_out_time": first.check_in_time + timedelta(minutes=30)})
    repo.create(CheckIn(member_id=member.id))
    assert len(repo.get_by_member_id(member.id)) == 2
