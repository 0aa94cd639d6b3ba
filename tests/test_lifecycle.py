"""
Tests for the explicit record lifecycle: creation defaults and touch().
"""

from datetime import date, datetime, timedelta

from domain.enums import MemberStatus, PaymentStatus
from domain.lifecycle import apply_creation_defaults, touch
from domain.models import Member, MembershipPlan, MembershipPayment, CheckIn
from domain.models.membership_plan import ENTITLEMENT_FLAGS


def test_member_defaults_applied_on_first_write():
    """
    Verifies:
    - created_at and updated_at are set to the same timestamp
    - status defaults to ACTIVE and join_date to the creation date
    """
    ts = datetime(2024, 3, 1, 10, 30)
    member = Member(first_name="Jane", last_name="Doe")

    assert apply_creation_defaults(member, ts) is True

    assert member.created_at == ts
    assert member.updated_at == ts
    assert member.status == MemberStatus.ACTIVE
    assert member.join_date == date(2024, 3, 1)


def test_supplied_values_are_not_overwritten():
    member = Member(status=MemberStatus.SUSPENDED, join_date=date(2023, 1, 9))
    apply_creation_defaults(member)
    assert member.status == MemberStatus.SUSPENDED
    assert member.join_date == date(2023, 1, 9)


def test_defaults_apply_only_once():
    ts = datetime(2024, 3, 1, 10, 30)
    member = Member()
    apply_creation_defaults(member, ts)

    assert apply_creation_defaults(member, ts + timedelta(days=1)) is False
    assert member.created_at == ts


def test_plan_entitlements_default_to_gym_only():
    plan = MembershipPlan(plan_name="Basic", pool_access=True)
    apply_creation_defaults(plan)

    assert plan.gym_access is True
    assert plan.pool_access is True
    for flag in ENTITLEMENT_FLAGS:
        if flag not in ("gym_access", "pool_access"):
            assert getattr(plan, flag) is False, flag


def test_activity_defaults():
    ts = datetime(2024, 3, 1, 18, 0)
    payment = MembershipPayment()
    visit = CheckIn()
    apply_creation_defaults(payment, ts)
    apply_creation_defaults(visit, ts)

    assert payment.status == PaymentStatus.PENDING
    assert payment.payment_date == date(2024, 3, 1)
    assert visit.check_in_time == ts
    assert visit.check_out_time is None


def test_touch_strictly_increases_updated_at():
    """
    Verifies:
    - touch() moves updated_at forward even when the clock has not advanced
    - created_at is left alone
    """
    ts = datetime(2024, 3, 1, 10, 30)
    member = Member()
    apply_creation_defaults(member, ts)

    first = touch(member, ts)
    second = touch(member, ts)

    assert ts < first < second
    assert member.updated_at == second
    assert member.created_at == ts


def test_touch_uses_later_clock_value():
    ts = datetime(2024, 3, 1, 10, 30)
    member = Member()
    apply_creation_defaults(member, ts)

    later = ts + timedelta(minutes=5)
    assert touch(member, later) == later
