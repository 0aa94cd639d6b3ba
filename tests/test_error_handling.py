"""
Error handling tests.

This test suite covers how failures surface through the API:
- Validation errors (every failing field listed, 422)
- Constraint violations (duplicates, missing references, stale versions, 409)
- Not found errors (404)
- Request parsing errors (422 with REQUEST_VALIDATION_ERROR)
"""

import uuid
from datetime import date, timedelta

from app.exceptions import ConstraintViolation, RecordValidationError, Violation
from test_fixtures import client, db_session, member_data, plan_data, trainer_data


def error_of(response):
    body = response.json()
    assert body["success"] is False
    assert "timestamp" in body
    return body["error"]


def violation_map(error):
    return {v["field"]: v["rule"] for v in error["details"]["violations"]}


# =============================================================================
# EXCEPTION TYPES
# =============================================================================


def test_record_validation_error_payload():
    err = RecordValidationError(
        "Member",
        [
            Violation("email", "email", "Email should be valid"),
            Violation("first_name", "length", "First name must be between 2 and 50 characters"),
        ],
    )

    assert err.http_status == 422
    assert err.fields == {"email", "first_name"}
    assert str(err) == "Member failed validation: email, first_name"
    assert err.to_dict()["code"] == "VALIDATION_ERROR"


def test_constraint_violation_helpers():
    dup = ConstraintViolation.duplicate("Member", "email", "a@example.com")
    missing = ConstraintViolation.missing_reference("Member", "membership_plan_id", "x")

    assert dup.http_status == 409
    assert [(v.field, v.rule) for v in dup.violations] == [("email", "unique")]
    assert [(v.field, v.rule) for v in missing.violations] == [
        ("membership_plan_id", "reference")
    ]


# =============================================================================
# VALIDATION ERRORS
# =============================================================================


def test_invalid_member_lists_every_field(client):
    """
    Verifies:
    - one request reports all invalid fields together
    - nothing is stored
    """
    response = client.post(
        "/members",
        json=member_data(
            first_name="J",
            phone_number="555",
            email="nope",
            date_of_birth=(date.today() + timedelta(days=1)).isoformat(),
        ),
    )

    assert response.status_code == 422
    error = error_of(response)
    assert error["code"] == "VALIDATION_ERROR"
    assert violation_map(error) == {
        "first_name": "length",
        "phone_number": "pattern",
        "email": "email",
        "date_of_birth": "past",
    }
    assert client.get("/members").json() == []


def test_missing_required_fields(client):
    response = client.post("/trainers", json={"first_name": "Marcus"})

    assert response.status_code == 422
    rules = violation_map(error_of(response))
    assert "first_name" not in rules
    assert rules["certification"] == "required"
    assert rules["hourly_rate"] == "required"
    assert "status" not in rules
    assert "hire_date" not in rules


def test_malformed_body_is_request_validation_error(client):
    response = client.post("/members", json=member_data(date_of_birth="not-a-date"))

    assert response.status_code == 422
    assert error_of(response)["code"] == "REQUEST_VALIDATION_ERROR"


def test_partial_update_that_breaks_record(client):
    member = client.post("/members", json=member_data()).json()

    response = client.patch(f"/members/{member['id']}", json={"phone_number": "abc"})

    assert response.status_code == 422
    assert violation_map(error_of(response)) == {"phone_number": "pattern"}
    assert client.get(f"/members/{member['id']}").json()["version"] == 1


# =============================================================================
# CONSTRAINT VIOLATIONS
# =============================================================================


def test_duplicate_member_email(client):
    first = client.post("/members", json=member_data()).json()

    response = client.post("/members", json=member_data(email=first["email"]))

    assert response.status_code == 409
    error = error_of(response)
    assert error["code"] == "CONSTRAINT_VIOLATION"
    assert violation_map(error) == {"email": "unique"}


def test_duplicate_trainer_number(client):
    first = client.post("/trainers", json=trainer_data()).json()

    response = client.post("/trainers", json=trainer_data(trainer_id=first["trainer_id"]))

    assert response.status_code == 409
    assert violation_map(error_of(response)) == {"trainer_id": "unique"}


def test_unknown_plan_reference(client):
    response = client.post(
        "/members", json=member_data(membership_plan_id=str(uuid.uuid4()))
    )

    assert response.status_code == 409
    assert violation_map(error_of(response)) == {"membership_plan_id": "reference"}


def test_stale_version_update(client):
    plan = client.post("/membership-plans", json=plan_data()).json()
    client.patch(f"/membership-plans/{plan['id']}", json={"guest_passes": 2})

    response = client.patch(
        f"/membership-plans/{plan['id']}",
        json={"guest_passes": 5, "expected_version": plan["version"]},
    )

    assert response.status_code == 409
    assert violation_map(error_of(response)) == {"version": "stale_version"}
    assert client.get(f"/membership-plans/{plan['id']}").json()["guest_passes"] == 2


# =============================================================================
# NOT FOUND ERRORS
# =============================================================================


def test_missing_records_return_404(client):
    missing = uuid.uuid4()
    for path in (
        f"/members/{missing}",
        f"/members/by-member-id/M-NOPE",
        f"/members/by-email/nobody@example.com",
        f"/trainers/{missing}",
        f"/membership-plans/{missing}",
        f"/payments/{missing}",
        f"/check-ins/{missing}",
        f"/workout-sessions/{missing}",
        f"/classes/{missing}",
    ):
        response = client.get(path)
        assert response.status_code == 404, path
        assert error_of(response)["code"] == "NOT_FOUND"


def test_update_and_delete_missing(client):
    missing = uuid.uuid4()
    assert client.patch(f"/members/{missing}", json={"city": "X"}).status_code == 404
    assert client.delete(f"/members/{missing}").status_code == 404
    assert client.delete(f"/membership-plans/{missing}").status_code == 404
    assert client.post(f"/check-ins/{missing}/check-out").status_code == 404


def test_unknown_route_uses_error_envelope(client):
    response = client.get("/no-such-route")
    assert response.status_code == 404
    assert error_of(response)["code"] == "HTTP_404"
