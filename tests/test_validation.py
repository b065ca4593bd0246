"""Tests for intake payload validation."""

import pytest

from apps.submissions.validation import (
    REQUIRED_FIELDS,
    SUBMISSION_FIELDS,
    normalise_payload,
    validate_submission,
)


class TestValidateSubmission:
    """validate_submission returns a per-field error map."""

    def test_complete_payload_is_valid(self, form_data: dict) -> None:
        assert validate_submission(form_data) == {}

    @pytest.mark.parametrize("field", sorted(REQUIRED_FIELDS))
    def test_single_missing_field_reported_alone(self, form_data: dict, field: str) -> None:
        form_data[field] = ""
        assert validate_submission(form_data) == {field: REQUIRED_FIELDS[field]}

    def test_whitespace_only_counts_as_missing(self, form_data: dict) -> None:
        form_data["surname"] = "   "
        assert validate_submission(form_data) == {"surname": "Surname is required"}

    def test_empty_payload_reports_every_required_field(self) -> None:
        errors = validate_submission({})
        assert set(errors) == set(REQUIRED_FIELDS)

    def test_optional_fields_are_never_reported(self, form_data: dict) -> None:
        optional = [name for name, _ in SUBMISSION_FIELDS if name not in REQUIRED_FIELDS]
        for name in optional:
            form_data[name] = ""
        assert validate_submission(form_data) == {}

    @pytest.mark.parametrize("email", ["not-an-email", "ada@example", "ada.example.com", "@.", "a @b.c"])
    def test_malformed_email(self, form_data: dict, email: str) -> None:
        form_data["email"] = email
        assert validate_submission(form_data) == {"email": "Email is invalid"}

    def test_missing_email_is_required_not_invalid(self, form_data: dict) -> None:
        form_data["email"] = ""
        assert validate_submission(form_data) == {"email": "Email is required"}

    def test_unparseable_date_of_birth(self, form_data: dict) -> None:
        form_data["date_of_birth"] = "10th December"
        assert validate_submission(form_data) == {"date_of_birth": "Date of birth is invalid"}

    def test_values_longer_than_the_column_are_rejected(self, form_data: dict) -> None:
        form_data["first_name"] = "A" * 101
        form_data["phone_number"] = "5" * 51

        assert validate_submission(form_data) == {
            "first_name": "First name must be at most 100 characters",
            "phone_number": "Phone number must be at most 50 characters",
        }

    def test_values_at_the_column_limit_pass(self, form_data: dict) -> None:
        form_data["surname"] = "L" * 100
        assert validate_submission(form_data) == {}


class TestNormalisePayload:
    """normalise_payload maps wire names onto model fields."""

    def test_camel_case_mapping(self, valid_payload: dict) -> None:
        data = normalise_payload(valid_payload, camel_case=True)
        assert data["first_name"] == "Ada"
        assert data["date_of_birth"] == "1815-12-10"
        assert data["middle_name"] == ""

    def test_values_are_stripped_strings(self) -> None:
        data = normalise_payload({"firstName": "  Ada ", "phoneNumber": 5550100}, camel_case=True)
        assert data["first_name"] == "Ada"
        assert data["phone_number"] == "5550100"

    def test_unknown_keys_dropped(self) -> None:
        data = normalise_payload({"first_name": "Ada", "is_admin": "yes"})
        assert "is_admin" not in data
        assert data["first_name"] == "Ada"

    def test_every_field_present(self) -> None:
        data = normalise_payload({})
        assert set(data) == {name for name, _ in SUBMISSION_FIELDS}
