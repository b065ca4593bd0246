"""Validation and normalisation of incoming form payloads."""

import re
from datetime import date

from django.utils.text import capfirst

from .models import Submission

# (model field, camelCase wire name)
SUBMISSION_FIELDS: list[tuple[str, str]] = [
    ("first_name", "firstName"),
    ("middle_name", "middleName"),
    ("surname", "surname"),
    ("gender", "gender"),
    ("date_of_birth", "dateOfBirth"),
    ("academic_qualifications", "academicQualifications"),
    ("professional_qualifications", "professionalQualifications"),
    ("skills_set", "skillsSet"),
    ("primary_school", "primarySchool"),
    ("secondary_school", "secondarySchool"),
    ("college", "college"),
    ("social_group_membership", "socialGroupMembership"),
    ("relationship_status", "relationshipStatus"),
    ("state_of_origin", "stateOfOrigin"),
    ("local_government", "localGovernment"),
    ("residential_address", "residentialAddress"),
    ("employment_status", "employmentStatus"),
    ("phone_number", "phoneNumber"),
    ("email", "email"),
    ("social_media_pages", "socialMediaPages"),
]

CAMEL_TO_FIELD = {camel: field for field, camel in SUBMISSION_FIELDS}
FIELD_TO_CAMEL = dict(SUBMISSION_FIELDS)

REQUIRED_FIELDS: dict[str, str] = {
    "first_name": "First name is required",
    "surname": "Surname is required",
    "gender": "Gender is required",
    "date_of_birth": "Date of birth is required",
    "relationship_status": "Relationship status is required",
    "state_of_origin": "State of origin is required",
    "local_government": "Local government is required",
    "employment_status": "Employment status is required",
    "phone_number": "Phone number is required",
    "email": "Email is required",
}

EMAIL_PATTERN = re.compile(r"\S+@\S+\.\S+")


def normalise_payload(raw: dict, *, camel_case: bool = False) -> dict[str, str]:
    """
    Map a raw payload onto model field names.

    Values become stripped strings; unknown keys are dropped and missing keys
    become empty strings.
    """
    names = CAMEL_TO_FIELD if camel_case else {field: field for field, _ in SUBMISSION_FIELDS}
    data = {field: "" for field, _ in SUBMISSION_FIELDS}
    for key, field in names.items():
        value = raw.get(key)
        if value is not None:
            data[field] = str(value).strip()
    return data


def validate_submission(data: dict[str, str]) -> dict[str, str]:
    """Return a field -> message map of problems. Empty means valid."""
    errors: dict[str, str] = {}
    for field, message in REQUIRED_FIELDS.items():
        if not str(data.get(field) or "").strip():
            errors[field] = message

    email = str(data.get("email") or "").strip()
    if email and not EMAIL_PATTERN.search(email):
        errors["email"] = "Email is invalid"

    dob = str(data.get("date_of_birth") or "").strip()
    if dob:
        try:
            date.fromisoformat(dob)
        except ValueError:
            errors["date_of_birth"] = "Date of birth is invalid"

    for field, _ in SUBMISSION_FIELDS:
        model_field = Submission._meta.get_field(field)
        max_length = model_field.max_length
        if field in errors or max_length is None:
            continue
        if len(str(data.get(field) or "").strip()) > max_length:
            errors[field] = f"{capfirst(model_field.verbose_name)} must be at most {max_length} characters"
    return errors
