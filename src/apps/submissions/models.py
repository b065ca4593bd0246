"""Submission models."""

import uuid
from typing import ClassVar

from django.db import models

GENDER_CHOICES = [
    ("male", "Male"),
    ("female", "Female"),
    ("other", "Other"),
]

RELATIONSHIP_CHOICES = [
    ("single", "Single"),
    ("married", "Married"),
    ("divorced", "Divorced"),
    ("widowed", "Widowed"),
]

EMPLOYMENT_CHOICES = [
    ("employed", "Employed"),
    ("self-employed", "Self-Employed"),
    ("unemployed", "Unemployed"),
    ("student", "Student"),
]


class Submission(models.Model):
    """One completed information form. Rows are never edited after creation."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Personal
    first_name = models.CharField("first name", max_length=100)
    middle_name = models.CharField("middle name", max_length=100, blank=True, default="")
    surname = models.CharField("surname", max_length=100)
    gender = models.CharField("gender", max_length=20, choices=GENDER_CHOICES)
    date_of_birth = models.DateField("date of birth")

    # Education & skills
    academic_qualifications = models.TextField("academic qualifications", blank=True, default="")
    professional_qualifications = models.TextField("professional qualifications", blank=True, default="")
    skills_set = models.TextField("skills", blank=True, default="")
    primary_school = models.CharField("primary school", max_length=255, blank=True, default="")
    secondary_school = models.CharField("secondary school", max_length=255, blank=True, default="")
    college = models.CharField("college/university", max_length=255, blank=True, default="")

    # Social
    social_group_membership = models.TextField("social group membership", blank=True, default="")
    relationship_status = models.CharField("relationship status", max_length=20, choices=RELATIONSHIP_CHOICES)
    social_media_pages = models.TextField("social media pages", blank=True, default="")

    # Location
    state_of_origin = models.CharField("state of origin", max_length=100)
    local_government = models.CharField("local government", max_length=100)
    residential_address = models.TextField("residential address", blank=True, default="")

    # Employment & contact
    employment_status = models.CharField("employment status", max_length=20, choices=EMPLOYMENT_CHOICES)
    phone_number = models.CharField("phone number", max_length=50)
    email = models.EmailField("email")

    created_at = models.DateTimeField("submitted", auto_now_add=True, db_index=True)

    class Meta:
        ordering: ClassVar[list[str]] = ["-created_at"]
        verbose_name = "submission"
        verbose_name_plural = "submissions"

    def __str__(self) -> str:
        return f"{self.full_name} - {self.email} ({self.created_at:%Y-%m-%d})"

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.middle_name, self.surname) if part)
