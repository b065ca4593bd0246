"""Initial migration for submissions app - Submission model."""

import uuid

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Submission",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("first_name", models.CharField(max_length=100, verbose_name="first name")),
                ("middle_name", models.CharField(blank=True, default="", max_length=100, verbose_name="middle name")),
                ("surname", models.CharField(max_length=100, verbose_name="surname")),
                (
                    "gender",
                    models.CharField(
                        choices=[("male", "Male"), ("female", "Female"), ("other", "Other")],
                        max_length=20,
                        verbose_name="gender",
                    ),
                ),
                ("date_of_birth", models.DateField(verbose_name="date of birth")),
                (
                    "academic_qualifications",
                    models.TextField(blank=True, default="", verbose_name="academic qualifications"),
                ),
                (
                    "professional_qualifications",
                    models.TextField(blank=True, default="", verbose_name="professional qualifications"),
                ),
                ("skills_set", models.TextField(blank=True, default="", verbose_name="skills")),
                (
                    "primary_school",
                    models.CharField(blank=True, default="", max_length=255, verbose_name="primary school"),
                ),
                (
                    "secondary_school",
                    models.CharField(blank=True, default="", max_length=255, verbose_name="secondary school"),
                ),
                (
                    "college",
                    models.CharField(blank=True, default="", max_length=255, verbose_name="college/university"),
                ),
                (
                    "social_group_membership",
                    models.TextField(blank=True, default="", verbose_name="social group membership"),
                ),
                (
                    "relationship_status",
                    models.CharField(
                        choices=[
                            ("single", "Single"),
                            ("married", "Married"),
                            ("divorced", "Divorced"),
                            ("widowed", "Widowed"),
                        ],
                        max_length=20,
                        verbose_name="relationship status",
                    ),
                ),
                ("social_media_pages", models.TextField(blank=True, default="", verbose_name="social media pages")),
                ("state_of_origin", models.CharField(max_length=100, verbose_name="state of origin")),
                ("local_government", models.CharField(max_length=100, verbose_name="local government")),
                ("residential_address", models.TextField(blank=True, default="", verbose_name="residential address")),
                (
                    "employment_status",
                    models.CharField(
                        choices=[
                            ("employed", "Employed"),
                            ("self-employed", "Self-Employed"),
                            ("unemployed", "Unemployed"),
                            ("student", "Student"),
                        ],
                        max_length=20,
                        verbose_name="employment status",
                    ),
                ),
                ("phone_number", models.CharField(max_length=50, verbose_name="phone number")),
                ("email", models.EmailField(max_length=254, verbose_name="email")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True, verbose_name="submitted")),
            ],
            options={
                "verbose_name": "submission",
                "verbose_name_plural": "submissions",
                "ordering": ["-created_at"],
            },
        ),
    ]
