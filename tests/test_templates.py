"""Template loading and rendering checks."""

import pytest
from django.conf import settings
from django.template.loader import get_template, render_to_string

from apps.submissions.models import EMPLOYMENT_CHOICES, GENDER_CHOICES, RELATIONSHIP_CHOICES

TEMPLATES_DIR = settings.BASE_DIR / "templates"

TEMPLATE_NAMES = sorted(str(path.relative_to(TEMPLATES_DIR)) for path in TEMPLATES_DIR.rglob("*.html"))

REQUIRED_TEMPLATES = [
    "base.html",
    "submissions/form.html",
    "dashboard/base.html",
    "dashboard/home.html",
    "dashboard/login.html",
    "dashboard/submissions/list.html",
    "dashboard/submissions/detail.html",
    "emails/submission_notification.html",
]


@pytest.mark.parametrize("template_name", TEMPLATE_NAMES, ids=TEMPLATE_NAMES)
def test_template_compiles(template_name: str) -> None:
    assert get_template(template_name) is not None


@pytest.mark.parametrize("template_name", REQUIRED_TEMPLATES)
def test_required_template_present(template_name: str) -> None:
    assert template_name in TEMPLATE_NAMES


def test_form_partials_render_choices_and_errors() -> None:
    html = render_to_string(
        "submissions/form.html",
        {
            "values": {"gender": "female", "surname": "Lovelace"},
            "errors": {"first_name": "First name is required"},
            "gender_choices": GENDER_CHOICES,
            "relationship_choices": RELATIONSHIP_CHOICES,
            "employment_choices": EMPLOYMENT_CHOICES,
        },
    )

    assert '<option value="female" selected>Female</option>' in html
    assert 'value="Lovelace"' in html
    assert "First name is required" in html
    assert "Self-Employed" in html
