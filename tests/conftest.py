"""Pytest fixtures for the information form tests."""

import pytest
from django.core.cache import cache
from django.test import Client

ADMIN_EMAIL = "admin@example.com"


@pytest.fixture(autouse=True)
def _clear_cache():
    """The export target lives in the cache; start every test without one."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def valid_payload() -> dict:
    """A camelCase intake payload with every required field."""
    return {
        "firstName": "Ada",
        "surname": "Lovelace",
        "gender": "female",
        "dateOfBirth": "1815-12-10",
        "relationshipStatus": "single",
        "stateOfOrigin": "Lagos",
        "localGovernment": "Ikeja",
        "employmentStatus": "employed",
        "phoneNumber": "555-0100",
        "email": "ada@example.com",
    }


@pytest.fixture
def form_data() -> dict:
    """The same submission keyed by model field names."""
    return {
        "first_name": "Ada",
        "middle_name": "",
        "surname": "Lovelace",
        "gender": "female",
        "date_of_birth": "1815-12-10",
        "relationship_status": "single",
        "state_of_origin": "Lagos",
        "local_government": "Ikeja",
        "employment_status": "employed",
        "phone_number": "555-0100",
        "email": "ada@example.com",
    }


@pytest.fixture
def submission(db, form_data):
    """A stored submission."""
    from apps.submissions.models import Submission

    return Submission.objects.create(**form_data)


@pytest.fixture
def system_admin(db):
    """An authorised admin address."""
    from apps.accounts.models import SystemAdmin

    return SystemAdmin.objects.create(email=ADMIN_EMAIL)


@pytest.fixture
def admin_user(system_admin):
    """A signed-in identity whose email is in the authorised set."""
    from apps.accounts.models import User

    return User.objects.create_user(username=ADMIN_EMAIL, email=ADMIN_EMAIL, password="testpass123")


@pytest.fixture
def admin_client(admin_user) -> Client:
    """Return a client logged in as admin."""
    client = Client()
    client.force_login(admin_user)
    return client


@pytest.fixture
def member_client(db) -> Client:
    """Return a client logged in as a user who is not an admin."""
    from apps.accounts.models import User

    user = User.objects.create_user(username="member@example.com", email="member@example.com", password="x")
    client = Client()
    client.force_login(user)
    return client
