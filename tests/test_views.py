"""Tests for the public form and the JSON intake API."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from django.core import mail
from django.db import DatabaseError
from django.test import Client
from django.urls import reverse

from apps.submissions.models import Submission


@pytest.mark.django_db
class TestPublicViews:
    """Test public-facing views."""

    def test_form_page_loads(self, client: Client) -> None:
        response = client.get(reverse("submissions:form"))
        assert response.status_code == 200
        assert b"Personal Information Form" in response.content

    def test_dashboard_requires_login(self, client: Client) -> None:
        response = client.get(reverse("submissions:dashboard"))
        assert response.status_code == 302
        assert "/dashboard/login/" in response.url

    def test_dashboard_login_page_loads(self, client: Client) -> None:
        response = client.get(reverse("accounts:login"))
        assert response.status_code == 200


@pytest.mark.django_db
class TestSubmissionAPI:
    """POST /api/submissions/ with a camelCase JSON body."""

    def _post(self, client: Client, payload) -> object:
        body = payload if isinstance(payload, str) else json.dumps(payload)
        return client.post(reverse("submissions:api_submit"), data=body, content_type="application/json")

    def test_valid_submission(self, client: Client, valid_payload: dict) -> None:
        response = self._post(client, valid_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        stored = Submission.objects.get()
        assert data["submissionId"] == str(stored.pk)
        assert stored.local_government == "Ikeja"
        assert len(mail.outbox) == 1

    def test_invalid_email(self, client: Client, valid_payload: dict) -> None:
        valid_payload["email"] = "not-an-email"
        response = self._post(client, valid_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "Validation failed", "details": {"email": "Email is invalid"}}
        assert Submission.objects.count() == 0

    def test_missing_fields_reported_in_camel_case(self, client: Client, valid_payload: dict) -> None:
        del valid_payload["stateOfOrigin"]
        valid_payload["phoneNumber"] = ""
        response = self._post(client, valid_payload)

        assert response.status_code == 400
        assert response.json()["details"] == {
            "stateOfOrigin": "State of origin is required",
            "phoneNumber": "Phone number is required",
        }

    def test_overlong_value_is_a_field_error(self, client: Client, valid_payload: dict) -> None:
        valid_payload["firstName"] = "A" * 101
        response = self._post(client, valid_payload)

        assert response.status_code == 400
        assert response.json()["details"] == {"firstName": "First name must be at most 100 characters"}
        assert Submission.objects.count() == 0

    def test_invalid_json(self, client: Client) -> None:
        response = self._post(client, "{not json")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid JSON body"}

    def test_non_object_json(self, client: Client) -> None:
        response = self._post(client, "[1, 2, 3]")
        assert response.status_code == 400

    def test_duplicate_posts_create_two_records(self, client: Client, valid_payload: dict) -> None:
        first = self._post(client, valid_payload).json()
        second = self._post(client, valid_payload).json()

        assert first["submissionId"] != second["submissionId"]
        assert Submission.objects.count() == 2

    def test_persistence_failure_is_generic(self, client: Client, valid_payload: dict) -> None:
        with patch.object(
            Submission.objects,
            "acreate",
            new_callable=AsyncMock,
            side_effect=DatabaseError("relation form_submissions does not exist"),
        ):
            response = self._post(client, valid_payload)

        assert response.status_code == 500
        body = response.json()
        assert "does not exist" not in body["error"]
        assert "success" not in body

    def test_notification_failure_still_succeeds(self, client: Client, valid_payload: dict) -> None:
        with patch(
            "apps.submissions.services.send_submission_notification",
            new_callable=AsyncMock,
            side_effect=RuntimeError("boom"),
        ):
            response = self._post(client, valid_payload)

        assert response.status_code == 200
        assert Submission.objects.filter(pk=response.json()["submissionId"]).exists()

    def test_get_not_allowed(self, client: Client) -> None:
        response = client.get(reverse("submissions:api_submit"))
        assert response.status_code == 405


@pytest.mark.django_db
class TestSubmissionFormPost:
    """POST /submit/ from the HTML form."""

    def test_valid_post_redirects(self, client: Client, form_data: dict) -> None:
        response = client.post(reverse("submissions:submit"), data=form_data)

        assert response.status_code == 302
        assert response.url == reverse("submissions:form")
        assert Submission.objects.count() == 1

    def test_invalid_post_rerenders_with_errors(self, client: Client, form_data: dict) -> None:
        form_data["first_name"] = ""
        form_data["email"] = "ada-at-example"
        response = client.post(reverse("submissions:submit"), data=form_data)

        assert response.status_code == 400
        assert b"First name is required" in response.content
        assert b"Email is invalid" in response.content
        # Entered values are kept
        assert b"Lovelace" in response.content
        assert Submission.objects.count() == 0
