"""Outbound spreadsheet webhook bridge (Google Sheets Apps Script style)."""

import asyncio
import json
import logging
from collections.abc import Iterable
from dataclasses import dataclass

from django.conf import settings

from .exceptions import ExportError
from .export_config import ExportTarget
from .models import Submission

logger = logging.getLogger(__name__)

HEADERS = {
    "Content-Type": "application/json",
    "User-Agent": "InfoForm-Sheets/1.0",
}


@dataclass
class ExportResult:
    """Outcome of one export call."""

    attempted: bool = False
    ok: bool = False
    status: int | None = None
    error: str = ""
    count: int = 0

    @property
    def configured(self) -> bool:
        return self.attempted or self.ok


def _text(value) -> str:
    if value is None:
        return ""
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def serialize_submission(submission: Submission) -> dict:
    """Render a submission in the spreadsheet's camelCase schema."""
    return {
        "id": str(submission.pk),
        "firstName": submission.first_name,
        "middleName": submission.middle_name or "",
        "surname": submission.surname,
        "gender": submission.gender,
        "dateOfBirth": _text(submission.date_of_birth),
        "email": submission.email,
        "phoneNumber": submission.phone_number,
        "employmentStatus": submission.employment_status,
        "stateOfOrigin": submission.state_of_origin,
        "academicQualifications": submission.academic_qualifications or "",
        "professionalQualifications": submission.professional_qualifications or "",
        "skillsSet": submission.skills_set or "",
        "primarySchool": submission.primary_school or "",
        "secondarySchool": submission.secondary_school or "",
        "college": submission.college or "",
        "socialGroupMembership": submission.social_group_membership or "",
        "relationshipStatus": submission.relationship_status,
        "localGovernment": submission.local_government,
        "residentialAddress": submission.residential_address or "",
        "socialMediaPages": submission.social_media_pages or "",
        "submittedAt": _text(submission.created_at),
    }


def _post_json(url: str, payload: dict) -> int:
    """Synchronous webhook POST (for use in executors). Returns the HTTP status."""
    from urllib.request import Request, urlopen

    req = Request(  # noqa: S310
        url,
        data=json.dumps(payload).encode(),
        headers=HEADERS,
        method="POST",
    )
    timeout = getattr(settings, "SHEETS_WEBHOOK_TIMEOUT", 10)
    with urlopen(req, timeout=timeout) as response:  # noqa: S310
        return response.status


async def push_submission(submission: Submission, target: ExportTarget | None) -> ExportResult:
    """
    Send one new submission to the export target.

    Best-effort: nothing is sent when the target is missing or disabled, and
    delivery errors are logged and returned rather than raised.
    """
    if target is None or not target.active:
        logger.debug("No export target configured, skipping sync for submission %s", submission.pk)
        return ExportResult()

    payload = {"submission": serialize_submission(submission)}
    loop = asyncio.get_running_loop()
    try:
        status = await loop.run_in_executor(None, _post_json, target.url, payload)
    except Exception as exc:
        logger.warning("Spreadsheet sync failed for submission %s: %s", submission.pk, exc)
        return ExportResult(attempted=True, error=str(exc)[:500], count=1)

    logger.info("Spreadsheet sync for submission %s returned %s", submission.pk, status)
    return ExportResult(attempted=True, ok=200 <= status < 300, status=status, count=1)


async def push_submissions(submissions: Iterable[Submission], url: str) -> ExportResult:
    """
    Send a batch of submissions to ``url``.

    Used from a foreground admin action: an empty URL or empty batch is
    reported in the result, delivery failure raises :class:`ExportError`.
    """
    url = (url or "").strip()
    if not url:
        return ExportResult()

    rows = [serialize_submission(submission) for submission in submissions]
    if not rows:
        return ExportResult(attempted=False, ok=True)

    loop = asyncio.get_running_loop()
    try:
        status = await loop.run_in_executor(None, _post_json, url, {"submissions": rows})
    except Exception as exc:
        logger.warning("Batch spreadsheet export of %d submissions failed: %s", len(rows), exc)
        raise ExportError("Failed to export to Google Sheets. Please check your URL and try again.") from exc

    logger.info("Batch spreadsheet export of %d submissions returned %s", len(rows), status)
    return ExportResult(attempted=True, ok=True, status=status, count=len(rows))
