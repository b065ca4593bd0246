"""CSV rendering of the submission list."""

import csv
import io
from collections.abc import Iterable
from datetime import date, datetime

from django.utils import timezone
from django.utils.formats import date_format

from .models import Submission

CSV_HEADERS = [
    "ID",
    "First Name",
    "Middle Name",
    "Surname",
    "Gender",
    "Date of Birth",
    "Email",
    "Phone Number",
    "Employment Status",
    "State of Origin",
    "Submitted At",
]


def _short_date(value) -> str:
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return date_format(value.date(), "SHORT_DATE_FORMAT")
    if isinstance(value, date):
        return date_format(value, "SHORT_DATE_FORMAT")
    return str(value or "")


def render_submissions_csv(submissions: Iterable[Submission]) -> str:
    """Render submissions as CSV: one header row, one quoted row per submission."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for submission in submissions:
        writer.writerow(
            [
                str(submission.pk),
                submission.first_name,
                submission.middle_name or "",
                submission.surname,
                submission.gender,
                _short_date(submission.date_of_birth),
                submission.email,
                submission.phone_number,
                submission.employment_status,
                submission.state_of_origin,
                _short_date(submission.created_at),
            ]
        )
    return buffer.getvalue()


def export_filename(today: date | None = None) -> str:
    """Download name for a CSV export taken on ``today``."""
    today = today or timezone.localdate()
    return f"form_submissions_{today:%Y-%m-%d}.csv"
