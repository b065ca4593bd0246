"""Admin email notification for new submissions."""

import logging
from email.utils import formataddr

from asgiref.sync import sync_to_async
from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string

from .models import Submission

logger = logging.getLogger(__name__)

NOT_PROVIDED = "Not provided"


def _or_not_provided(value) -> str:
    return str(value) if value else NOT_PROVIDED


def build_notification_sections(submission: Submission) -> list[tuple[str, list[tuple[str, str]]]]:
    """Group every submission field under a heading, substituting blanks."""
    return [
        (
            "Personal Information",
            [
                ("Name", submission.full_name),
                ("Gender", submission.get_gender_display()),
                ("Date of Birth", _or_not_provided(submission.date_of_birth)),
                ("Email", submission.email),
                ("Phone", submission.phone_number),
            ],
        ),
        (
            "Location Information",
            [
                ("State of Origin", submission.state_of_origin),
                ("Local Government", submission.local_government),
                ("Residential Address", _or_not_provided(submission.residential_address)),
            ],
        ),
        (
            "Employment & Education",
            [
                ("Employment Status", submission.get_employment_status_display()),
                ("Relationship Status", submission.get_relationship_status_display()),
                ("Academic Qualifications", _or_not_provided(submission.academic_qualifications)),
                ("Professional Qualifications", _or_not_provided(submission.professional_qualifications)),
                ("Skills", _or_not_provided(submission.skills_set)),
            ],
        ),
        (
            "Schools Attended",
            [
                ("Primary School", _or_not_provided(submission.primary_school)),
                ("Secondary School", _or_not_provided(submission.secondary_school)),
                ("College/University", _or_not_provided(submission.college)),
            ],
        ),
        (
            "Social",
            [
                ("Social Group Membership", _or_not_provided(submission.social_group_membership)),
                ("Social Media Pages", _or_not_provided(submission.social_media_pages)),
            ],
        ),
    ]


def build_notification_message(submission: Submission) -> EmailMultiAlternatives | None:
    """Return the notification email, or None when no recipient is configured."""
    recipient: str = getattr(settings, "ADMIN_NOTIFICATION_EMAIL", "")
    if not recipient:
        return None

    sections = build_notification_sections(submission)
    dashboard_url = f"{settings.SITE_URL}/dashboard/submissions/{submission.pk}/"

    # Plain text version
    lines = ["A new form submission has been received with the following details:", ""]
    for heading, rows in sections:
        lines.append(heading)
        lines.extend(f"  {label}: {value}" for label, value in rows)
        lines.append("")
    lines.append(f"Submission ID: {submission.pk}")
    lines.append(f"Submitted At: {submission.created_at:%Y-%m-%d %H:%M}")
    lines.append(f"View in dashboard: {dashboard_url}")
    text_body = "\n".join(lines) + "\n"

    # HTML version
    html_body = render_to_string(
        "emails/submission_notification.html",
        {
            "submission": submission,
            "sections": sections,
            "dashboard_url": dashboard_url,
        },
    )

    msg = EmailMultiAlternatives(
        subject="New Form Submission Received",
        body=text_body,
        from_email=settings.DEFAULT_FROM_EMAIL,
        to=[recipient],
        reply_to=[formataddr((submission.full_name, submission.email))],
    )
    msg.attach_alternative(html_body, "text/html")
    return msg


async def send_submission_notification(submission: Submission) -> bool:
    """
    Email the administrator about a stored submission.

    Never raises; returns True only when the message was handed to the backend.
    """
    try:
        msg = build_notification_message(submission)
        if msg is None:
            logger.warning("No ADMIN_NOTIFICATION_EMAIL configured, skipping notification.")
            return False
        await sync_to_async(msg.send)(fail_silently=False)
    except Exception:
        logger.exception("Failed to send notification for submission %s", submission.pk)
        return False

    logger.info("Submission notification sent for %s", submission.pk)
    return True
