"""Submission intake workflow."""

import asyncio
import logging
from dataclasses import dataclass, field

from asgiref.sync import sync_to_async
from django.conf import settings
from django.db import DatabaseError

from .exceptions import PersistenceError, SubmissionValidationError
from .export_config import ExportTarget, get_export_target
from .models import Submission
from .notifications import send_submission_notification
from .sheets import ExportResult, push_submission
from .validation import SUBMISSION_FIELDS, validate_submission

logger = logging.getLogger(__name__)


@dataclass
class IntakeResult:
    """What happened during one intake. Only ``submission`` is shown to submitters."""

    submission: Submission
    notified: bool = False
    export: ExportResult = field(default_factory=ExportResult)


async def _best_effort(func, *args, label: str, default):
    """Run a side effect with a timeout, logging instead of raising on failure."""
    timeout = getattr(settings, "SIDE_EFFECT_TIMEOUT", 15)
    try:
        return await asyncio.wait_for(func(*args), timeout=timeout)
    except TimeoutError:
        logger.warning("%s timed out after %ss", label, timeout)
    except Exception:
        logger.exception("%s failed", label)
    return default


async def process_submission(
    data: dict[str, str],
    *,
    export_target: ExportTarget | None = None,
) -> IntakeResult:
    """
    Validate, store and announce a form submission.

    Steps:
        1. Validate ``data`` (model field names). Raises
           SubmissionValidationError; nothing is stored.
        2. Insert the row. Raises PersistenceError on database failure.
        3. Concurrently email the admin and push the row to the export
           target. Failures here are logged and never undo step 2.

    ``export_target`` defaults to the deployment's active target.
    """
    errors = validate_submission(data)
    if errors:
        raise SubmissionValidationError(errors)

    values = {name: data.get(name, "") for name, _ in SUBMISSION_FIELDS}
    try:
        submission = await Submission.objects.acreate(**values)
    except DatabaseError as exc:
        logger.exception("Failed to save form submission")
        raise PersistenceError("Failed to save form submission") from exc

    logger.info("Form submission %s saved", submission.pk)

    if export_target is None:
        export_target = await sync_to_async(get_export_target)()

    notified, export = await asyncio.gather(
        _best_effort(
            send_submission_notification,
            submission,
            label=f"Notification for submission {submission.pk}",
            default=False,
        ),
        _best_effort(
            push_submission,
            submission,
            export_target,
            label=f"Spreadsheet sync for submission {submission.pk}",
            default=ExportResult(attempted=True),
        ),
    )
    return IntakeResult(submission=submission, notified=notified, export=export)
