"""Spreadsheet export target configuration."""

import logging
from dataclasses import dataclass

from django.conf import settings
from django.core.cache import cache
from django.core.exceptions import ValidationError
from django.core.validators import URLValidator

logger = logging.getLogger(__name__)

CACHE_KEY = "submissions:export-target"

_url_validator = URLValidator(schemes=["http", "https"])


def validate_target_url(url: str) -> str:
    """Return the stripped URL, raising ValidationError unless it is http(s)."""
    url = (url or "").strip()
    if not url:
        raise ValidationError("Please enter your Google Sheets Apps Script URL.")
    _url_validator(url)
    return url


@dataclass(frozen=True)
class ExportTarget:
    """A spreadsheet webhook endpoint."""

    url: str = ""
    enabled: bool = False

    @property
    def active(self) -> bool:
        return self.enabled and bool(self.url)


def get_export_target() -> ExportTarget:
    """
    Return the active export target for this deployment.

    An admin-set target (or an explicit disable) held in the cache wins over
    the ``GOOGLE_SHEETS_URL`` setting.
    """
    stored = cache.get(CACHE_KEY)
    if stored is not None:
        return ExportTarget(url=stored.get("url", ""), enabled=bool(stored.get("enabled")))
    url = getattr(settings, "GOOGLE_SHEETS_URL", "") or ""
    return ExportTarget(url=url, enabled=bool(url))


def enable_export_target(url: str) -> ExportTarget:
    """Store ``url`` as the active target. Raises ValidationError for bad URLs."""
    url = validate_target_url(url)
    cache.set(CACHE_KEY, {"url": url, "enabled": True}, timeout=None)
    logger.info("Spreadsheet export enabled")
    return ExportTarget(url=url, enabled=True)


def disable_export_target() -> ExportTarget:
    """Turn export off until a target is enabled again."""
    cache.set(CACHE_KEY, {"url": "", "enabled": False}, timeout=None)
    logger.info("Spreadsheet export disabled")
    return ExportTarget()
