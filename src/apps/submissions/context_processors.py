"""Context processors for the submissions app."""

from django.conf import settings
from django.http import HttpRequest


def site_context(request: HttpRequest) -> dict:
    """Add site-wide context variables to all templates."""
    return {
        "SITE_NAME": getattr(settings, "SITE_NAME", "Information Form"),
        "SITE_TAGLINE": "Personal Information Collection",
    }
