"""Admin authorisation gate and passwordless sign-in links."""

import logging

from django.conf import settings
from django.core import signing
from django.core.mail import send_mail
from django.db import DatabaseError

from .models import SystemAdmin

logger = logging.getLogger(__name__)

MAGIC_LINK_SALT = "accounts.magic-link"


def is_admin_email(email: str | None) -> bool:
    """
    Return True if ``email`` belongs to the authorised admin set.

    The match is exact and case-sensitive. Lookup failures deny access.
    """
    email = (email or "").strip()
    if not email:
        return False
    try:
        return SystemAdmin.objects.filter(email=email).exists()
    except DatabaseError:
        logger.exception("Admin lookup failed, denying access")
        return False


def get_magic_link_max_age() -> int:
    """Return how long (seconds) a sign-in link stays valid."""
    return getattr(settings, "MAGIC_LINK_MAX_AGE", 900)


def make_magic_link_token(email: str) -> str:
    """Sign ``email`` into a timestamped sign-in token."""
    return signing.TimestampSigner(salt=MAGIC_LINK_SALT).sign_object({"email": email})


def read_magic_link_token(token: str) -> str | None:
    """Return the email inside a valid, unexpired token, else None."""
    signer = signing.TimestampSigner(salt=MAGIC_LINK_SALT)
    try:
        return signer.unsign_object(token, max_age=get_magic_link_max_age()).get("email")
    except signing.SignatureExpired:
        logger.info("Expired sign-in link presented")
    except signing.BadSignature:
        logger.warning("Tampered or malformed sign-in link presented")
    return None


def send_magic_link(email: str, verify_url: str) -> bool:
    """
    Email a sign-in link to an authorised admin.

    Returns False without sending when the gate rejects ``email``.
    """
    if not is_admin_email(email):
        logger.info("Sign-in link refused for unauthorised address")
        return False

    site_name = getattr(settings, "SITE_NAME", "Information Form")
    body = (
        f"Use the link below to sign in to the {site_name} dashboard:\n\n"
        f"{verify_url}\n\n"
        f"The link expires in {get_magic_link_max_age() // 60} minutes. "
        f"If you did not request it you can ignore this email.\n"
    )
    try:
        send_mail(
            subject=f"Your {site_name} sign-in link",
            message=body,
            from_email=None,
            recipient_list=[email],
            fail_silently=False,
        )
    except Exception:
        logger.exception("Failed to send sign-in link")
        return False
    logger.info("Sign-in link sent to an admin at %s", email.split("@")[-1])
    return True
