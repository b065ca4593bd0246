"""Account models: sign-in identities and the authorised admin set."""

from typing import ClassVar

from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models


class EmailUserManager(UserManager):
    """Custom user manager with email-based user creation."""

    def create_superuser(self, username=None, email=None, password=None, **extra_fields):
        """Create a superuser with email as username if username not provided."""
        if not username and email:
            username = email
        return super().create_superuser(username, email, password, **extra_fields)

    def get_or_create_for_email(self, email: str):
        """Return the user signing in with ``email``, creating one on first sign-in."""
        user, created = self.get_or_create(
            email=email,
            defaults={"username": email},
        )
        if created:
            user.set_unusable_password()
            user.save(update_fields=["password"])
        return user


class User(AbstractUser):
    """
    Sign-in identity.

    Being able to sign in grants nothing on its own; admin access is decided by
    membership of :class:`SystemAdmin`.
    """

    email = models.EmailField("email address", unique=True)

    objects = EmailUserManager()

    class Meta:
        verbose_name = "user"
        verbose_name_plural = "users"
        ordering: ClassVar[list[str]] = ["-date_joined"]

    def __str__(self) -> str:
        return self.email or self.username


class SystemAdmin(models.Model):
    """An email address authorised to use the admin dashboard."""

    email = models.EmailField("email address", unique=True)
    created_at = models.DateTimeField("added", auto_now_add=True)

    class Meta:
        ordering: ClassVar[list[str]] = ["email"]
        verbose_name = "system admin"
        verbose_name_plural = "system admins"

    def __str__(self) -> str:
        return self.email
