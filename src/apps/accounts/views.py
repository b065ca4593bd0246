"""Admin sign-in views and the admin access mixin."""

import logging

from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.http import HttpRequest, HttpResponse
from django.shortcuts import redirect, render
from django.urls import reverse
from django.views import View

from . import services
from .models import User

logger = logging.getLogger(__name__)

NEUTRAL_LINK_MESSAGE = "If this address is authorised, a sign-in link is on its way. Please check your email."


class AdminRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """
    Mixin that requires the signed-in user to be in the authorised admin set.

    The set is consulted on every request, so a revoked admin loses access on
    their next page load.
    """

    def test_func(self) -> bool:
        return services.is_admin_email(self.request.user.email)

    def handle_no_permission(self):
        if not self.request.user.is_authenticated:
            return super().handle_no_permission()
        logger.warning("Denied dashboard access to user #%s", self.request.user.pk)
        messages.error(self.request, "Access denied.")
        return redirect("submissions:form")


class AdminLoginView(View):
    """Ask for an admin email and send a sign-in link."""

    template_name = "dashboard/login.html"

    def get(self, request: HttpRequest) -> HttpResponse:
        if request.user.is_authenticated and services.is_admin_email(request.user.email):
            return redirect("submissions:dashboard")
        return render(request, self.template_name)

    def post(self, request: HttpRequest) -> HttpResponse:
        email = request.POST.get("email", "").strip()

        if services.is_admin_email(email):
            token = services.make_magic_link_token(email)
            verify_url = request.build_absolute_uri(reverse("accounts:verify", kwargs={"token": token}))
            services.send_magic_link(email, verify_url)

        # Same answer for unknown, malformed and authorised addresses
        messages.info(request, NEUTRAL_LINK_MESSAGE)
        return redirect("accounts:login")


class MagicLinkVerifyView(View):
    """Sign an admin in from an emailed link."""

    def get(self, request: HttpRequest, token: str) -> HttpResponse:
        email = services.read_magic_link_token(token)
        if not email or not services.is_admin_email(email):
            messages.error(request, "This sign-in link is invalid or has expired.")
            return redirect("accounts:login")

        user = User.objects.get_or_create_for_email(email)
        login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        logger.info("Admin user #%s signed in via link", user.pk)
        return redirect("submissions:dashboard")
