"""Submission views: the public form, the JSON intake API and the admin dashboard."""

import json
import logging
from datetime import timedelta

from asgiref.sync import async_to_sync, sync_to_async
from django.contrib import messages
from django.core.exceptions import ValidationError
from django.db import models
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import redirect, render
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt
from django.views.generic import DetailView, ListView, TemplateView

from apps.accounts.views import AdminRequiredMixin

from . import export_config, sheets
from .exceptions import ExportError, PersistenceError, SubmissionValidationError
from .exports import export_filename, render_submissions_csv
from .models import EMPLOYMENT_CHOICES, GENDER_CHOICES, RELATIONSHIP_CHOICES, Submission
from .services import process_submission
from .validation import FIELD_TO_CAMEL, normalise_payload

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "There was an error submitting your information. Please try again."


def _form_context(values: dict | None = None, errors: dict | None = None) -> dict:
    return {
        "values": values or {},
        "errors": errors or {},
        "gender_choices": GENDER_CHOICES,
        "relationship_choices": RELATIONSHIP_CHOICES,
        "employment_choices": EMPLOYMENT_CHOICES,
    }


# ─────────────────────────────── Public intake ───────────────────────────────


class SubmissionFormView(TemplateView):
    """Public information form."""

    template_name = "submissions/form.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(_form_context())
        return context


class SubmissionSubmitView(View):
    """Handle information form posts from the HTML page."""

    template_name = "submissions/form.html"

    async def post(self, request: HttpRequest) -> HttpResponse:
        """Process the form POST request."""
        data = normalise_payload(request.POST)

        try:
            result = await process_submission(data)
        except SubmissionValidationError as exc:
            messages.error(request, "Please fill in all required fields correctly.")
            return await sync_to_async(render)(
                request,
                self.template_name,
                _form_context(values=data, errors=exc.errors),
                status=400,
            )
        except PersistenceError:
            messages.error(request, GENERIC_FAILURE_MESSAGE)
            return await sync_to_async(render)(request, self.template_name, _form_context(values=data), status=500)

        logger.info("Form submission %s accepted from web form", result.submission.pk)
        messages.success(
            request,
            "Form submitted successfully! Your information has been submitted and the admin has been notified.",
        )
        return redirect("submissions:form")


@method_decorator(csrf_exempt, name="dispatch")
class SubmissionAPIView(View):
    """API: accept a camelCase JSON submission."""

    async def post(self, request: HttpRequest) -> JsonResponse:
        """Store a submission and return its generated id."""
        try:
            payload = json.loads(request.body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)
        if not isinstance(payload, dict):
            return JsonResponse({"error": "Invalid JSON body"}, status=400)

        data = normalise_payload(payload, camel_case=True)

        try:
            result = await process_submission(data)
        except SubmissionValidationError as exc:
            details = {FIELD_TO_CAMEL.get(name, name): message for name, message in exc.errors.items()}
            return JsonResponse({"error": "Validation failed", "details": details}, status=400)
        except PersistenceError:
            return JsonResponse({"error": GENERIC_FAILURE_MESSAGE}, status=500)

        return JsonResponse({"success": True, "submissionId": str(result.submission.pk)})


# ──────────────────────────────── Dashboard ──────────────────────────────────


class DashboardView(AdminRequiredMixin, TemplateView):
    """Admin dashboard home: all submissions, newest first, plus export tools."""

    template_name = "dashboard/home.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        thirty_days_ago = timezone.now() - timedelta(days=30)
        context["submissions"] = Submission.objects.all()
        context["total_submissions"] = Submission.objects.count()
        context["submissions_30d"] = Submission.objects.filter(created_at__gte=thirty_days_ago).count()
        context["export_target"] = export_config.get_export_target()
        return context


class SubmissionListView(AdminRequiredMixin, ListView):
    """Searchable list of all submissions."""

    model = Submission
    template_name = "dashboard/submissions/list.html"
    context_object_name = "submissions"
    paginate_by = 20

    def get_queryset(self):
        qs = super().get_queryset()
        search = self.request.GET.get("q")
        if search:
            qs = qs.filter(
                models.Q(first_name__icontains=search)
                | models.Q(surname__icontains=search)
                | models.Q(email__icontains=search)
                | models.Q(phone_number__icontains=search)
                | models.Q(state_of_origin__icontains=search)
            )
        return qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["total_count"] = Submission.objects.count()
        context["search_query"] = self.request.GET.get("q", "")
        return context


class SubmissionDetailView(AdminRequiredMixin, DetailView):
    """View a single submission."""

    model = Submission
    template_name = "dashboard/submissions/detail.html"
    context_object_name = "submission"


class SubmissionExportCSVView(AdminRequiredMixin, View):
    """Download every submission as CSV."""

    def get(self, request: HttpRequest) -> HttpResponse:
        response = HttpResponse(
            render_submissions_csv(Submission.objects.iterator()),
            content_type="text/csv; charset=utf-8",
        )
        response["Content-Disposition"] = f'attachment; filename="{export_filename()}"'
        return response


class SheetsSettingsView(AdminRequiredMixin, View):
    """Enable or disable automatic spreadsheet sync."""

    def post(self, request: HttpRequest) -> HttpResponse:
        action = request.POST.get("action", "enable")
        if action == "disable":
            export_config.disable_export_target()
            messages.success(request, "Automatic Google Sheets sync has been disabled.")
            return redirect("submissions:dashboard")

        try:
            export_config.enable_export_target(request.POST.get("url", ""))
        except ValidationError as exc:
            messages.error(request, exc.messages[0] if exc.messages else "Enter a valid URL.")
        else:
            messages.success(
                request,
                "Google Sheets URL has been saved. New submissions will be automatically synced.",
            )
        return redirect("submissions:dashboard")


class SheetsBatchExportView(AdminRequiredMixin, View):
    """Send every submission to a spreadsheet webhook."""

    def post(self, request: HttpRequest) -> HttpResponse:
        url = request.POST.get("url", "").strip()
        if url:
            try:
                url = export_config.validate_target_url(url)
            except ValidationError:
                messages.error(request, "Enter a valid URL.")
                return redirect("submissions:dashboard")
        else:
            target = export_config.get_export_target()
            url = target.url if target.active else ""

        try:
            result = async_to_sync(sheets.push_submissions)(list(Submission.objects.all()), url)
        except ExportError as exc:
            messages.error(request, str(exc))
            return redirect("submissions:dashboard")

        if not result.configured:
            messages.warning(request, "Google Sheets URL not configured. Please enter your Apps Script URL.")
        elif not result.attempted:
            messages.warning(request, "No submissions available to export.")
        else:
            logger.info("User #%s exported %d submissions to a spreadsheet", request.user.pk, result.count)
            messages.success(request, f"{result.count} submissions sent to Google Sheets. Please check your spreadsheet.")
        return redirect("submissions:dashboard")


class SheetsTestSyncView(AdminRequiredMixin, View):
    """Push the newest submission to the active target to check the integration."""

    def post(self, request: HttpRequest) -> HttpResponse:
        target = export_config.get_export_target()
        if not target.active:
            messages.warning(request, "Google Sheets URL not configured. Enable sync first.")
            return redirect("submissions:dashboard")

        latest = Submission.objects.first()
        if latest is None:
            messages.warning(request, "No submissions available to sync.")
            return redirect("submissions:dashboard")

        result = async_to_sync(sheets.push_submission)(latest, target)
        if result.ok:
            messages.success(request, "Data synced to Google Sheets successfully.")
        else:
            detail = result.error or f"HTTP {result.status}"
            messages.error(request, f"Failed to sync to Google Sheets: {detail}")
        return redirect("submissions:dashboard")
