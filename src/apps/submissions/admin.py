"""Submissions admin configuration."""

from django.contrib import admin

from apps.accounts.services import is_admin_email

from .models import Submission


@admin.register(Submission)
class SubmissionAdmin(admin.ModelAdmin):
    """
    Read-only admin interface for form submissions.

    Staff status alone is not enough: the viewer's email must also be in the
    authorised admin set, the same check the dashboard applies.
    """

    list_display = ("first_name", "surname", "email", "state_of_origin", "employment_status", "created_at")
    list_filter = ("gender", "employment_status", "relationship_status", "created_at")
    search_fields = ("first_name", "middle_name", "surname", "email", "phone_number", "state_of_origin")
    ordering = ("-created_at",)

    def has_module_permission(self, request) -> bool:
        return super().has_module_permission(request) and is_admin_email(request.user.email)

    def has_view_permission(self, request, obj=None) -> bool:
        return super().has_view_permission(request, obj) and is_admin_email(request.user.email)

    def has_add_permission(self, request) -> bool:
        return False

    def has_change_permission(self, request, obj=None) -> bool:
        return False

    def has_delete_permission(self, request, obj=None) -> bool:
        return False
