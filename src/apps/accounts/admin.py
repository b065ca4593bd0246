"""Admin configuration for accounts app."""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import SystemAdmin, User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin interface for the custom User model."""

    list_display = ("email", "username", "is_staff", "is_active", "date_joined")
    list_filter = ("is_staff", "is_active")
    search_fields = ("email", "username", "first_name", "last_name")
    ordering = ("-date_joined",)

    add_fieldsets = (*BaseUserAdmin.add_fieldsets, ("Contact", {"fields": ("email",)}))


@admin.register(SystemAdmin)
class SystemAdminAdmin(admin.ModelAdmin):
    """Provision and revoke dashboard access."""

    list_display = ("email", "created_at")
    search_fields = ("email",)
    readonly_fields = ("created_at",)
