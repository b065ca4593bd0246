"""Submissions URL configuration."""

from django.urls import path

from . import views

app_name = "submissions"

urlpatterns = [
    # Public
    path("", views.SubmissionFormView.as_view(), name="form"),
    path("submit/", views.SubmissionSubmitView.as_view(), name="submit"),
    # API
    path("api/submissions/", views.SubmissionAPIView.as_view(), name="api_submit"),
    # Dashboard
    path("dashboard/", views.DashboardView.as_view(), name="dashboard"),
    path("dashboard/submissions/", views.SubmissionListView.as_view(), name="dashboard_submissions"),
    path(
        "dashboard/submissions/export/",
        views.SubmissionExportCSVView.as_view(),
        name="dashboard_submissions_export",
    ),
    path(
        "dashboard/submissions/<uuid:pk>/",
        views.SubmissionDetailView.as_view(),
        name="dashboard_submission_detail",
    ),
    path("dashboard/sheets/", views.SheetsSettingsView.as_view(), name="dashboard_sheets"),
    path("dashboard/sheets/export/", views.SheetsBatchExportView.as_view(), name="dashboard_sheets_export"),
    path("dashboard/sheets/test/", views.SheetsTestSyncView.as_view(), name="dashboard_sheets_test"),
]
