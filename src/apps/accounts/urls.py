"""Accounts URL configuration."""

from django.contrib.auth.views import LogoutView
from django.urls import path

from . import views

app_name = "accounts"

urlpatterns = [
    path("dashboard/login/", views.AdminLoginView.as_view(), name="login"),
    path("dashboard/login/verify/<str:token>/", views.MagicLinkVerifyView.as_view(), name="verify"),
    path("dashboard/logout/", LogoutView.as_view(), name="logout"),
]
