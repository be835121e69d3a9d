"""
URL configuration for the signed-in user's profile.

Sign-up, login and token refresh are handled by the hosted auth provider.
"""

from django.urls import re_path

from .views import CurrentUserView, PreferencesView

app_name = "users"

urlpatterns = [
    re_path(r"^me/?$", CurrentUserView.as_view(), name="me"),
    re_path(r"^me/preferences/?$", PreferencesView.as_view(), name="preferences"),
]
