"""
Root URL configuration.

Every API resource group is mounted under the common ``/api/`` prefix.
"""

from django.urls import include, path

urlpatterns = [
    path("api/", include("finance.urls")),
    path("api/users/", include("users.urls")),
]
