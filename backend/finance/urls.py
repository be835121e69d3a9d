"""
URL configuration for the financial management API.

Resources are registered on a DefaultRouter with optional trailing slashes.
Budget categories are nested under their budget with explicit routes.
"""

from django.urls import include, path, re_path
from rest_framework.routers import DefaultRouter

from . import views

# Initialize DefaultRouter for RESTful API endpoints
router = DefaultRouter(trailing_slash="/?")

router.register(r"accounts", views.AccountViewSet, basename="account")
router.register(r"transactions", views.TransactionViewSet, basename="transaction")
router.register(r"budgets", views.BudgetViewSet, basename="budget")
router.register(r"goals", views.FinancialGoalViewSet, basename="goal")
router.register(r"reports", views.FinancialReportViewSet, basename="report")

budget_category_list = views.BudgetCategoryViewSet.as_view(
    {"get": "list", "post": "create"}
)
budget_category_detail = views.BudgetCategoryViewSet.as_view(
    {
        "get": "retrieve",
        "put": "update",
        "patch": "partial_update",
        "delete": "destroy",
    }
)

urlpatterns = [
    # Nested budget categories
    re_path(
        r"^budgets/(?P<budget_pk>[^/.]+)/categories/?$",
        budget_category_list,
        name="budget-category-list",
    ),
    re_path(
        r"^budgets/(?P<budget_pk>[^/.]+)/categories/(?P<pk>[^/.]+)/?$",
        budget_category_detail,
        name="budget-category-detail",
    ),
    re_path(r"^dashboard/?$", views.DashboardView.as_view(), name="dashboard"),
    # Include all router-generated URLs
    path("", include(router.urls)),
]
