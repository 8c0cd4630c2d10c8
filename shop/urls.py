"""API routes for the shop app."""

from django.urls import path

from .views import DropdownSearchView

urlpatterns = [
    path("search/", DropdownSearchView.as_view(), name="dropdown-search"),
]
