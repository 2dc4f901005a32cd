"""Read-only JSON endpoints."""

from django.urls import path

from ..api import views

urlpatterns = [
    path("api/auth/me/", views.CurrentUserView.as_view(), name="api_current_user"),
    path("api/housing/", views.HousingListAPIView.as_view(), name="api_housing"),
    path("api/jobs/", views.JobListAPIView.as_view(), name="api_jobs"),
    path("api/mentors/", views.MentorListAPIView.as_view(), name="api_mentors"),
]
