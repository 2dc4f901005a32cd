"""Housing and job listing CRUD."""

from django.urls import path

from ..views import listings

urlpatterns = [
    path("housing/", listings.HousingListView.as_view(), name="housing"),
    path("housing/new/", listings.HousingFormView.as_view(), name="housing_create"),
    path("housing/<int:pk>/edit/", listings.HousingFormView.as_view(), name="housing_edit"),
    path("housing/<int:pk>/delete/", listings.HousingDeleteView.as_view(), name="housing_delete"),
    path("jobs/", listings.JobListView.as_view(), name="jobs"),
    path("jobs/new/", listings.JobFormView.as_view(), name="job_create"),
    path("jobs/<int:pk>/edit/", listings.JobFormView.as_view(), name="job_edit"),
    path("jobs/<int:pk>/delete/", listings.JobDeleteView.as_view(), name="job_delete"),
]
