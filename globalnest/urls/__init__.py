"""Aggregate URL patterns for the globalnest application."""

from . import api, content, listings, mentors, public

urlpatterns = [
    *public.urlpatterns,
    *listings.urlpatterns,
    *content.urlpatterns,
    *mentors.urlpatterns,
    *api.urlpatterns,
]
