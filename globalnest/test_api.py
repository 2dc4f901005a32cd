from datetime import timedelta
from decimal import Decimal
from unittest import mock

from django.db import DatabaseError
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APITestCase

from .models import HousingListing, Mentor, Profile, User


class CurrentUserAPITest(APITestCase):
    def test_requires_authentication(self):
        response = self.client.get(reverse("api_current_user"))
        self.assertIn(response.status_code, (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN))

    def test_returns_identity_and_profile(self):
        user = User.objects.create_user(username="ana@example.com", email="ana@example.com", password="secret1", role="abroad")
        Profile.objects.filter(user=user).update(name="Ana")
        self.client.force_login(user)
        response = self.client.get(reverse("api_current_user"))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["email"], "ana@example.com")
        self.assertEqual(response.data["role"], "abroad")
        self.assertEqual(response.data["name"], "Ana")
        self.assertIsNone(response.data["image_url"])


class ListingAPITest(APITestCase):
    def setUp(self):
        self.user = User.objects.create_user(username="ana@example.com", email="ana@example.com", password="secret1")
        today = timezone.localdate()
        for title, price in (("Room", "400"), ("Flat", "900"), ("House", "2500")):
            HousingListing.objects.create(
                user=self.user, title=title, description="", price=Decimal(price),
                available_from=today, available_until=today + timedelta(days=30),
            )
        Mentor.objects.create(user=self.user, title="Visa advisor", hourly_rate=45, expertise=["Visa"])
        self.client.force_login(self.user)

    def test_housing_applies_query_filters(self):
        response = self.client.get(reverse("api_housing"), {"price_range": "501-1000"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([row["title"] for row in response.data], ["Flat"])
        self.assertTrue(response.data[0]["owned"])
        self.assertEqual(response.data[0]["location_display"], "Location not specified")

    def test_mentors_filter_by_expertise(self):
        self.assertEqual(len(self.client.get(reverse("api_mentors"), {"expertise": "visa"}).data), 1)
        self.assertEqual(len(self.client.get(reverse("api_mentors"), {"expertise": "careers"}).data), 0)

    def test_jobs_empty(self):
        self.assertEqual(self.client.get(reverse("api_jobs")).data, [])

    def test_non_finite_range_is_ignored(self):
        response = self.client.get(reverse("api_housing"), {"price_range": "NaN"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 3)

    def test_database_failure_goes_through_service(self):
        with mock.patch("globalnest.services.listings.HousingService.queryset", side_effect=DatabaseError("down")):
            with self.assertLogs("globalnest.services.base", level="ERROR"):
                response = self.client.get(reverse("api_housing"))
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data["detail"], "Failed to load housing listings")
