from datetime import timedelta
from decimal import Decimal

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.urls import reverse
from django.utils import timezone

from .content import EVENTS, NEWS_ITEMS
from .models import Feedback, HousingListing, JobListing, Mentor, MentorReview, MentorSession, Profile, UniversityStudent, User


def make_user(email):
    return User.objects.create_user(username=email, email=email, password="secret1")


class PublicPagesTest(TestCase):
    def test_landing_and_contact_are_public(self):
        self.assertContains(self.client.get(reverse("home")), "Safe Housing")
        self.assertEqual(self.client.get(reverse("contact")).status_code, 200)

    def test_feedback_requires_sign_in(self):
        response = self.client.post(reverse("contact"), {"subject": "Hi", "message": "Hello there"})
        self.assertRedirects(response, f"{reverse('login')}?next={reverse('contact')}", fetch_redirect_response=False)
        self.assertFalse(Feedback.objects.exists())

    def test_signed_in_feedback_is_stored(self):
        user = make_user("ana@example.com")
        self.client.force_login(user)
        response = self.client.post(reverse("contact"), {"subject": "Hi", "message": "Hello there"})
        self.assertRedirects(response, reverse("contact"), fetch_redirect_response=False)
        self.assertTrue(Feedback.objects.filter(user=user, subject="Hi").exists())

    def test_static_pages_require_session(self):
        for name in ("resources", "news_events", "universities", "community", "connect", "sessions", "profile"):
            response = self.client.get(reverse(name))
            self.assertEqual(response.status_code, 302, name)


class ListingViewsTest(TestCase):
    def setUp(self):
        self.owner = make_user("owner@example.com")
        self.other = make_user("other@example.com")
        today = timezone.localdate()
        self.cheap = HousingListing.objects.create(
            user=self.owner, title="Cheap room", description="Small", price=Decimal("450"),
            available_from=today, available_until=today + timedelta(days=30),
        )
        self.mid = HousingListing.objects.create(
            user=self.other, title="Mid flat", description="Cosy", price=Decimal("700"),
            available_from=today, available_until=today + timedelta(days=30), location="Boston",
        )

    def test_list_filters_in_memory(self):
        self.client.force_login(self.owner)
        response = self.client.get(reverse("housing"), {"price_range": "501-1000"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["load_state"], "loaded")
        self.assertEqual([listing.pk for listing in response.context["listings"]], [self.mid.pk])
        self.assertEqual(response.context["total"], 2)

    def test_non_finite_price_range_is_ignored(self):
        self.client.force_login(self.owner)
        response = self.client.get(reverse("housing"), {"price_range": "NaN"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context["listings"]), 2)

    def test_edit_controls_only_for_owner(self):
        self.client.force_login(self.owner)
        response = self.client.get(reverse("housing"))
        self.assertContains(response, reverse("housing_edit", args=[self.cheap.pk]))
        self.assertNotContains(response, reverse("housing_edit", args=[self.mid.pk]))

    def test_create_redirects_to_list(self):
        self.client.force_login(self.owner)
        response = self.client.post(reverse("housing_create"), {
            "title": "New studio",
            "description": "Fresh paint",
            "price": "900",
            "available_from": "2030-01-01",
            "available_until": "2030-03-01",
            "location_text": "Cambridge, MA",
        })
        self.assertRedirects(response, reverse("housing"), fetch_redirect_response=False)
        listing = HousingListing.objects.get(title="New studio")
        self.assertEqual(listing.user, self.owner)
        self.assertEqual(listing.location, "Cambridge, MA")

    def test_non_owner_cannot_edit_or_delete(self):
        self.client.force_login(self.other)
        response = self.client.get(reverse("housing_edit", args=[self.cheap.pk]))
        self.assertRedirects(response, reverse("housing"), fetch_redirect_response=False)
        self.assertEqual(self.client.get(reverse("housing_delete", args=[self.cheap.pk])).status_code, 404)
        self.client.post(reverse("housing_delete", args=[self.cheap.pk]))
        self.assertTrue(HousingListing.objects.filter(pk=self.cheap.pk).exists())

    def test_owner_delete_needs_confirmation(self):
        self.client.force_login(self.owner)
        response = self.client.get(reverse("housing_delete", args=[self.cheap.pk]))
        self.assertContains(response, "Are you sure")
        response = self.client.post(reverse("housing_delete", args=[self.cheap.pk]))
        self.assertRedirects(response, reverse("housing"), fetch_redirect_response=False)
        self.assertFalse(HousingListing.objects.filter(pk=self.cheap.pk).exists())

    def test_job_edit_prefills_location(self):
        job = JobListing.objects.create(
            user=self.owner, title="Tutor", company="Campus", description="Evenings",
            salary="$20/hour", location={"lat": 1.5, "lng": 2.5},
        )
        self.client.force_login(self.owner)
        response = self.client.get(reverse("job_edit", args=[job.pk]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context["form"]["location_text"].value(), "1.5, 2.5")


class ConnectViewsTest(TestCase):
    def setUp(self):
        self.mentor = Mentor.objects.create(
            user=make_user("mentor@example.com"), title="Visa advisor", hourly_rate=45, expertise=["Visa"],
        )
        self.student = make_user("student@example.com")
        self.client.force_login(self.student)

    def test_review_mode_prefills_blank_form(self):
        response = self.client.get(reverse("connect"), {"mentor": self.mentor.pk, "review": "true"})
        self.assertEqual(response.context["flow"], "reviewing")
        self.assertEqual(response.context["review_form"]["rating"].value(), 5)

    def test_short_review_is_rejected(self):
        response = self.client.post(reverse("mentor_review", args=[self.mentor.pk]), {"rating": 5, "comment": "Too short"})
        self.assertEqual(response.status_code, 200)
        self.assertIn("comment", response.context["review_form"].errors)
        self.assertFalse(MentorReview.objects.exists())

    def test_review_submit_then_update(self):
        url = reverse("mentor_review", args=[self.mentor.pk])
        self.client.post(url, {"rating": 5, "comment": "Fantastic guidance on visas"})
        self.client.post(url, {"rating": 3, "comment": "Good, but slow to reply"})
        review = MentorReview.objects.get(mentor=self.mentor, user=self.student)
        self.assertEqual(review.rating, 3)
        self.mentor.refresh_from_db()
        self.assertEqual(self.mentor.review_count, 1)

        response = self.client.get(reverse("connect"), {"mentor": self.mentor.pk, "mode": "review"})
        self.assertEqual(response.context["review_form"]["rating"].value(), 3)

    def test_booking_redirects_to_session(self):
        day = timezone.localdate() + timedelta(days=2)
        response = self.client.post(
            reverse("mentor_book", args=[self.mentor.pk]),
            {"date": day.isoformat(), "time_slot": "15:00", "duration": "90"},
        )
        session = MentorSession.objects.get(user=self.student)
        self.assertRedirects(response, f"{reverse('sessions')}#session-{session.pk}", fetch_redirect_response=False)
        self.assertEqual(session.amount, Decimal("67.50"))

    def test_become_mentor(self):
        response = self.client.post(reverse("become_mentor"), {
            "title": "Housing guru",
            "hourly_rate": "30",
            "currency": "USD",
            "expertise_text": "Housing",
        })
        mentor = Mentor.objects.get(user=self.student)
        self.assertRedirects(response, f"{reverse('connect')}?mentor={mentor.pk}", fetch_redirect_response=False)


class SessionViewsTest(TestCase):
    def setUp(self):
        self.student = make_user("student@example.com")
        mentor = Mentor.objects.create(user=make_user("mentor@example.com"), title="Coach", hourly_rate=40)
        self.session = MentorSession.objects.create(
            user=self.student, mentor=mentor, date=timezone.localdate() + timedelta(days=1),
            time_slot="10:00", duration=60, amount=40,
        )
        self.client.force_login(self.student)

    def test_upcoming_tab_lists_session(self):
        response = self.client.get(reverse("sessions"))
        self.assertEqual([s.pk for s in response.context["sessions"]], [self.session.pk])
        self.assertEqual(response.context["stats"].total_hours, 1.0)

    def test_cancel_confirmation_then_post(self):
        url = reverse("session_cancel", args=[self.session.pk])
        self.assertContains(self.client.get(url), "Are you sure you want to cancel this session?")
        self.client.post(url)
        self.session.refresh_from_db()
        self.assertEqual(self.session.status, "canceled")
        self.assertEqual(self.session.payment_status, "refunded")
        response = self.client.get(reverse("sessions"), {"tab": "past"})
        self.assertEqual([s.pk for s in response.context["sessions"]], [self.session.pk])


class ProfileViewsTest(TestCase):
    def setUp(self):
        self.user = make_user("ana@example.com")
        self.client.force_login(self.user)

    def test_update_without_coordinates_keeps_location(self):
        Profile.objects.filter(user=self.user).update(location="Boston")
        response = self.client.post(reverse("profile"), {
            "name": "Ana",
            "university": "MIT",
            "field_of_study": "Physics",
            "bio": "",
            "use_current_location": "on",
        }, follow=True)
        self.assertContains(response, "Failed to get location")
        profile = Profile.objects.get(user=self.user)
        self.assertEqual(profile.name, "Ana")
        self.assertEqual(profile.location, "Boston")

    def test_update_with_coordinates(self):
        self.client.post(reverse("profile"), {
            "name": "Ana",
            "university": "MIT",
            "field_of_study": "Physics",
            "bio": "",
            "use_current_location": "on",
            "latitude": "42.36",
            "longitude": "-71.09",
        })
        self.assertEqual(Profile.objects.get(user=self.user).location, {"lat": 42.36, "lng": -71.09})

    def test_image_upload_rejects_non_image(self):
        upload = SimpleUploadedFile("notes.txt", b"plain text", content_type="text/plain")
        response = self.client.post(reverse("profile_image"), {"image": upload}, follow=True)
        self.assertContains(response, "Please upload an image file.")
        self.assertEqual(Profile.objects.get(user=self.user).image_url, "")


class DirectoryViewsTest(TestCase):
    def setUp(self):
        self.client.force_login(make_user("ana@example.com"))

    def test_students_paginate_twelve_per_page(self):
        UniversityStudent.objects.bulk_create([
            UniversityStudent(
                university_id=1, name=f"Student {index:02d}", roll_number=f"R{index:02d}",
                degree="masters", batch_year=2024, course="cs",
            )
            for index in range(13)
        ])
        response = self.client.get(reverse("university_students", args=[1]), {"page": 2})
        self.assertEqual(response.context["page"].number, 2)
        self.assertEqual(len(response.context["page"].items), 1)

    def test_unknown_university_is_404(self):
        self.assertEqual(self.client.get(reverse("university_students", args=[99])).status_code, 404)

    def test_university_search(self):
        response = self.client.get(reverse("universities"), {"search": "oxford"})
        self.assertEqual([uni["id"] for uni in response.context["universities"]], [4])

    def test_news_carousel_position_is_clamped(self):
        response = self.client.get(reverse("news_events"), {"news": 50})
        self.assertEqual(response.context["news"].position, response.context["news"].count - 1)

    def test_news_and_events_render_catalogue_entries(self):
        response = self.client.get(reverse("news_events"))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, NEWS_ITEMS[0]["title"])
        self.assertContains(response, EVENTS[0]["description"])
