from datetime import timedelta
from io import BytesIO

from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import TestCase
from django.utils import timezone
from PIL import Image

from .forms import BookingForm, HousingListingForm, MentorForm, ProfileImageForm, ReviewForm, SignUpForm
from .models import WEEKDAYS, Mentor


def png_upload(name="avatar.png"):
    buffer = BytesIO()
    Image.new("RGB", (4, 4), color="blue").save(buffer, format="PNG")
    return SimpleUploadedFile(name, buffer.getvalue(), content_type="image/png")


class SignUpFormTest(TestCase):
    def test_password_mismatch(self):
        form = SignUpForm(data={
            'email': 'test@example.com',
            'password1': 'abc123',
            'password2': 'xyz789',
            'role': 'planning',
        })
        self.assertFalse(form.is_valid())
        self.assertIn('password2', form.errors)

    def test_unknown_role_rejected(self):
        form = SignUpForm(data={
            'email': 'test@example.com',
            'password1': 'abc123',
            'password2': 'abc123',
            'role': 'tourist',
        })
        self.assertFalse(form.is_valid())
        self.assertIn('role', form.errors)


class ReviewFormTest(TestCase):
    def test_comment_needs_ten_characters(self):
        self.assertFalse(ReviewForm(data={'rating': 4, 'comment': 'x' * 9}).is_valid())
        self.assertTrue(ReviewForm(data={'rating': 4, 'comment': 'x' * 10}).is_valid())

    def test_trailing_whitespace_counts_towards_length(self):
        form = ReviewForm(data={'rating': 4, 'comment': '123456789 '})
        self.assertTrue(form.is_valid())
        self.assertEqual(form.cleaned_data['comment'], '123456789 ')

    def test_rating_bounds(self):
        self.assertFalse(ReviewForm(data={'rating': 6, 'comment': 'Very helpful session'}).is_valid())
        self.assertFalse(ReviewForm(data={'rating': 0, 'comment': 'Very helpful session'}).is_valid())

    def test_blank_form_defaults_to_five_stars(self):
        self.assertEqual(ReviewForm()['rating'].value(), 5)


class BookingFormTest(TestCase):
    def setUp(self):
        self.tomorrow = timezone.localdate() + timedelta(days=1)
        weekday = WEEKDAYS[self.tomorrow.weekday()]
        self.mentor = Mentor(title='Visa advisor', hourly_rate=45, availability={weekday: ['09:00', '14:00']})

    def data(self, **overrides):
        data = {'date': self.tomorrow.isoformat(), 'time_slot': '09:00', 'duration': '60'}
        data.update(overrides)
        return data

    def test_slot_must_be_published(self):
        form = BookingForm(data=self.data(time_slot='10:00'), mentor=self.mentor)
        self.assertFalse(form.is_valid())
        self.assertIn('time_slot', form.errors)

    def test_valid_booking(self):
        form = BookingForm(data=self.data(duration='90'), mentor=self.mentor)
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.cleaned_data['duration'], 90)
        self.assertEqual(form.cleaned_data['time_slot'], '09:00')

    def test_past_date_rejected(self):
        yesterday = timezone.localdate() - timedelta(days=1)
        form = BookingForm(data=self.data(date=yesterday.isoformat()), mentor=Mentor(availability={}))
        self.assertFalse(form.is_valid())
        self.assertIn('date', form.errors)

    def test_date_and_slot_required(self):
        form = BookingForm(data={'duration': '60'}, mentor=self.mentor)
        self.assertFalse(form.is_valid())
        self.assertIn('date', form.errors)
        self.assertIn('time_slot', form.errors)

    def test_any_slot_when_no_availability_published(self):
        form = BookingForm(data=self.data(time_slot='18:30'), mentor=Mentor(availability={}))
        self.assertTrue(form.is_valid(), form.errors)


class MentorFormTest(TestCase):
    def test_tags_and_availability_are_parsed(self):
        form = MentorForm(data={
            'title': 'Visa advisor',
            'bio': 'Five years helping students',
            'hourly_rate': '45',
            'currency': 'usd',
            'expertise_text': 'Visa, Housing ,',
            'languages_text': 'English',
            'badges_text': '',
            'slots_monday': '14:00, 09:00',
        })
        self.assertTrue(form.is_valid(), form.errors)
        fields = form.mentor_fields()
        self.assertEqual(fields['expertise'], ['Visa', 'Housing'])
        self.assertEqual(fields['availability'], {'monday': ['09:00', '14:00']})
        self.assertEqual(fields['currency'], 'USD')

    def test_bad_slot_rejected(self):
        form = MentorForm(data={
            'title': 'Coach',
            'hourly_rate': '30',
            'currency': 'USD',
            'expertise_text': 'Careers',
            'slots_friday': 'noon',
        })
        self.assertFalse(form.is_valid())
        self.assertIn('slots_friday', form.errors)


class ListingFormTest(TestCase):
    def test_location_text_becomes_coordinates(self):
        form = HousingListingForm(data={
            'title': 'Studio',
            'description': 'Bright studio',
            'price': '750',
            'available_from': '2030-01-01',
            'available_until': '2030-06-01',
            'location_text': '37.42, -122.08',
        })
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.listing_fields()['location'], {'lat': 37.42, 'lng': -122.08})

    def test_until_before_from_rejected(self):
        form = HousingListingForm(data={
            'title': 'Studio',
            'description': 'Bright studio',
            'price': '750',
            'available_from': '2030-06-01',
            'available_until': '2030-01-01',
        })
        self.assertFalse(form.is_valid())
        self.assertIn('available_until', form.errors)


class ProfileImageFormTest(TestCase):
    def test_accepts_real_image(self):
        form = ProfileImageForm(files={'image': png_upload()})
        self.assertTrue(form.is_valid(), form.errors)

    def test_rejects_non_image(self):
        upload = SimpleUploadedFile('notes.txt', b'not an image', content_type='text/plain')
        form = ProfileImageForm(files={'image': upload})
        self.assertFalse(form.is_valid())

    def test_rejects_oversized_upload(self):
        with self.settings(PROFILE_IMAGE_MAX_BYTES=10):
            form = ProfileImageForm(files={'image': png_upload()})
            self.assertFalse(form.is_valid())
