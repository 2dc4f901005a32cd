from django.contrib.auth.models import AnonymousUser
from django.test import RequestFactory, TestCase
from django.urls import reverse

from .exceptions import AuthError
from .models import Profile, User
from .session import SessionContext


class SessionContextTest(TestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def test_starts_loading_until_probe(self):
        context = SessionContext(self.factory.get("/"))
        self.assertTrue(context.loading)
        context.set_user(AnonymousUser())
        self.assertFalse(context.loading)
        self.assertIsNone(context.user)
        self.assertFalse(context.is_authenticated)

    def test_sign_in_with_bad_credentials_raises(self):
        User.objects.create_user(username="ana@example.com", email="ana@example.com", password="secret1")
        context = SessionContext(self.factory.post("/login/"))
        with self.assertRaises(AuthError):
            context.sign_in("ana@example.com", "wrong-password")
        self.assertIsNone(context.user)

    def test_sign_up_rejects_duplicate_email(self):
        User.objects.create_user(username="ana@example.com", email="ana@example.com", password="secret1")
        context = SessionContext(self.factory.post("/signup/"))
        with self.assertRaises(AuthError):
            context.sign_up("ANA@example.com", "secret1", "planning")
        self.assertEqual(User.objects.count(), 1)


class AuthFlowTest(TestCase):
    def test_sign_up_creates_user_profile_and_session(self):
        response = self.client.post(reverse("signup"), {
            "email": "Ben@Example.com",
            "password1": "secret1",
            "password2": "secret1",
            "role": "abroad",
        })
        self.assertRedirects(response, reverse("dashboard"), fetch_redirect_response=False)
        user = User.objects.get(username="ben@example.com")
        self.assertEqual(user.role, "abroad")
        self.assertTrue(Profile.objects.filter(user=user, email="ben@example.com").exists())
        self.assertEqual(self.client.get(reverse("dashboard")).status_code, 200)

    def test_sign_in_then_sign_out_gates_protected_pages(self):
        User.objects.create_user(username="cai@example.com", email="cai@example.com", password="secret1")
        response = self.client.post(reverse("login"), {"email": "cai@example.com", "password": "secret1"})
        self.assertRedirects(response, reverse("dashboard"), fetch_redirect_response=False)

        self.client.post(reverse("logout"))
        response = self.client.get(reverse("housing"))
        self.assertRedirects(
            response,
            f"{reverse('login')}?next={reverse('housing')}",
            fetch_redirect_response=False,
        )

    def test_invalid_login_rerenders_form(self):
        response = self.client.post(reverse("login"), {"email": "nobody@example.com", "password": "secret1"})
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Invalid email or password")

    def test_sign_in_honours_next(self):
        User.objects.create_user(username="dee@example.com", email="dee@example.com", password="secret1")
        response = self.client.post(
            reverse("login"),
            {"email": "dee@example.com", "password": "secret1", "next": reverse("jobs")},
        )
        self.assertRedirects(response, reverse("jobs"), fetch_redirect_response=False)
