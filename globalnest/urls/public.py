"""Public pages, authentication and the signed-in home pages."""

from django.urls import path

from ..views import dashboard, profile, public

urlpatterns = [
    path("", public.LandingView.as_view(), name="home"),
    path("login/", public.SignInView.as_view(), name="login"),
    path("signup/", public.SignUpView.as_view(), name="signup"),
    path("logout/", public.SignOutView.as_view(), name="logout"),
    path("contact/", public.ContactView.as_view(), name="contact"),
    path("dashboard/", dashboard.DashboardView.as_view(), name="dashboard"),
    path("profile/", profile.ProfileView.as_view(), name="profile"),
    path("profile/image/", profile.ProfileImageView.as_view(), name="profile_image"),
]
