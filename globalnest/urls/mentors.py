"""Mentor marketplace and booked sessions."""

from django.urls import path

from ..views import mentors, sessions

urlpatterns = [
    path("connect/", mentors.ConnectView.as_view(), name="connect"),
    path("connect/become-mentor/", mentors.BecomeMentorView.as_view(), name="become_mentor"),
    path("connect/<int:mentor_id>/review/", mentors.ReviewSubmitView.as_view(), name="mentor_review"),
    path("connect/<int:mentor_id>/book/", mentors.BookSessionView.as_view(), name="mentor_book"),
    path("sessions/", sessions.SessionListView.as_view(), name="sessions"),
    path("sessions/<int:pk>/cancel/", sessions.SessionCancelView.as_view(), name="session_cancel"),
    path("sessions/<int:pk>/complete/", sessions.SessionCompleteView.as_view(), name="session_complete"),
]
