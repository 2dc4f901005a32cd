"""Core application data models exposed as a flat module-level API."""

from .booking import MentorSession, calculate_session_amount, parse_time_slot
from .feedback import Feedback
from .listing import HousingListing, JobListing
from .mentor import WEEKDAYS, Mentor, MentorReview
from .profile import Profile
from .student import UniversityStudent
from .user import User

__all__ = [
    "User",
    "Profile",
    "HousingListing",
    "JobListing",
    "Mentor",
    "MentorReview",
    "MentorSession",
    "Feedback",
    "UniversityStudent",
    "WEEKDAYS",
    "calculate_session_amount",
    "parse_time_slot",
]
