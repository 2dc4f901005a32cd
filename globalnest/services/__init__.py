from .booking import BookingService, SessionStats
from .feedback import FeedbackService
from .listings import HousingService, JobService, ListingService
from .mentor import MentorService
from .profile import ProfileService, resolve_coordinates
from .review import ReviewService
from .students import StudentDirectoryService

__all__ = [
    "ProfileService",
    "resolve_coordinates",
    "ListingService",
    "HousingService",
    "JobService",
    "MentorService",
    "ReviewService",
    "BookingService",
    "SessionStats",
    "FeedbackService",
    "StudentDirectoryService",
]
