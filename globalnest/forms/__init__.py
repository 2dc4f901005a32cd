from .auth import SignInForm, SignUpForm
from .contact import FeedbackForm
from .listing import HousingListingForm, JobListingForm
from .mentor import BookingForm, MentorForm, ReviewForm
from .profile import ProfileForm, ProfileImageForm

__all__ = [
    "SignInForm",
    "SignUpForm",
    "ProfileForm",
    "ProfileImageForm",
    "HousingListingForm",
    "JobListingForm",
    "MentorForm",
    "ReviewForm",
    "BookingForm",
    "FeedbackForm",
]
