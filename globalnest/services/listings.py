from ..models import HousingListing, JobListing
from .base import TableService


class ListingService(TableService):
    """Housing and job postings: anyone signed in reads, only owners write."""

    def queryset(self):
        return self.model.objects.select_related("user__profile").order_by("-created_at", "-id")

    def owned_by_current_user(self, listing) -> bool:
        return listing.is_owned_by(self.user)

    def count_owned(self) -> int:
        with self._remote_call(f"load {self.label}"):
            return self._owned().count()


class HousingService(ListingService):
    model = HousingListing
    label = "housing listings"


class JobService(ListingService):
    model = JobListing
    label = "job listings"
