from django.utils.decorators import method_decorator
from django.views.generic import TemplateView

from ..decorators import session_required
from ..services import BookingService, HousingService, JobService, ProfileService
from .base import ServiceMixin, load


@method_decorator(session_required, name="dispatch")
class DashboardView(ServiceMixin, TemplateView):
    template_name = "dashboard.html"
    service_class = ProfileService

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        profile_state, profile = load(self.get_service().load_own, default=None)
        _, housing_posts = load(self.get_service(HousingService).count_owned, default=0)
        _, job_posts = load(self.get_service(JobService).count_owned, default=0)
        _, connections = load(self.get_service(BookingService).mentors_booked, default=0)
        context.update(
            {
                "load_state": profile_state,
                "profile": profile,
                "stats": {
                    "housing_posts": housing_posts,
                    "job_posts": job_posts,
                    "connections": connections,
                },
            }
        )
        return context
