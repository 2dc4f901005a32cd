from django.utils.decorators import method_decorator
from django.views.generic import TemplateView

from .. import content
from ..carousel import carousel_window
from ..decorators import session_required


@method_decorator(session_required, name="dispatch")
class ResourcesView(TemplateView):
    template_name = "resources.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "visa_guides": content.VISA_GUIDES,
                "packing_guides": content.PACKING_GUIDES,
                "country_guides": content.COUNTRY_GUIDES,
            }
        )
        return context


@method_decorator(session_required, name="dispatch")
class NewsEventsView(TemplateView):
    template_name = "news_events.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "news": carousel_window(content.NEWS_ITEMS, self.request.GET.get("news")),
                "events": carousel_window(content.EVENTS, self.request.GET.get("events")),
                "activities": content.ACTIVITIES,
            }
        )
        return context
