from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect
from django.utils.decorators import method_decorator
from django.views.generic import FormView, TemplateView

from ..decorators import session_required
from ..exceptions import DataAccessError
from ..filters import (
    HOUSING_PRICE_RANGES,
    JOB_SALARY_RANGES,
    build_housing_filters,
    build_job_filters,
    filter_housing_listings,
    filter_job_listings,
)
from ..forms import HousingListingForm, JobListingForm
from ..models import JobListing
from ..services import HousingService, JobService
from .base import ServiceMixin, load


@method_decorator(session_required, name="dispatch")
class ListingListView(ServiceMixin, TemplateView):
    """Loads every listing once and filters in memory from the query string."""

    build_filters = None
    apply_filters = None

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        service = self.get_service()
        load_state, listings = load(service.load)
        search_term = self.request.GET.get("search", "").strip()
        filters = self.build_filters(self.request.GET)
        visible = self.apply_filters(listings, search_term, filters)
        for listing in visible:
            listing.can_edit = service.owned_by_current_user(listing)
        context.update(
            {
                "load_state": load_state,
                "listings": visible,
                "total": len(listings),
                "search_term": search_term,
                "filters": filters,
            }
        )
        return context


class HousingListView(ListingListView):
    template_name = "housing_list.html"
    service_class = HousingService
    build_filters = staticmethod(build_housing_filters)
    apply_filters = staticmethod(filter_housing_listings)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["price_ranges"] = HOUSING_PRICE_RANGES
        return context


class JobListView(ListingListView):
    template_name = "job_list.html"
    service_class = JobService
    build_filters = staticmethod(build_job_filters)
    apply_filters = staticmethod(filter_job_listings)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["salary_ranges"] = JOB_SALARY_RANGES
        context["job_types"] = JobListing.JOB_TYPE_CHOICES
        return context


@method_decorator(session_required, name="dispatch")
class ListingFormView(ServiceMixin, FormView):
    """Create or edit a listing; editing only resolves rows the visitor owns."""

    list_url_name = None
    noun = "listing"

    def dispatch(self, request, *args, **kwargs):
        self.listing = None
        pk = kwargs.get("pk")
        if pk is not None:
            try:
                self.listing = self.get_service().get_owned(pk)
            except DataAccessError:
                return redirect(self.list_url_name)
        return super().dispatch(request, *args, **kwargs)

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["instance"] = self.listing
        return kwargs

    def form_valid(self, form):
        service = self.get_service()
        try:
            if self.listing is None:
                service.create(form.listing_fields())
                messages.success(self.request, f"{self.noun.capitalize()} created successfully!")
            else:
                service.update(self.listing.pk, form.listing_fields())
                messages.success(self.request, f"{self.noun.capitalize()} updated successfully!")
        except DataAccessError:
            return self.form_invalid(form)
        return redirect(self.list_url_name)

    def form_invalid(self, form):
        if form.errors:
            messages.error(self.request, "Please review the errors below.")
        return super().form_invalid(form)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({"listing": self.listing, "noun": self.noun, "list_url_name": self.list_url_name})
        return context


class HousingFormView(ListingFormView):
    template_name = "listing_form.html"
    form_class = HousingListingForm
    service_class = HousingService
    list_url_name = "housing"
    noun = "housing listing"


class JobFormView(ListingFormView):
    template_name = "listing_form.html"
    form_class = JobListingForm
    service_class = JobService
    list_url_name = "jobs"
    noun = "job listing"


@method_decorator(session_required, name="dispatch")
class ListingDeleteView(ServiceMixin, TemplateView):
    """GET asks for confirmation; POST removes the row and returns to the list."""

    template_name = "listing_confirm_delete.html"
    list_url_name = None
    noun = "listing"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        try:
            context["listing"] = self.get_service().get_owned(kwargs["pk"])
        except DataAccessError:
            raise Http404(f"{self.noun.capitalize()} not found")
        context.update({"noun": self.noun, "list_url_name": self.list_url_name})
        return context

    def post(self, request, pk):
        try:
            self.get_service().remove(pk)
        except DataAccessError:
            return redirect(self.list_url_name)
        messages.success(request, f"{self.noun.capitalize()} deleted successfully!")
        return redirect(self.list_url_name)


class HousingDeleteView(ListingDeleteView):
    service_class = HousingService
    list_url_name = "housing"
    noun = "housing listing"


class JobDeleteView(ListingDeleteView):
    service_class = JobService
    list_url_name = "jobs"
    noun = "job listing"
