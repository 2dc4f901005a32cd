from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.generics import ListAPIView, RetrieveAPIView
from rest_framework.permissions import IsAuthenticated

from ..exceptions import DataAccessError
from ..filters import build_housing_filters, build_job_filters, filter_housing_listings, filter_job_listings, filter_mentors
from ..services import HousingService, JobService, MentorService
from .serializers import CurrentUserSerializer, HousingListingSerializer, JobListingSerializer, MentorSerializer


class DataUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Data is temporarily unavailable."
    default_code = "data_unavailable"


class CurrentUserView(RetrieveAPIView):
    """Return the authenticated user's identity and profile basics."""

    serializer_class = CurrentUserSerializer
    permission_classes = [IsAuthenticated]

    def get_object(self):
        return self.request.user


class ServiceListAPIView(ListAPIView):
    """Loads rows through the table service, then filters them in memory."""

    permission_classes = [IsAuthenticated]
    service_class = None

    def filter_rows(self, rows, params):
        return rows

    def get_queryset(self):
        service = self.service_class(self.request.session_context)
        try:
            rows = service.load()
        except DataAccessError as exc:
            raise DataUnavailable(str(exc)) from exc
        return self.filter_rows(rows, self.request.query_params)


class HousingListAPIView(ServiceListAPIView):
    serializer_class = HousingListingSerializer
    service_class = HousingService

    def filter_rows(self, rows, params):
        return filter_housing_listings(rows, params.get("search", ""), build_housing_filters(params))


class JobListAPIView(ServiceListAPIView):
    serializer_class = JobListingSerializer
    service_class = JobService

    def filter_rows(self, rows, params):
        return filter_job_listings(rows, params.get("search", ""), build_job_filters(params))


class MentorListAPIView(ServiceListAPIView):
    serializer_class = MentorSerializer
    service_class = MentorService

    def filter_rows(self, rows, params):
        return filter_mentors(rows, params.get("search", ""), params.get("expertise", ""))
