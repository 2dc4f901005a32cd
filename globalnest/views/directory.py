from django.http import Http404
from django.utils.decorators import method_decorator
from django.views.generic import TemplateView

from .. import content
from ..decorators import session_required
from ..filters import (
    STUDENTS_PER_PAGE,
    build_student_filters,
    filter_community_profiles,
    filter_students,
    filter_universities,
    paginate,
)
from ..models import UniversityStudent
from ..services import ProfileService, StudentDirectoryService
from .base import ServiceMixin, load


@method_decorator(session_required, name="dispatch")
class UniversityListView(TemplateView):
    template_name = "universities.html"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        search_term = self.request.GET.get("search", "").strip()
        context.update(
            {
                "universities": filter_universities(content.UNIVERSITIES, search_term),
                "search_term": search_term,
            }
        )
        return context


@method_decorator(session_required, name="dispatch")
class StudentDirectoryView(ServiceMixin, TemplateView):
    template_name = "students.html"
    service_class = StudentDirectoryService

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        university = content.get_university(kwargs["university_id"])
        if university is None:
            raise Http404("University not found")
        load_state, students = load(self.get_service().load, university["id"])
        filters = build_student_filters(self.request.GET)
        page = paginate(filter_students(students, filters), self.request.GET.get("page"), STUDENTS_PER_PAGE)
        query = self.request.GET.copy()
        query.pop("page", None)
        context.update(
            {
                "load_state": load_state,
                "university": university,
                "filters": filters,
                "page": page,
                "querystring": query.urlencode(),
                "degree_choices": UniversityStudent.DEGREE_CHOICES,
                "course_choices": UniversityStudent.COURSE_CHOICES,
                "status_choices": UniversityStudent.STATUS_CHOICES,
                "batch_years": sorted({student.batch_year for student in students}, reverse=True),
            }
        )
        return context


@method_decorator(session_required, name="dispatch")
class CommunityView(ServiceMixin, TemplateView):
    template_name = "community.html"
    service_class = ProfileService

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        load_state, profiles = load(self.get_service().community)
        search_term = self.request.GET.get("search", "").strip()
        context.update(
            {
                "load_state": load_state,
                "profiles": filter_community_profiles(profiles, search_term),
                "search_term": search_term,
            }
        )
        return context
