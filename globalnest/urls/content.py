"""Directory and static content pages."""

from django.urls import path

from ..views import content, directory

urlpatterns = [
    path("universities/", directory.UniversityListView.as_view(), name="universities"),
    path(
        "universities/<int:university_id>/students/",
        directory.StudentDirectoryView.as_view(),
        name="university_students",
    ),
    path("community/", directory.CommunityView.as_view(), name="community"),
    path("resources/", content.ResourcesView.as_view(), name="resources"),
    path("news-events/", content.NewsEventsView.as_view(), name="news_events"),
]
