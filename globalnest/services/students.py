from ..models import UniversityStudent
from .base import TableService


class StudentDirectoryService(TableService):
    model = UniversityStudent
    label = "students"

    def load(self, university_id: int) -> list[UniversityStudent]:
        with self._remote_call(f"load {self.label}"):
            return list(UniversityStudent.objects.filter(university_id=university_id).order_by("name", "id"))
