from ..models import Feedback
from .base import TableService


class FeedbackService(TableService):
    model = Feedback
    label = "feedback"

    def submit(self, fields: dict) -> Feedback:
        with self._remote_call("send feedback"):
            return Feedback.objects.create(user=self.user, subject=fields["subject"], message=fields["message"])
