"""Shared plumbing for the per-table data-access services."""

from __future__ import annotations

import logging
from contextlib import contextmanager

from django.contrib import messages
from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError

from ..exceptions import DataAccessError

logger = logging.getLogger(__name__)


class TableService:
    """One table, one session context.

    Subclasses set ``model`` and ``label``; every public operation wraps its
    ORM call in :meth:`_remote_call` so failures are logged, shown to the
    visitor and re-raised as :class:`DataAccessError`.
    """

    model = None
    label = "records"

    def __init__(self, context):
        self.context = context

    @property
    def user(self):
        return self.context.user

    def _fail(self, action: str, exc: Exception | None = None, message: str | None = None):
        message = message or f"Failed to {action}"
        if exc is None:
            logger.error("%s: %s", self.__class__.__name__, message)
        else:
            logger.exception("%s could not %s", self.__class__.__name__, action)
        self.context.notify(messages.ERROR, message)
        raise DataAccessError(message) from exc

    @contextmanager
    def _remote_call(self, action: str):
        try:
            yield
        except ObjectDoesNotExist as exc:
            self._fail(action, exc, message=f"Failed to {action}: not found")
        except (DatabaseError, OSError) as exc:
            self._fail(action, exc)

    def _owned(self):
        return self.model.objects.filter(user=self.user)

    # Generic CRUD ---------------------------------------------------------
    def queryset(self):
        return self.model.objects.all()

    def load(self) -> list:
        with self._remote_call(f"load {self.label}"):
            return list(self.queryset())

    def get(self, pk):
        with self._remote_call(f"load {self.label}"):
            return self.queryset().get(pk=pk)

    def get_owned(self, pk):
        with self._remote_call(f"load {self.label}"):
            return self._owned().get(pk=pk)

    def create(self, fields: dict):
        with self._remote_call(f"create {self.label}"):
            return self.model.objects.create(user=self.user, **fields)

    def update(self, pk, fields: dict):
        with self._remote_call(f"update {self.label}"):
            instance = self._owned().get(pk=pk)
            for name, value in fields.items():
                setattr(instance, name, value)
            instance.save()
            return instance

    def remove(self, pk) -> None:
        with self._remote_call(f"delete {self.label}"):
            deleted, _ = self._owned().filter(pk=pk).delete()
            if not deleted:
                raise self.model.DoesNotExist
