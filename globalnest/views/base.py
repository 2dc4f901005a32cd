from __future__ import annotations

from typing import Any, Callable

from ..exceptions import DataAccessError

LOADED, ERROR = "loaded", "error"

_EMPTY = object()


class ServiceMixin:
    """Builds the view's data-access service around the request's session context."""

    service_class = None

    def get_service(self, service_class=None):
        return (service_class or self.service_class)(self.request.session_context)


def load(loader: Callable[..., Any], *args, default=_EMPTY, **kwargs) -> tuple[str, Any]:
    """Run a service read and report the resulting page state.

    The service has already logged and notified on failure; the page only
    needs to know it should render its error state.
    """

    try:
        return LOADED, loader(*args, **kwargs)
    except DataAccessError:
        return ERROR, [] if default is _EMPTY else default
