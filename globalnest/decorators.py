from functools import wraps

from django.contrib.auth.views import redirect_to_login
from django.urls import reverse


def session_required(view_func):
    """Send visitors without a signed-in session to the login page."""

    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        context = getattr(request, "session_context", None)
        if context is None or not context.is_authenticated:
            return redirect_to_login(request.get_full_path(), login_url=reverse("login"))
        return view_func(request, *args, **kwargs)

    return _wrapped_view
