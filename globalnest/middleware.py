from .session import SessionContext


class SessionContextMiddleware:
    """Attach a fresh :class:`SessionContext` to every request.

    Must run after ``AuthenticationMiddleware``; the initial ``set_user`` call is
    the session probe that clears the loading flag.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        context = SessionContext(request)
        request.session_context = context
        context.set_user(getattr(request, "user", None))
        return self.get_response(request)
