def session_context(request):
    context = getattr(request, "session_context", None)
    return {
        "session_user": context.user if context is not None else None,
        "session_loading": context.loading if context is not None else False,
    }
