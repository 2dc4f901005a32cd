from django import template

from ..formatting import (
    format_currency,
    format_location,
    format_session_date,
    format_time_slot,
    relative_date as _relative_date,
    star_states,
    title_status as _title_status,
)

register = template.Library()


@register.filter
def currency(amount, code="USD"):
    return format_currency(amount, code)


@register.filter
def stars(rating):
    """``True``/``False`` per star, for rendering filled and empty icons."""
    return star_states(rating)


@register.filter
def location(raw):
    return format_location(raw)


@register.filter
def session_date(value):
    return format_session_date(value)


@register.filter
def time_slot(value):
    return format_time_slot(value)


@register.filter
def relative_date(value):
    return _relative_date(value)


@register.filter
def title_status(value):
    return _title_status(value)


@register.simple_tag(takes_context=True)
def query_with(context, **params):
    """Current query string with ``params`` replaced, for filter and carousel links."""

    query = context["request"].GET.copy()
    for key, value in params.items():
        if value in (None, ""):
            query.pop(key, None)
        else:
            query[key] = value
    encoded = query.urlencode()
    return f"?{encoded}" if encoded else "?"
