"""In-memory filtering for already loaded collections.

Every function here is pure: it takes the rows a page has loaded plus the
criteria the visitor picked and returns the matching subset, preserving order.
Empty criteria always pass through.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterable, Mapping, Sequence, TypeVar

from .location import location_search_text

T = TypeVar("T")

SALARY_NUMBER_RE = re.compile(r"\d{1,3}(?:,\d{3})+|\d+")

HOUSING_PRICE_RANGES = (
    ("0-500", "$0 - $500"),
    ("501-1000", "$501 - $1000"),
    ("1001-2000", "$1001 - $2000"),
    ("2001+", "$2001+"),
)
JOB_SALARY_RANGES = (
    ("0-30000", "$0 - $30,000"),
    ("30001-50000", "$30,001 - $50,000"),
    ("50001-80000", "$50,001 - $80,000"),
    ("80001+", "$80,001+"),
)

STUDENTS_PER_PAGE = 12


@dataclass(frozen=True)
class HousingFilters:
    """Value object holding the housing page's filter selections."""

    price_range: str = ""
    available_from: date | None = None


@dataclass(frozen=True)
class JobFilters:
    job_type: str = ""
    salary_range: str = ""


@dataclass(frozen=True)
class StudentFilters:
    degree: str = ""
    batch_year: str = ""
    status: str = ""
    course: str = ""
    search: str = ""


@dataclass(frozen=True)
class NumericRange:
    minimum: Decimal
    maximum: Decimal | None = None

    def contains(self, value) -> bool:
        if value is None:
            return False
        value = Decimal(str(value))
        if value < self.minimum:
            return False
        return self.maximum is None or value <= self.maximum


@dataclass(frozen=True)
class Page:
    items: list
    number: int
    total_pages: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.number > 1

    @property
    def has_next(self) -> bool:
        return self.number < self.total_pages


# ---------------------------------------------------------------------------
# Criteria parsing
# ---------------------------------------------------------------------------


def parse_range(raw: str | None) -> NumericRange | None:
    """Parse ``"min-max"`` or ``"min+"``; anything else means no filter."""

    text = (raw or "").strip()
    if not text:
        return None
    try:
        if text.endswith("+"):
            bounds = (Decimal(text[:-1].strip()), None)
        else:
            lower, _, upper = text.partition("-")
            bounds = (Decimal(lower.strip()), Decimal(upper.strip()) if upper.strip() else None)
    except InvalidOperation:
        return None
    # NaN and Infinity parse but cannot be compared.
    if not all(bound.is_finite() for bound in bounds if bound is not None):
        return None
    return NumericRange(*bounds)


def parse_date(raw: Any) -> date | None:
    if raw in (None, ""):
        return None
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    try:
        return date.fromisoformat(str(raw).strip())
    except ValueError:
        return None


def build_housing_filters(data: Mapping[str, str]) -> HousingFilters:
    return HousingFilters(
        price_range=(data.get("price_range") or "").strip(),
        available_from=parse_date(data.get("available_from")),
    )


def build_job_filters(data: Mapping[str, str]) -> JobFilters:
    return JobFilters(
        job_type=(data.get("job_type") or "").strip(),
        salary_range=(data.get("salary_range") or "").strip(),
    )


def build_student_filters(data: Mapping[str, str]) -> StudentFilters:
    return StudentFilters(
        degree=(data.get("degree") or "").strip(),
        batch_year=(data.get("batch_year") or "").strip(),
        status=(data.get("status") or "").strip(),
        course=(data.get("course") or "").strip(),
        search=(data.get("search") or "").strip(),
    )


def extract_salary_value(salary: str | None) -> int | None:
    """Smallest whole number in a free-text salary, ignoring thousands separators."""

    if not salary:
        return None
    numbers = [int(match.replace(",", "")) for match in SALARY_NUMBER_RE.findall(salary)]
    if not numbers:
        return None
    return min(numbers)


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def matches_search(search_term: str | None, *fields: Any) -> bool:
    term = (search_term or "").strip().lower()
    if not term:
        return True
    return any(term in str(field).lower() for field in fields if field)


def _filter(rows: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    return [row for row in rows if predicate(row)]


def filter_housing_listings(
    listings: Iterable[T],
    search_term: str = "",
    filters: HousingFilters | None = None,
) -> list[T]:
    filters = filters or HousingFilters()
    price_range = parse_range(filters.price_range)

    def predicate(listing) -> bool:
        if not matches_search(
            search_term,
            listing.title,
            listing.description,
            location_search_text(listing.location),
        ):
            return False
        if price_range is not None and not price_range.contains(listing.price):
            return False
        if filters.available_from is not None:
            available = parse_date(listing.available_from)
            if available is None or available < filters.available_from:
                return False
        return True

    return _filter(listings, predicate)


def filter_job_listings(
    listings: Iterable[T],
    search_term: str = "",
    filters: JobFilters | None = None,
) -> list[T]:
    filters = filters or JobFilters()
    salary_range = parse_range(filters.salary_range)

    def predicate(listing) -> bool:
        if not matches_search(
            search_term,
            listing.title,
            listing.company,
            listing.description,
            location_search_text(listing.location),
        ):
            return False
        if filters.job_type and listing.job_type != filters.job_type:
            return False
        if salary_range is not None:
            salary = extract_salary_value(listing.salary)
            # Listings without a numeric salary are not excluded.
            if salary is not None and not salary_range.contains(salary):
                return False
        return True

    return _filter(listings, predicate)


def filter_students(students: Iterable[T], filters: StudentFilters | None = None) -> list[T]:
    filters = filters or StudentFilters()

    def predicate(student) -> bool:
        if filters.degree and student.degree != filters.degree:
            return False
        if filters.batch_year and str(student.batch_year) != filters.batch_year:
            return False
        if filters.status and student.status != filters.status:
            return False
        if filters.course and student.course != filters.course:
            return False
        return matches_search(filters.search, student.name, student.roll_number)

    return _filter(students, predicate)


def filter_mentors(mentors: Iterable[T], search_term: str = "", expertise: str = "") -> list[T]:
    expertise = (expertise or "").strip().lower()

    def predicate(mentor) -> bool:
        tags = list(mentor.expertise or [])
        if expertise and expertise not in (tag.lower() for tag in tags):
            return False
        return matches_search(search_term, mentor.name, mentor.title, *tags)

    return _filter(mentors, predicate)


def filter_community_profiles(profiles: Iterable[T], search_term: str = "") -> list[T]:
    return _filter(profiles, lambda profile: matches_search(search_term, profile.name, profile.university))


def filter_universities(universities: Iterable[Mapping[str, Any]], search_term: str = "") -> list:
    return _filter(universities, lambda uni: matches_search(search_term, uni["name"], uni["location"]))


def paginate(rows: Sequence[T], page_number: Any, per_page: int = STUDENTS_PER_PAGE) -> Page:
    """Slice a fully loaded list; out-of-range page numbers are clamped."""

    total_items = len(rows)
    total_pages = max(1, math.ceil(total_items / per_page))
    try:
        number = int(page_number)
    except (TypeError, ValueError):
        number = 1
    number = min(max(number, 1), total_pages)
    start = (number - 1) * per_page
    return Page(
        items=list(rows[start:start + per_page]),
        number=number,
        total_pages=total_pages,
        total_items=total_items,
    )
