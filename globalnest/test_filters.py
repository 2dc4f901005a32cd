from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from django.test import SimpleTestCase

from .filters import (
    HousingFilters,
    JobFilters,
    StudentFilters,
    build_housing_filters,
    extract_salary_value,
    filter_community_profiles,
    filter_housing_listings,
    filter_job_listings,
    filter_mentors,
    filter_students,
    filter_universities,
    paginate,
    parse_range,
)
from .content import UNIVERSITIES


def housing(title, price, available_from="2024-09-01", location="Palo Alto", description=""):
    return SimpleNamespace(
        title=title,
        description=description,
        price=Decimal(price),
        available_from=date.fromisoformat(available_from),
        location=location,
    )


def job(title, salary="", job_type="part-time", company="Acme", location=None):
    return SimpleNamespace(
        title=title,
        company=company,
        description="",
        salary=salary,
        job_type=job_type,
        location=location,
    )


class HousingFilterTest(SimpleTestCase):
    def setUp(self):
        self.listings = [
            housing("Studio near Stanford", "450"),
            housing("Shared flat", "501", location={"lat": 37.4, "lng": -122.1}),
            housing("Two bedroom", "1000", available_from="2024-10-15"),
            housing("Penthouse", "2500", description="Close to STANFORD campus"),
        ]

    def test_empty_criteria_return_input_unchanged(self):
        self.assertEqual(filter_housing_listings(self.listings, "", HousingFilters()), self.listings)

    def test_price_range_is_inclusive(self):
        result = filter_housing_listings(self.listings, "", HousingFilters(price_range="501-1000"))
        self.assertEqual([listing.title for listing in result], ["Shared flat", "Two bedroom"])

    def test_open_ended_price_range(self):
        result = filter_housing_listings(self.listings, "", HousingFilters(price_range="2001+"))
        self.assertEqual([listing.title for listing in result], ["Penthouse"])

    def test_search_is_case_insensitive(self):
        upper = filter_housing_listings(self.listings, "STANFORD")
        lower = filter_housing_listings(self.listings, "stanford")
        self.assertEqual(upper, lower)
        self.assertEqual(len(upper), 2)

    def test_coordinates_are_not_searchable(self):
        self.assertEqual(filter_housing_listings(self.listings, "37.4"), [])

    def test_available_from_keeps_rows_on_or_after_date(self):
        filters = build_housing_filters({"available_from": "2024-10-01"})
        result = filter_housing_listings(self.listings, "", filters)
        self.assertEqual([listing.title for listing in result], ["Two bedroom"])

    def test_malformed_range_passes_through(self):
        result = filter_housing_listings(self.listings, "", HousingFilters(price_range="cheap"))
        self.assertEqual(result, self.listings)


class JobFilterTest(SimpleTestCase):
    def test_extract_salary_value_honours_thousands_separators(self):
        self.assertEqual(extract_salary_value("$50,000 - $70,000 per year"), 50000)
        self.assertEqual(extract_salary_value("$18/hour"), 18)
        self.assertIsNone(extract_salary_value("Competitive"))

    def test_salary_range_and_job_type(self):
        listings = [
            job("Barista", "$20,000 per year"),
            job("Analyst", "$55,000 - $65,000", job_type="full-time"),
            job("Research assistant", "Stipend provided", job_type="internship"),
        ]
        result = filter_job_listings(listings, "", JobFilters(salary_range="50001-80000"))
        self.assertEqual([item.title for item in result], ["Analyst", "Research assistant"])
        result = filter_job_listings(listings, "", JobFilters(job_type="internship"))
        self.assertEqual([item.title for item in result], ["Research assistant"])

    def test_search_matches_company(self):
        listings = [job("Tutor", company="Campus Learning"), job("Driver")]
        self.assertEqual(len(filter_job_listings(listings, "campus")), 1)


class RangeParsingTest(SimpleTestCase):
    def test_parse_range(self):
        self.assertTrue(parse_range("0-500").contains(500))
        self.assertFalse(parse_range("0-500").contains(501))
        self.assertTrue(parse_range("80001+").contains(1_000_000))
        self.assertIsNone(parse_range(""))
        self.assertIsNone(parse_range("abc-def"))

    def test_non_finite_ranges_pass_through(self):
        for raw in ("NaN", "nan-1", "sNaN", "Infinity+", "0-Infinity"):
            self.assertIsNone(parse_range(raw), raw)
        rows = [housing("Room", "700")]
        self.assertEqual(filter_housing_listings(rows, "", HousingFilters(price_range="NaN")), rows)
        jobs = [job("Barista", salary="$20,000")]
        self.assertEqual(filter_job_listings(jobs, "", JobFilters(salary_range="nan-1")), jobs)


class DirectoryFilterTest(SimpleTestCase):
    def test_students_are_anded(self):
        students = [
            SimpleNamespace(name="Ana", roll_number="CS001", degree="masters", batch_year=2023, status="current", course="cs"),
            SimpleNamespace(name="Ben", roll_number="BA002", degree="masters", batch_year=2022, status="passed", course="business"),
            SimpleNamespace(name="Cai", roll_number="CS003", degree="phd", batch_year=2023, status="current", course="cs"),
        ]
        result = filter_students(students, StudentFilters(degree="masters", batch_year="2023"))
        self.assertEqual([student.name for student in result], ["Ana"])
        result = filter_students(students, StudentFilters(search="cs0"))
        self.assertEqual([student.name for student in result], ["Ana", "Cai"])

    def test_mentors_by_expertise(self):
        mentors = [
            SimpleNamespace(name="Dana", title="Visa advisor", expertise=["Visa", "Housing"]),
            SimpleNamespace(name="Eli", title="Career coach", expertise=["Careers"]),
        ]
        self.assertEqual([m.name for m in filter_mentors(mentors, expertise="visa")], ["Dana"])
        self.assertEqual([m.name for m in filter_mentors(mentors, "coach")], ["Eli"])

    def test_community_and_universities(self):
        profiles = [SimpleNamespace(name="Fay", university="MIT"), SimpleNamespace(name="Gus", university="Yale")]
        self.assertEqual(len(filter_community_profiles(profiles, "mit")), 1)
        self.assertEqual(len(filter_universities(UNIVERSITIES, "uk")), 2)
        self.assertEqual(len(filter_universities(UNIVERSITIES, "")), 10)


class PaginateTest(SimpleTestCase):
    def test_pages_of_twelve(self):
        page = paginate(list(range(25)), 3)
        self.assertEqual(page.items, [24])
        self.assertEqual(page.total_pages, 3)
        self.assertTrue(page.has_previous)
        self.assertFalse(page.has_next)

    def test_out_of_range_page_is_clamped(self):
        self.assertEqual(paginate(list(range(5)), 9).number, 1)
        self.assertEqual(paginate([], "x").total_pages, 1)
