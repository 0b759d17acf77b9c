from __future__ import annotations

import pytest

from areacodekit import query
from areacodekit.models import AreaCode


def _ac(
    code: str, country: str, e164: str, *, region: str, city: str = "", notes: str = ""
) -> AreaCode:
    return AreaCode(code=code, country=country, region=region, city=city, e164=e164, notes=notes)


RECORDS = [
    _ac("212", "US", "1212", region="New York", city="New York", notes="Manhattan"),
    _ac("206", "US", "1206", region="Washington", city="Seattle"),
    _ac("41", "CH", "4141", region="Lucerne", city="Lucerne"),
    _ac("412", "US", "1412", region="Pennsylvania", city="Pittsburgh"),
    _ac("212", "BY", "375212", region="Vitebsk Region", city="Vitebsk"),
    _ac("406", "US", "1406", region="Montana", notes="Statewide"),
    _ac("780", "Canada", "1780", region="Alberta", city="Edmonton"),
]


def test_lookup_code_returns_every_country_sharing_the_code() -> None:
    results = query.lookup_code(RECORDS, "212")
    assert {r.country for r in results} == {"US", "BY"}
    assert all(r.code == "212" for r in results)
    assert query.lookup_code(RECORDS, "999999") == []


def test_lookup_e164_is_unambiguous() -> None:
    us = query.lookup_e164(RECORDS, "1212")
    by = query.lookup_e164(RECORDS, "375212")
    assert us is not None and us.country == "US"
    assert by is not None and by.country == "BY"
    assert query.lookup_e164(RECORDS, "999999") is None


def test_search_matches_city_region_and_notes() -> None:
    assert [r.e164 for r in query.search(RECORDS, "seattle")] == ["1206"]
    assert [r.e164 for r in query.search(RECORDS, "vitebsk reg")] == ["375212"]
    assert [r.e164 for r in query.search(RECORDS, "statewide")] == ["1406"]


@pytest.mark.parametrize("q", ["new york", "a", "Region", "lUcErNe"])
def test_search_is_case_insensitive(q: str) -> None:
    assert query.search(RECORDS, q) == query.search(RECORDS, q.upper())


def test_search_empty_query_matches_nothing() -> None:
    assert query.search(RECORDS, "") == []
    assert query.search([], "") == []


def test_suggestions_match_code_or_city_prefix() -> None:
    results = query.suggestions(RECORDS, "41")
    assert [r.e164 for r in results] == ["4141", "1412"]

    by_city = query.suggestions(RECORDS, "pitt")
    assert [r.e164 for r in by_city] == ["1412"]


def test_suggestions_respect_limit_and_are_monotonic() -> None:
    previous = 0
    for limit in range(0, 10):
        results = query.suggestions(RECORDS, "2", limit=limit)
        assert len(results) <= limit
        assert len(results) >= previous
        previous = len(results)
    assert query.suggestions(RECORDS, "2", limit=1) == [RECORDS[0]]


def test_suggestions_empty_prefix() -> None:
    assert query.suggestions(RECORDS, "") == []


def test_filter_by_country_is_substring_and_case_insensitive() -> None:
    us = query.filter_by_country(RECORDS, "us")
    assert {r.e164 for r in us} == {"1212", "1206", "1412", "1406"}
    assert [r.e164 for r in query.filter_by_country(RECORDS, "CANADA")] == ["1780"]
    assert query.filter_by_country(RECORDS, "") == []


def test_available_countries_sorted_and_distinct() -> None:
    assert query.available_countries(RECORDS) == ["BY", "CH", "Canada", "US"]
