"""
Query functions over a dataset snapshot.

All functions are pure: they take the records to search and return new lists,
preserving dataset order. Text comparisons use `str.casefold()`.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from areacodekit.models import AreaCode

DEFAULT_SUGGESTION_LIMIT = 10


def _contains(haystack: str, needle: str) -> bool:
    return needle.casefold() in haystack.casefold()


def lookup_code(records: Iterable[AreaCode], code: str) -> list[AreaCode]:
    """Return every record whose `code` equals `code` (codes repeat across countries)."""

    return [r for r in records if r.code == code]


def lookup_e164(records: Iterable[AreaCode], e164: str) -> AreaCode | None:
    """Return the record with this E.164 prefix, or None."""

    for r in records:
        if r.e164 == e164:
            return r
    return None


def search(records: Iterable[AreaCode], query: str) -> list[AreaCode]:
    """
    Case-insensitive substring search over city, region and notes.

    An empty query matches nothing.
    """

    if not query:
        return []
    return [
        r
        for r in records
        if _contains(r.city, query) or _contains(r.region, query) or _contains(r.notes, query)
    ]


def filter_by_country(records: Iterable[AreaCode], country: str) -> list[AreaCode]:
    """Case-insensitive substring match against the `country` field."""

    if not country:
        return []
    return [r for r in records if _contains(r.country, country)]


def suggestions(
    records: Iterable[AreaCode], prefix: str, *, limit: int = DEFAULT_SUGGESTION_LIMIT
) -> list[AreaCode]:
    """
    Autocomplete candidates: `code` starts with `prefix`, or `city` starts with
    it ignoring case. The first `limit` matches in dataset order are returned.
    """

    if not prefix or limit <= 0:
        return []

    folded = prefix.casefold()
    out: list[AreaCode] = []
    for r in records:
        if r.code.startswith(prefix) or r.city.casefold().startswith(folded):
            out.append(r)
            if len(out) >= limit:
                break
    return out


def available_countries(records: Sequence[AreaCode]) -> list[str]:
    """Sorted distinct `country` values."""

    return sorted({r.country for r in records})
