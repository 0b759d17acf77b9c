"""
Public entry point: `AreaCodeKit`.

An `AreaCodeKit` owns one `AreaCodeCache`. Create one per application (or per
test) and share it; there is no module-level instance.
"""

from __future__ import annotations

import logging

from areacodekit import query
from areacodekit.cache import AreaCodeCache
from areacodekit.config import AreaCodeSettings
from areacodekit.loader import DatasetLoader
from areacodekit.models import AreaCode

logger = logging.getLogger(__name__)


class AreaCodeKit:
    """
    Async query surface over the area code dataset.

    Args:
        settings: Configuration; code defaults when omitted.
        loader: Loader to use instead of one built from `settings`.
        cache: Cache to use instead of one built around `loader`.
    """

    def __init__(
        self,
        settings: AreaCodeSettings | None = None,
        *,
        loader: DatasetLoader | None = None,
        cache: AreaCodeCache | None = None,
    ) -> None:
        self.settings = settings or AreaCodeSettings()
        if cache is None:
            if loader is None:
                loader = DatasetLoader(
                    self.settings.data_dir, parallel=self.settings.parallel_loading
                )
            cache = AreaCodeCache(loader)
        self._cache = cache

    @property
    def cache(self) -> AreaCodeCache:
        return self._cache

    async def get_all_codes(self) -> list[AreaCode]:
        return list(await self._cache.get_all_codes())

    async def lookup(self, code: str) -> list[AreaCode]:
        """All records with this area code; several countries may share it."""

        return query.lookup_code(await self._cache.get_all_codes(), code)

    async def lookup_e164(self, e164: str) -> AreaCode | None:
        """The record for an E.164 prefix such as "1212" (no leading "+")."""

        return query.lookup_e164(await self._cache.get_all_codes(), e164)

    async def search(self, text: str) -> list[AreaCode]:
        if not text:
            return []
        return query.search(await self._cache.get_all_codes(), text)

    async def codes_for_country(self, country: str) -> list[AreaCode]:
        return list(await self._cache.codes_for_country(country))

    async def suggestions(self, prefix: str, limit: int | None = None) -> list[AreaCode]:
        if limit is None:
            limit = self.settings.suggestion_limit
        return query.suggestions(await self._cache.get_all_codes(), prefix, limit=limit)

    async def available_countries(self) -> list[str]:
        return query.available_countries(await self._cache.get_all_codes())

    def clear_cache(self) -> None:
        logger.info("Clearing area code cache")
        self._cache.clear()
