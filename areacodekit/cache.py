"""
In-memory cache for the area code dataset.

The cache is an asyncio actor: every state change happens on the event loop
between await points, so no lock is needed for the dictionaries themselves.
Loads are single-flight. The first caller for a key starts an `asyncio.Task`
and records it as in flight; callers arriving before it finishes await the
same task (through `asyncio.shield`, so a cancelled waiter does not cancel the
load for everyone else). A failed load clears its marker and leaves the cache
empty, so the next call starts over.

Instances are bound to the event loop they are first used on.
"""

from __future__ import annotations

import asyncio
import logging

from areacodekit.errors import SourceNotFoundError
from areacodekit.loader import DatasetLoader
from areacodekit.models import AreaCode
from areacodekit.query import filter_by_country

logger = logging.getLogger(__name__)

Snapshot = tuple[AreaCode, ...]


def normalize_country_key(country: str) -> str:
    return country.strip().upper()


def _log_load_failure(task: asyncio.Task[Snapshot]) -> None:
    # Retrieving the exception here also keeps asyncio from reporting it as
    # "never retrieved" when every waiter was cancelled.
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.warning("Area code load failed: %s", exc, extra={"task": task.get_name()})


class AreaCodeCache:
    """
    Full-dataset and per-country caches in front of a `DatasetLoader`.

    Entries never expire; call `clear()` to drop them.
    """

    def __init__(self, loader: DatasetLoader) -> None:
        self._loader = loader
        self._all: Snapshot | None = None
        self._by_country: dict[str, Snapshot] = {}
        self._all_task: asyncio.Task[Snapshot] | None = None
        self._country_tasks: dict[str, asyncio.Task[Snapshot]] = {}

    @property
    def loader(self) -> DatasetLoader:
        return self._loader

    @property
    def is_loaded(self) -> bool:
        return self._all is not None

    def cached_countries(self) -> list[str]:
        return sorted(self._by_country)

    async def get_all_codes(self) -> Snapshot:
        """Return the merged dataset, loading it once on first use."""

        if self._all is not None:
            logger.debug("Full dataset cache hit")
            return self._all

        task = self._all_task
        if task is None:
            logger.debug("Full dataset cache miss; starting load")
            task = asyncio.create_task(self._load_all(), name="areacodekit-load-all")
            task.add_done_callback(_log_load_failure)
            self._all_task = task
        else:
            logger.debug("Full dataset load in flight; waiting")
        return await asyncio.shield(task)

    async def _load_all(self) -> Snapshot:
        task = asyncio.current_task()
        try:
            records: Snapshot = tuple(await self._loader.load_all())
        except BaseException:
            if self._all_task is task:
                self._all_task = None
            raise

        # A clear() during the load discards the marker; the result still goes
        # to its waiters but is not published.
        if self._all_task is task:
            self._all = records
            self._all_task = None
            logger.info("Cached %d area codes", len(records), extra={"count": len(records)})
        return records

    async def codes_for_country(self, country: str) -> Snapshot:
        """
        Return the records for `country` (a code such as "US" or a name).

        A `<COUNTRY>-codes.json` source is read directly when it exists;
        otherwise the full dataset is filtered by case-insensitive substring
        match on the country field. Both outcomes, empty ones included, are
        cached under the uppercased identifier.
        """

        key = normalize_country_key(country)
        cached = self._by_country.get(key)
        if cached is not None:
            logger.debug("Country cache hit for %s", key, extra={"country": key})
            return cached

        task = self._country_tasks.get(key)
        if task is None:
            task = asyncio.create_task(
                self._load_country(key), name=f"areacodekit-load-{key or 'empty'}"
            )
            task.add_done_callback(_log_load_failure)
            self._country_tasks[key] = task
        return await asyncio.shield(task)

    async def _load_country(self, key: str) -> Snapshot:
        task = asyncio.current_task()
        try:
            try:
                records: Snapshot = tuple(await self._loader.load_country(key))
            except SourceNotFoundError:
                logger.debug(
                    "No source for %s; filtering full dataset", key, extra={"country": key}
                )
                records = tuple(filter_by_country(await self.get_all_codes(), key))
        except BaseException:
            if self._country_tasks.get(key) is task:
                del self._country_tasks[key]
            raise

        if self._country_tasks.get(key) is task:
            self._by_country[key] = records
            del self._country_tasks[key]
        return records

    def clear(self) -> None:
        """
        Drop both caches and forget any in-flight loads.

        Loads already running are not cancelled; their results reach the
        callers awaiting them but are not cached.
        """

        self._all = None
        self._by_country = {}
        self._all_task = None
        self._country_tasks = {}
        logger.debug("Area code cache cleared")
