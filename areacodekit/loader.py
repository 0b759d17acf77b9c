"""
Dataset loader.

Reads the per-country JSON files (bundled in `areacodekit.data` by default) and
decodes them into `AreaCode` records. File I/O runs in worker threads so the
event loop stays responsive; a failure in any single source fails the whole
load instead of silently returning a partial dataset.
"""

from __future__ import annotations

import asyncio
import logging
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from pydantic import BaseModel, TypeAdapter, ValidationError
from pydantic import ConfigDict as PydanticConfigDict

from areacodekit.errors import (
    DecodingFailedError,
    InvalidDataError,
    NoSourcesFoundError,
    SourceNotFoundError,
)
from areacodekit.models import AreaCode

logger = logging.getLogger(__name__)

SOURCE_SUFFIX = ".json"
COUNTRY_SOURCE_SUFFIX = "-codes.json"


class _AreaCodeRecord(BaseModel):
    model_config = PydanticConfigDict(extra="ignore", strict=True, frozen=True)

    code: str
    country: str
    region: str
    city: str
    e164: str
    notes: str

    def to_area_code(self) -> AreaCode:
        return AreaCode(
            code=self.code,
            country=self.country,
            region=self.region,
            city=self.city,
            e164=self.e164,
            notes=self.notes,
        )


_RECORDS_ADAPTER = TypeAdapter(list[_AreaCodeRecord])


def country_source_name(country: str) -> str:
    """Return the file name that holds the records for `country`."""

    return f"{country.strip().upper()}{COUNTRY_SOURCE_SUFFIX}"


def decode_records(payload: bytes | str, *, source: str) -> list[AreaCode]:
    """
    Decode a JSON array of area code objects.

    Raises:
        DecodingFailedError: invalid JSON, not an array, missing keys or
            non-string values.
    """

    try:
        records = _RECORDS_ADAPTER.validate_json(payload)
    except ValidationError as exc:
        first = exc.errors()[0] if exc.error_count() else {}
        loc = ".".join(str(p) for p in first.get("loc", ()))
        msg = first.get("msg", str(exc))
        reason = f"{msg} at {loc}" if loc else msg
        raise DecodingFailedError(reason, source=source) from exc
    return [r.to_area_code() for r in records]


class DatasetLoader:
    """
    Loads area code records from a directory of JSON sources.

    Args:
        data_dir: Directory holding the sources. `None` uses the data bundled
            with the package.
        parallel: Read sources concurrently (one worker thread each).
    """

    def __init__(
        self, data_dir: Path | Traversable | None = None, *, parallel: bool = True
    ) -> None:
        self._root: Traversable = (
            data_dir if data_dir is not None else resources.files("areacodekit.data")
        )
        self.parallel = parallel
        self.load_count = 0

    @property
    def root(self) -> Traversable:
        return self._root

    def sources(self) -> list[Traversable]:
        """Return every JSON source in the data directory, sorted by name."""

        try:
            entries = list(self._root.iterdir())
        except (FileNotFoundError, NotADirectoryError):
            return []
        except OSError as exc:
            raise InvalidDataError(str(exc), source=str(self._root)) from exc

        found = [e for e in entries if e.name.endswith(SOURCE_SUFFIX) and e.is_file()]
        return sorted(found, key=lambda e: e.name)

    def _read_source(self, source: Traversable) -> list[AreaCode]:
        try:
            payload = source.read_bytes()
        except OSError as exc:
            raise InvalidDataError(str(exc), source=source.name) from exc
        records = decode_records(payload, source=source.name)
        logger.debug(
            "Loaded %d codes from %s",
            len(records),
            source.name,
            extra={"source": source.name, "count": len(records)},
        )
        return records

    async def load_all(self) -> list[AreaCode]:
        """
        Load and merge every source.

        Per-file record order is kept; files are concatenated in name order.

        Raises:
            NoSourcesFoundError: the data directory has no JSON sources.
            InvalidDataError / DecodingFailedError: any source failed.
        """

        sources = self.sources()
        if not sources:
            raise NoSourcesFoundError()

        self.load_count += 1
        logger.info("Loading %d area code sources", len(sources), extra={"count": len(sources)})

        if self.parallel:
            chunks = await asyncio.gather(
                *(asyncio.to_thread(self._read_source, s) for s in sources)
            )
        else:
            chunks = [await asyncio.to_thread(self._read_source, s) for s in sources]

        merged: list[AreaCode] = []
        seen: set[str] = set()
        for chunk in chunks:
            for record in chunk:
                if record.e164 in seen:
                    logger.warning("Duplicate E.164 prefix in dataset: %s", record.e164)
                seen.add(record.e164)
            merged.extend(chunk)
        return merged

    async def load_country(self, country: str) -> list[AreaCode]:
        """
        Load the `<COUNTRY>-codes.json` source for `country`.

        Raises:
            SourceNotFoundError: no such source exists.
        """

        identifier = country.strip().upper()
        if not identifier or "/" in identifier or "\\" in identifier:
            raise SourceNotFoundError(identifier)
        source = self._root.joinpath(country_source_name(identifier))
        if not source.is_file():
            raise SourceNotFoundError(identifier)
        return await asyncio.to_thread(self._read_source, source)
