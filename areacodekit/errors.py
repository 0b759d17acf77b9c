"""
Error types raised by the loader and cache.

Every error carries a stable `kind` string so callers that prefer matching on a
discriminator (logs, JSON payloads) do not have to inspect the class.
"""

from __future__ import annotations


class AreaCodeError(Exception):
    """Base class for all areacodekit errors."""

    kind: str = "area_code_error"


class SourceNotFoundError(AreaCodeError):
    """Raised when no `<COUNTRY>-codes.json` source exists for an identifier."""

    kind = "source_not_found"

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"No data source found for country: {identifier}")


class NoSourcesFoundError(AreaCodeError):
    """Raised when the data directory holds no JSON sources at all."""

    kind = "no_sources_found"

    def __init__(self) -> None:
        super().__init__("No area code data sources found")


class InvalidDataError(AreaCodeError):
    """Raised when a source cannot be read (I/O failure, not a JSON file)."""

    kind = "invalid_data"

    def __init__(self, reason: str, *, source: str | None = None) -> None:
        self.reason = reason
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"Invalid data: {prefix}{reason}")


class DecodingFailedError(AreaCodeError):
    """Raised when a source was read but does not match the record schema."""

    kind = "decoding_failed"

    def __init__(self, reason: str, *, source: str | None = None) -> None:
        self.reason = reason
        self.source = source
        prefix = f"{source}: " if source else ""
        super().__init__(f"Failed to decode data: {prefix}{reason}")
