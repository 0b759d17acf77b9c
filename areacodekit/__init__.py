"""
areacodekit - telephone area code lookup over a bundled static dataset.

The package loads per-country JSON files shipped in `areacodekit/data`, caches
them in memory, and answers lookups by area code, by E.164 prefix, by free-text
search, and by country.
"""

from __future__ import annotations

from areacodekit.config import AreaCodeSettings, load_settings
from areacodekit.errors import (
    AreaCodeError,
    DecodingFailedError,
    InvalidDataError,
    NoSourcesFoundError,
    SourceNotFoundError,
)
from areacodekit.logging_config import configure_logging
from areacodekit.models import AreaCode
from areacodekit.service import AreaCodeKit

__all__ = [
    "__version__",
    "AreaCode",
    "AreaCodeKit",
    "AreaCodeSettings",
    "load_settings",
    "configure_logging",
    "AreaCodeError",
    "DecodingFailedError",
    "InvalidDataError",
    "NoSourcesFoundError",
    "SourceNotFoundError",
]

__version__ = "0.1.0"
