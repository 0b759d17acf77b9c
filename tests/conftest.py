from __future__ import annotations

import json
from pathlib import Path

import pytest


def write_source(directory: Path, name: str, records: list[dict[str, str]]) -> Path:
    path = directory / name
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def record(
    code: str, country: str, e164: str, *, region: str = "", city: str = "", notes: str = ""
) -> dict[str, str]:
    return {
        "code": code,
        "country": country,
        "region": region or f"{country} region",
        "city": city,
        "e164": e164,
        "notes": notes,
    }


@pytest.fixture
def dataset_dir(tmp_path: Path) -> Path:
    """A small dataset: two per-country files plus one file outside the naming convention."""

    data = tmp_path / "data"
    data.mkdir()
    write_source(
        data,
        "US-codes.json",
        [
            record("212", "US", "1212", region="New York", city="New York", notes="Manhattan"),
            record("206", "US", "1206", region="Washington", city="Seattle"),
            record("415", "US", "1415", region="California", city="San Francisco"),
        ],
    )
    write_source(
        data,
        "BY-codes.json",
        [record("212", "BY", "375212", region="Vitebsk Region", city="Vitebsk")],
    )
    write_source(
        data,
        "extras.json",
        [
            record("787", "PR", "1787", region="Puerto Rico", city="San Juan"),
            record("780", "Canada", "1780", region="Alberta", city="Edmonton"),
        ],
    )
    return data
