"""
Record model for the area code dataset.

`AreaCode` mirrors one object of the bundled JSON files. Everything beyond the
six stored fields is computed on access.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import phonenumbers

from areacodekit.countries import canonical_country, country_name, flag_emoji


@dataclass(frozen=True, slots=True)
class AreaCode:
    """
    One area code entry.

    Fields:
        code: Local area/city code. Not unique across countries.
        country: ISO 3166-1 alpha-2 code (or a legacy alias such as "UK").
        region: State, province or other subdivision.
        city: City name; may be empty.
        e164: Country calling code followed by `code`. Unique per dataset and
            used as the record identity.
        notes: Free-text annotation; may be empty.
    """

    code: str = field(compare=False)
    country: str = field(compare=False)
    region: str = field(compare=False)
    city: str = field(compare=False)
    e164: str
    notes: str = field(compare=False)

    @property
    def id(self) -> str:
        return self.e164

    @property
    def flag(self) -> str:
        return flag_emoji(self.country)

    @property
    def country_name(self) -> str:
        return country_name(self.country)

    @property
    def location(self) -> str:
        return self.city or self.region

    @property
    def display_name(self) -> str:
        return f"{self.flag} {self.code} - {self.location}"

    @property
    def subtitle(self) -> str:
        if not self.city:
            return self.country_name
        return f"{self.region}, {self.country_name}"

    @property
    def calling_code(self) -> int | None:
        """ITU calling code for `country` from libphonenumber metadata, if known."""

        cc = phonenumbers.country_code_for_region(canonical_country(self.country))
        return int(cc) or None

    def format_phone_number(self, local_number: str) -> str:
        """Prefix `local_number` with "+" and this record's E.164 prefix."""

        return f"+{self.e164}{local_number}"

    def to_dict(self) -> dict[str, str]:
        return {
            "code": self.code,
            "country": self.country,
            "region": self.region,
            "city": self.city,
            "e164": self.e164,
            "notes": self.notes,
        }
