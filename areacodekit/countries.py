"""
Static country tables used by the record model.

Keys are ISO 3166-1 alpha-2 codes plus the legacy aliases that appear in older
data files ("UK", "USA", ...).
"""

from __future__ import annotations

GLOBE = "\U0001F30D"

# Regional Indicator Symbol Letter A.
_REGIONAL_INDICATOR_A = 0x1F1E6

COUNTRY_ALIASES: dict[str, str] = {
    "UK": "GB",
    "USA": "US",
    "CANADA": "CA",
    "BRAZIL": "BR",
}

COUNTRY_NAMES: dict[str, str] = {
    "AD": "Andorra",
    "AL": "Albania",
    "AR": "Argentina",
    "AT": "Austria",
    "AU": "Australia",
    "BA": "Bosnia and Herzegovina",
    "BE": "Belgium",
    "BG": "Bulgaria",
    "BR": "Brazil",
    "BY": "Belarus",
    "CA": "Canada",
    "CH": "Switzerland",
    "CN": "China",
    "CZ": "Czech Republic",
    "DE": "Germany",
    "DK": "Denmark",
    "ES": "Spain",
    "FI": "Finland",
    "FR": "France",
    "GB": "United Kingdom",
    "GG": "Guernsey",
    "GI": "Gibraltar",
    "GR": "Greece",
    "GU": "Guam",
    "HR": "Croatia",
    "HU": "Hungary",
    "IE": "Ireland",
    "IN": "India",
    "IT": "Italy",
    "JP": "Japan",
    "MX": "Mexico",
    "NL": "Netherlands",
    "NO": "Norway",
    "PL": "Poland",
    "PR": "Puerto Rico",
    "PT": "Portugal",
    "RO": "Romania",
    "RS": "Serbia",
    "SE": "Sweden",
    "SI": "Slovenia",
    "SK": "Slovakia",
    "UA": "Ukraine",
    "US": "United States",
    "VI": "U.S. Virgin Islands",
}


def canonical_country(country: str) -> str:
    """Uppercase `country` and resolve legacy aliases to their alpha-2 code."""

    key = country.strip().upper()
    return COUNTRY_ALIASES.get(key, key)


def country_name(country: str) -> str:
    """Return the English country name, or `country` unchanged when unmapped."""

    return COUNTRY_NAMES.get(canonical_country(country), country)


def flag_emoji(country: str) -> str:
    """
    Return the flag emoji for a two-letter country code.

    Each ASCII letter is shifted into the Regional Indicator block. Anything that
    is not exactly two ASCII letters after alias resolution gets the globe glyph.
    """

    code = canonical_country(country)
    if len(code) != 2 or not (code.isascii() and code.isalpha()):
        return GLOBE
    return "".join(chr(_REGIONAL_INDICATOR_A + ord(ch) - ord("A")) for ch in code)
