"""Resolve free-form country input to an ISO 3166-1 alpha-2 code."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from postcart.country_codes import COUNTRY_CODES
from postcart.country_names import COUNTRY_NAMES

UNKNOWN_COUNTRY = "PC"

_COUNTRIES: Mapping[str, str] = MappingProxyType({**COUNTRY_CODES, **COUNTRY_NAMES})


def normalize(value: str) -> str:
    """Drop hyphens and spaces and lower-case the input."""
    return value.replace("-", "").replace(" ", "").lower()


def get_country(value: str) -> str:
    """Return the ISO2 code for a country name or code, or "PC" if unknown."""
    return _COUNTRIES.get(normalize(value), UNKNOWN_COUNTRY)