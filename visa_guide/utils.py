"""Utility helpers."""

from datetime import datetime
import re
from typing import Optional

from .countries import COUNTRIES
from .models import Country

FRIENDLY_DATE_FMT = "%A %b %d %Y"

FLAG_OVERRIDES = {"XK": "\U0001F1FD\U0001F1F0"}
WHITE_FLAG = "\U0001F3F3\uFE0F"
REGIONAL_INDICATOR_OFFSET = 0x1F1A5

VISA_TYPE_LABELS = {
    "visa_free": "Visa-free",
    "visa_on_arrival": "Visa on arrival",
    "evisa": "eVisa",
    "eta": "ETA required",
    "visa_required": "Visa required",
}

VISA_CATEGORY_LABELS = {
    "visa_free": "Visa-free",
    "visa_on_arrival": "Visa on arrival",
    "e_visa": "eVisa",
    "eta": "ETA required",
    "visa_required": "Visa required",
    "no_admission": "No admission",
}

FALLBACK_LABEL = "Check requirements"


def to_route_key(citizenship: Optional[str], destination: Optional[str]) -> str:
    if not citizenship or not destination:
        return ""
    return f"{citizenship.upper()}->{destination.upper()}"


def find_country(value: Optional[str]) -> Optional[Country]:
    """Match a country by code, name or 'Name (CODE)', ignoring case."""

    if not value:
        return None
    normalized = value.strip().lower()
    for country in COUNTRIES:
        code = country.code.lower()
        name = country.name.lower()
        if normalized in (code, name, f"{name} ({code})"):
            return country
    return None


def flag_emoji(code: Optional[str]) -> str:
    if not code:
        return ""
    upper = code.strip().upper()
    if upper in FLAG_OVERRIDES:
        return FLAG_OVERRIDES[upper]
    if not re.fullmatch(r"[A-Z]{2}", upper):
        return WHITE_FLAG
    return "".join(chr(ord(char) + REGIONAL_INDICATOR_OFFSET) for char in upper)


def visa_type_label(visa_type: Optional[str]) -> str:
    return VISA_TYPE_LABELS.get(visa_type or "", FALLBACK_LABEL)


def visa_category_label(category: Optional[str]) -> str:
    return VISA_CATEGORY_LABELS.get(category or "", FALLBACK_LABEL)


def _parse_iso(value: str) -> Optional[datetime]:
    if not value:
        return None
    try:
        if "T" in value:
            return datetime.fromisoformat(value)
        return datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return None


def format_friendly_date(value: str) -> str:
    """Return a user-friendly date heading like 'Monday Nov 24 2025'."""

    parsed = _parse_iso(value)
    if not parsed:
        return value
    return parsed.strftime(FRIENDLY_DATE_FMT)
