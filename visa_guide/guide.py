"""Guide lookup backing the requirements page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .index import RulesIndex
from .models import DEFAULT_PURPOSE, PURPOSES, EntryRule, VisaRule
from .utils import (
    flag_emoji,
    format_friendly_date,
    to_route_key,
    visa_category_label,
    visa_type_label,
)


@dataclass
class Guide:
    citizenship: Optional[str]
    destination: Optional[str]
    purpose: str
    route_key: str
    stay_days: Optional[int] = None
    rule: Optional[EntryRule] = None
    visa_matrix_rule: Optional[VisaRule] = None
    transit: Optional[str] = None
    transit_hours: Optional[float] = None
    transit_rule: Optional[EntryRule] = None
    transit_visa_matrix_rule: Optional[VisaRule] = None
    missing_data: bool = False
    visa_label: Optional[str] = None
    last_updated_label: Optional[str] = None
    citizenship_flag: str = ""
    destination_flag: str = ""


def _upper(value: Optional[str]) -> Optional[str]:
    return value.strip().upper() if value and value.strip() else None


def build_guide(
    index: RulesIndex,
    citizenship: Optional[str],
    destination: Optional[str],
    purpose: Optional[str] = None,
    stay_days: Optional[int] = None,
    transit: Optional[str] = None,
    transit_hours: Optional[float] = None,
) -> Guide:
    """Resolve everything the guide page shows for one trip."""

    citizenship = _upper(citizenship)
    destination = _upper(destination)
    transit = _upper(transit)
    purpose = (purpose or DEFAULT_PURPOSE).lower()
    if purpose not in PURPOSES:
        raise ValueError(f"Unsupported purpose {purpose!r}, expected one of {', '.join(PURPOSES)}.")

    rule = index.find_entry_rule(citizenship, destination, purpose)
    visa_matrix_rule = index.find_visa_matrix_rule(citizenship, destination)

    guide = Guide(
        citizenship=citizenship,
        destination=destination,
        purpose=purpose,
        route_key=to_route_key(citizenship, destination),
        stay_days=stay_days,
        rule=rule,
        visa_matrix_rule=visa_matrix_rule,
        transit=transit,
        transit_hours=transit_hours,
        missing_data=rule is None and bool(citizenship and destination),
        citizenship_flag=flag_emoji(citizenship),
        destination_flag=flag_emoji(destination),
    )
    if transit:
        guide.transit_rule = index.find_entry_rule(citizenship, transit, "transit")
        guide.transit_visa_matrix_rule = index.find_visa_matrix_rule(citizenship, transit)

    if rule is not None:
        guide.visa_label = visa_type_label(rule.visa_type)
        guide.last_updated_label = format_friendly_date(rule.last_updated)
    elif visa_matrix_rule is not None:
        guide.visa_label = visa_category_label(visa_matrix_rule.category)
    return guide
