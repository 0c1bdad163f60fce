"""Core data models for the visa guide."""

from dataclasses import dataclass, field, asdict
from typing import List, Optional, Dict, Any, Union

PURPOSES = ("tourism", "business", "transit")

VISA_TYPES = ("visa_free", "visa_on_arrival", "evisa", "visa_required", "eta")

VISA_CATEGORIES = (
    "visa_free",
    "visa_on_arrival",
    "eta",
    "e_visa",
    "visa_required",
    "no_admission",
    "unknown",
)

REQUIREMENT_CATEGORIES = ("passport", "visa", "health", "money", "arrival", "other")

DEFAULT_PURPOSE = "tourism"


@dataclass
class RawRow:
    passport: str
    destination: str
    requirement: str


@dataclass
class VisaRule:
    """One cell of the generated visa matrix."""

    category: str
    max_stay_days: Optional[Union[int, float]] = None
    raw: Optional[str] = None


@dataclass
class Country:
    code: str
    name: str
    region: str


@dataclass
class EntryRequirement:
    id: str
    title: str
    details: str
    category: str
    source_urls: List[str] = field(default_factory=list)


@dataclass
class EntryRule:
    """Hand-curated entry requirements for one citizenship/destination/purpose."""

    citizenship: str
    destination: str
    purpose: str
    visa_type: str
    requirements: List[EntryRequirement] = field(default_factory=list)
    last_updated: str = ""
    sources: List[str] = field(default_factory=list)
    max_stay_days: Optional[int] = None


@dataclass
class RuleFile:
    """Exports of a single per-destination rules module."""

    destination: str
    rules: List[EntryRule] = field(default_factory=list)
    visa_matrix: Dict[str, VisaRule] = field(default_factory=dict)
    checklist: List[str] = field(default_factory=list)


@dataclass
class GenerationSummary:
    updated: int
    total: int


def visa_rule_to_dict(rule: VisaRule) -> Dict[str, Any]:
    """Serialize a matrix rule, leaving out fields that are not set."""

    return {key: value for key, value in asdict(rule).items() if value is not None}
