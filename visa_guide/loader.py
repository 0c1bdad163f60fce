"""Load the exports of per-destination rules modules."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from .models import (
    PURPOSES,
    REQUIREMENT_CATEGORIES,
    VISA_CATEGORIES,
    VISA_TYPES,
    EntryRequirement,
    EntryRule,
    RuleFile,
    VisaRule,
)

RULES_FILENAME = "rules.py"


class RuleFileError(ValueError):
    """Raised when a rules module exports data that cannot be loaded."""


def _check_choice(value: Any, choices: Tuple[str, ...], what: str, path: Path) -> str:
    if value not in choices:
        raise RuleFileError(f"{path}: unknown {what} {value!r}")
    return value


def _to_requirement(data: Mapping[str, Any], path: Path) -> EntryRequirement:
    return EntryRequirement(
        id=data["id"],
        title=data["title"],
        details=data["details"],
        category=_check_choice(
            data["category"], REQUIREMENT_CATEGORIES, "requirement category", path
        ),
        source_urls=list(data.get("source_urls", [])),
    )


def _to_entry_rule(data: Mapping[str, Any], path: Path) -> EntryRule:
    try:
        return EntryRule(
            citizenship=data["citizenship"].upper(),
            destination=data["destination"].upper(),
            purpose=_check_choice(data["purpose"], PURPOSES, "purpose", path),
            visa_type=_check_choice(data["visa_type"], VISA_TYPES, "visa type", path),
            max_stay_days=data.get("max_stay_days"),
            requirements=[_to_requirement(req, path) for req in data.get("requirements", [])],
            last_updated=data.get("last_updated", ""),
            sources=list(data.get("sources", [])),
        )
    except KeyError as exc:
        raise RuleFileError(f"{path}: entry rule is missing field {exc}") from exc


def _to_visa_rule(data: Mapping[str, Any], path: Path) -> VisaRule:
    return VisaRule(
        category=_check_choice(data.get("category"), VISA_CATEGORIES, "visa category", path),
        max_stay_days=data.get("max_stay_days"),
        raw=data.get("raw"),
    )


def load_rule_file(path: Path, destination: str) -> RuleFile:
    """Execute a rules module in isolation and convert its exports."""

    spec = importlib.util.spec_from_file_location(
        f"visa_guide_rules_{destination.lower()}", path
    )
    if spec is None or spec.loader is None:
        raise RuleFileError(f"{path}: cannot be loaded as a Python module")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    matrix: Dict[str, Any] = getattr(module, "visa_matrix", {})
    return RuleFile(
        destination=destination.upper(),
        rules=[_to_entry_rule(rule, path) for rule in getattr(module, "rules", [])],
        visa_matrix={
            citizenship.upper(): _to_visa_rule(rule, path)
            for citizenship, rule in matrix.items()
        },
        checklist=list(getattr(module, "checklist", [])),
    )


def discover_rule_files(rules_root: Path) -> List[Tuple[str, Path]]:
    """List (CODE, path) for every destination directory holding a rules module."""

    found = [
        (entry.name.upper(), entry / RULES_FILENAME)
        for entry in rules_root.iterdir()
        if entry.is_dir() and (entry / RULES_FILENAME).is_file()
    ]
    return sorted(found)
