"""Turn the passport-index tidy CSV into per-destination visa matrices."""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Dict, Iterable, List, Optional

from .models import RawRow, VisaRule


logger = logging.getLogger(__name__)

CSV_HEADER = "passport,destination,requirement"

NO_DATA_TOKEN = "-1"

REQUIREMENT_VOCABULARY = {
    "visa free": "visa_free",
    "visa on arrival": "visa_on_arrival",
    "eta": "eta",
    "e-visa": "e_visa",
    "visa required": "visa_required",
    "no admission": "no_admission",
}

NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)

VisaMatrix = Dict[str, Dict[str, VisaRule]]


class DatasetFormatError(ValueError):
    """Raised when the downloaded CSV does not look like the tidy dataset."""


def _parse_stay_days(token: str) -> Optional[int | float]:
    if not NUMBER_PATTERN.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value) or value <= 0:
        return None
    return int(value) if value.is_integer() else value


def normalize_requirement(requirement: str) -> Optional[VisaRule]:
    """Map a raw requirement token to a visa rule, or None for "no data"."""

    token = requirement.strip()
    if token == NO_DATA_TOKEN:
        return None

    stay_days = _parse_stay_days(token)
    if stay_days is not None:
        return VisaRule(category="visa_free", max_stay_days=stay_days)

    category = REQUIREMENT_VOCABULARY.get(token.lower())
    if category:
        return VisaRule(category=category)
    return VisaRule(category="unknown", raw=token)


def parse_tidy_csv(csv_text: str) -> List[RawRow]:
    lines = [line for line in re.split(r"\r?\n", csv_text) if line]
    if not lines or not lines[0].lower().startswith(CSV_HEADER):
        raise DatasetFormatError(
            f"Unexpected CSV header, expected it to start with '{CSV_HEADER}'."
        )

    rows: List[RawRow] = []
    for line in lines[1:]:
        # Values are plain tokens, so only the first two commas separate columns.
        parts = line.split(",", 2)
        if len(parts) < 3:
            continue
        passport, destination, requirement = (part.strip() for part in parts)
        if not passport or not destination:
            continue
        rows.append(
            RawRow(
                passport=passport.upper(),
                destination=destination.upper(),
                requirement=requirement,
            )
        )
    return rows


def group_by_destination(rows: Iterable[RawRow]) -> VisaMatrix:
    """Fold rows into destination -> citizenship -> rule.

    Self-pairs and "no data" tokens are left out. If the dataset repeats a
    pair, the later row wins.
    """

    by_destination: VisaMatrix = {}
    for row in rows:
        if row.passport == row.destination:
            continue
        rule = normalize_requirement(row.requirement)
        if rule is None:
            continue
        matrix = by_destination.setdefault(row.destination, {})
        if row.passport in matrix:
            logger.debug(
                "Duplicate row for %s -> %s, keeping the later value",
                row.passport,
                row.destination,
            )
        matrix[row.passport] = rule
    return by_destination


def _render_rule(rule: VisaRule) -> str:
    parts = [f'"category": "{rule.category}"']
    if rule.max_stay_days is not None:
        parts.append(f'"max_stay_days": {rule.max_stay_days}')
    if rule.raw is not None:
        parts.append(f'"raw": {json.dumps(rule.raw, ensure_ascii=False)}')
    return "{" + ", ".join(parts) + "}"


def render_visa_matrix(matrix: Dict[str, VisaRule]) -> str:
    """Render one destination's matrix as the generated Python block."""

    if not matrix:
        return "visa_matrix = {}\n"
    lines = ["visa_matrix = {"]
    for citizenship in sorted(matrix):
        lines.append(f'    "{citizenship}": {_render_rule(matrix[citizenship])},')
    lines.append("}")
    return "\n".join(lines) + "\n"
