"""In-memory lookup index over all destination rules modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from .loader import RuleFileError, discover_rule_files, load_rule_file
from .models import DEFAULT_PURPOSE, EntryRule, RuleFile, VisaRule


logger = logging.getLogger(__name__)

RuleKey = Tuple[str, str, str]
RuleFileLoader = Callable[[Path, str], RuleFile]


class DuplicateEntryRuleError(RuleFileError):
    """Raised when two entry rules share citizenship, destination and purpose."""


class RulesIndex:
    """Flat entry-rule list plus a destination-keyed visa matrix."""

    def __init__(self, rule_files: Iterable[RuleFile]):
        self._entry_rules: List[EntryRule] = []
        self._rules_by_key: Dict[RuleKey, EntryRule] = {}
        self._matrices: Dict[str, Dict[str, VisaRule]] = {}
        self._checklists: Dict[str, List[str]] = {}

        for rule_file in rule_files:
            self._matrices[rule_file.destination] = rule_file.visa_matrix
            self._checklists[rule_file.destination] = rule_file.checklist
            for rule in rule_file.rules:
                key = (rule.citizenship, rule.destination, rule.purpose)
                if key in self._rules_by_key:
                    raise DuplicateEntryRuleError(
                        "Duplicate entry rule for {} -> {} ({})".format(*key)
                    )
                self._rules_by_key[key] = rule
                self._entry_rules.append(rule)

    @classmethod
    def from_directory(
        cls, rules_root: Path, loader: RuleFileLoader = load_rule_file
    ) -> "RulesIndex":
        """Load every destination rules module under ``rules_root``."""

        rule_files = [loader(path, code) for code, path in discover_rule_files(rules_root)]
        index = cls(rule_files)
        logger.info(
            "Loaded %d entry rules across %d destinations",
            len(index.entry_rules),
            len(index.destinations),
        )
        return index

    @property
    def entry_rules(self) -> List[EntryRule]:
        return list(self._entry_rules)

    @property
    def destinations(self) -> List[str]:
        return sorted(self._matrices)

    def checklist(self, destination: str) -> List[str]:
        return list(self._checklists.get(destination.upper(), []))

    def find_entry_rule(
        self,
        citizenship: Optional[str],
        destination: Optional[str],
        purpose: Optional[str] = None,
    ) -> Optional[EntryRule]:
        if not citizenship or not destination:
            return None
        key = (citizenship.upper(), destination.upper(), purpose or DEFAULT_PURPOSE)
        return self._rules_by_key.get(key)

    def find_visa_matrix_rule(
        self, citizenship: Optional[str], destination: Optional[str]
    ) -> Optional[VisaRule]:
        if not citizenship or not destination:
            return None
        return self._matrices.get(destination.upper(), {}).get(citizenship.upper())
