"""Visa and entry requirement lookups backed by the passport-index dataset."""

from .generate import run_generation
from .index import RulesIndex
from .models import EntryRule, VisaRule

__all__ = ["EntryRule", "RulesIndex", "VisaRule", "run_generation"]
