"""
Microorganism resolution: override rules, taxonomy search cascade, and grouping.

The resolver is the only stateful object here, and its state (the tables)
is read-only after construction.
"""

from domain.resolution.base import Matcher
from domain.resolution.grouping import (
    COAGULASE_NEGATIVE_SPECIES,
    COAGULASE_POSITIVE_SPECIES,
    LANCEFIELD_GROUPS,
    GroupingClassifier,
)
from domain.resolution.overrides import ACRONYMS, DISAMBIGUATION_TRAPS
from domain.resolution.pipeline import (
    MicroorganismResolver,
    MoCoercionWarning,
    default_matchers,
    is_missing,
)

__all__ = [
    # Main entry point
    "MicroorganismResolver",
    "MoCoercionWarning",
    # Cascade
    "Matcher",
    "default_matchers",
    "is_missing",
    # Grouping
    "GroupingClassifier",
    "COAGULASE_NEGATIVE_SPECIES",
    "COAGULASE_POSITIVE_SPECIES",
    "LANCEFIELD_GROUPS",
    # Override tables
    "ACRONYMS",
    "DISAMBIGUATION_TRAPS",
]
