"""Resolution pipeline: free text -> microorganism identifiers."""

import logging
import warnings
from collections.abc import Iterable, Sequence

import pandas as pd

from domain.resolution.base import Matcher
from domain.resolution.grouping import GroupingClassifier
from domain.resolution.overrides import (
    AcronymMatcher,
    CoagulaseTextMatcher,
    DisambiguationTrapMatcher,
    IdentifierPassthrough,
)
from domain.resolution.strategies import (
    CollapsedNameSearch,
    GenusSpeciesExact,
    GenusSpeciesSearch,
    GramStainSearch,
    SiteCodeLookup,
    SplitBridgeSearch,
    WildcardNameSearch,
)
from domain.schemas import BeckerMode, GroupingOptions, Resolution
from domain.taxonomy.normalizer import normalize_input
from domain.taxonomy.table import SiteCodeTable, TaxonomyTable

logger = logging.getLogger(__name__)


class MoCoercionWarning(UserWarning):
    """Some input values could not be resolved to a microorganism identifier."""


def default_matchers(table: TaxonomyTable, site_codes: SiteCodeTable) -> list[Matcher]:
    """The standard cascade, highest precedence first."""
    return [
        IdentifierPassthrough(table),
        DisambiguationTrapMatcher(),
        CoagulaseTextMatcher(),
        AcronymMatcher(),
        CollapsedNameSearch(table),
        WildcardNameSearch(table),
        GenusSpeciesExact(table),
        GenusSpeciesSearch(table),
        SiteCodeLookup(site_codes),
        SplitBridgeSearch(table),
        GramStainSearch(table),
    ]


def is_missing(value: object) -> bool:
    """None/NaN/NA are missing values; strings never are (not even '')."""
    if value is None:
        return True
    if isinstance(value, str):
        return False
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def format_failures(failures: Sequence[str]) -> str:
    quoted = ", ".join(f'"{f}"' for f in failures)
    return f"These values could not be coerced to a valid mo: {quoted}."


class MicroorganismResolver:
    """
    Map free-text or coded microorganism descriptions to identifiers.

    The taxonomy table and the site code table are injected and never
    mutated, so one resolver can be shared across calls.
    """

    def __init__(
        self,
        table: TaxonomyTable,
        site_codes: SiteCodeTable | None = None,
        *,
        matchers: Sequence[Matcher] | None = None,
    ) -> None:
        self.table = table
        self.site_codes = site_codes if site_codes is not None else SiteCodeTable()
        self.matchers: list[Matcher] = (
            list(matchers) if matchers is not None else default_matchers(table, self.site_codes)
        )
        self.grouping = GroupingClassifier(table)

    def resolve_one(self, value: object) -> str | None:
        """Run the ungrouped cascade for a single value. Missing/empty input returns None."""
        if is_missing(value):
            return None
        forms = normalize_input(value)
        if forms.is_empty:
            return None
        for matcher in self.matchers:
            mo = matcher.match(forms)
            if mo is not None:
                logger.debug("Resolved %r -> %s (%s)", forms.raw, mo, matcher.name)
                return mo
        return None

    def resolve(
        self,
        values: Iterable[object],
        *,
        becker: BeckerMode = False,
        lancefield: bool = False,
        stacklevel: int = 1,
    ) -> Resolution:
        """
        Resolve a column of values.

        Each distinct raw value is resolved once and the result is broadcast
        back onto every occurrence. Distinct values that normalize to the
        same search text also share one search. Unresolved values become
        None and are reported once in a single MoCoercionWarning.

        Args:
            values: Raw input values (strings; None/NaN are passed through as None)
            becker: Group Staphylococci into CoNS/CoPS; "all" also groups S. aureus
            lancefield: Group Streptococci into Lancefield groups
            stacklevel: 1 when called from user code; each wrapper adds one so
                the warning points at the user's call

        Returns:
            Resolution with one identifier per input value and the distinct failures
        """
        options = GroupingOptions(becker=becker, lancefield=lancefield)
        values = list(values)

        found: dict[object, str | None] = {}
        by_search_text: dict[str, str | None] = {}
        failures: list[str] = []

        for raw in values:
            if is_missing(raw) or raw in found:
                continue
            mo = self._resolve_distinct(raw, by_search_text)
            if mo is None:
                failures.append(str(raw))
            elif options.enabled:
                mo = self.grouping.reclassify(mo, options)
            found[raw] = mo

        mos = [None if is_missing(v) else found[v] for v in values]

        logger.debug(
            "Resolved %d values (%d distinct, %d failed)",
            len(values),
            len(found),
            len(failures),
        )
        if failures:
            message = format_failures(failures)
            logger.warning(message)
            warnings.warn(message, MoCoercionWarning, stacklevel=stacklevel + 1)

        return Resolution(mo=mos, failures=failures)

    def _resolve_distinct(self, raw: object, by_search_text: dict[str, str | None]) -> str | None:
        forms = normalize_input(raw)
        if forms.is_empty:
            return None
        # passthrough compares the raw value, so it cannot share the memo
        if self.table.is_valid(forms.raw):
            return forms.raw
        if forms.trimmed not in by_search_text:
            by_search_text[forms.trimmed] = self.resolve_one(raw)
        return by_search_text[forms.trimmed]
