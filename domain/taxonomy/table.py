"""Read-only views over the reference taxonomy and site code tables."""

from functools import cached_property

import pandas as pd

from domain.schemas import TaxonomicRecord
from domain.taxonomy.groups import GROUP_IDENTIFIERS

# Synthetic "unidentified family member" rows
FAMILY_PLACEHOLDER_PREFIX = "_FAM"

TAXONOMY_COLUMNS: tuple[str, ...] = (
    "mo",
    "fullname",
    "kingdom",
    "subkingdom",
    "phylum",
    "class",
    "order",
    "family",
    "genus",
    "species",
    "subspecies",
    "authors",
    "year",
    "type",
    "gramstain",
)


class TaxonomyTable:
    """
    Immutable reference table of known microorganisms.

    Rows are kept in canonical order (case-insensitive by fullname); every
    search returns the first matching row in that order. Build instances
    with `domain.taxonomy.parse_taxonomy_frame`, which validates and sorts.
    """

    def __init__(self, frame: pd.DataFrame) -> None:
        self._frame = frame.reset_index(drop=True)
        # family placeholders are valid targets, but never matched by name
        searchable = ~self._frame["mo"].str.startswith(FAMILY_PLACEHOLDER_PREFIX)
        self._searchable = self._frame.loc[searchable, ["mo", "fullname"]].reset_index(drop=True)

    def __len__(self) -> int:
        return len(self._frame)

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame.copy()

    @cached_property
    def identifiers(self) -> frozenset[str]:
        return frozenset(self._frame["mo"])

    @cached_property
    def _row_by_mo(self) -> dict[str, int]:
        return {mo: i for i, mo in enumerate(self._frame["mo"])}

    @cached_property
    def _fullname_casefold(self) -> pd.Series:
        return self._searchable["fullname"].str.casefold()

    def is_valid(self, mo: str) -> bool:
        """True for table identifiers and for group pseudo-identifiers."""
        return mo in self.identifiers or mo in GROUP_IDENTIFIERS

    def first_match(self, pattern: str) -> str | None:
        """Identifier of the first searchable row whose fullname matches `pattern` (case-insensitive)."""
        hits = self._searchable.loc[
            self._searchable["fullname"].str.contains(pattern, case=False, regex=True),
            "mo",
        ]
        return None if hits.empty else str(hits.iloc[0])

    def first_equal(self, fullname: str) -> str | None:
        """Identifier of the first searchable row whose fullname equals `fullname` (case-insensitive)."""
        hits = self._searchable.loc[self._fullname_casefold == fullname.casefold(), "mo"]
        return None if hits.empty else str(hits.iloc[0])

    def record(self, mo: str) -> TaxonomicRecord | None:
        idx = self._row_by_mo.get(mo)
        if idx is None:
            return None
        row = self._frame.iloc[idx]
        fields = {col: row[col] for col in TAXONOMY_COLUMNS}
        return TaxonomicRecord.model_validate(
            {k: None if not isinstance(v, str) and pd.isna(v) else v for k, v in fields.items()}
        )

    def species_of(self, mo: str) -> str | None:
        rec = self.record(mo)
        return rec.species if rec is not None else None


class SiteCodeTable:
    """Site-specific laboratory codes mapped to identifiers (case-insensitive)."""

    def __init__(self, codes: dict[str, str] | None = None) -> None:
        self._codes = {str(k).strip().upper(): str(v).strip() for k, v in (codes or {}).items()}

    def __len__(self) -> int:
        return len(self._codes)

    def lookup(self, code: str) -> str | None:
        if not code:
            return None
        return self._codes.get(code.strip().upper())
