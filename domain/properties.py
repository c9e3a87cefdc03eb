"""Property lookups for resolved identifiers, including group pseudo-identifiers."""

from domain.schemas import TaxonomicRecord
from domain.taxonomy.groups import GROUPS
from domain.taxonomy.table import TaxonomyTable

PROPERTIES: tuple[str, ...] = (
    "fullname",
    "shortname",
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

TAXONOMY_RANKS: tuple[str, ...] = (
    "subkingdom",
    "phylum",
    "class",
    "order",
    "family",
    "genus",
    "species",
    "subspecies",
)


class PropertyLookup:
    """Read record fields by identifier. Unknown identifiers yield None."""

    def __init__(self, table: TaxonomyTable) -> None:
        self.table = table

    def _record(self, mo: str) -> TaxonomicRecord | None:
        rec = self.table.record(mo)
        if rec is not None:
            return rec

        group = GROUPS.get(mo)
        if group is None:
            return None
        # borrow ranks from the genus row
        base = self.table.record(group.genus_mo)
        fields = base.model_dump(by_alias=True) if base is not None else {}
        fields.update(
            mo=group.mo,
            fullname=group.fullname,
            species=group.species,
            subspecies=None,
            authors=None,
            year=None,
        )
        return TaxonomicRecord.model_validate(fields)

    def get(self, mo: str | None, prop: str) -> object:
        """
        Return one property of `mo`.

        Raises:
            ValueError: If `prop` is not a known property
        """
        if prop not in PROPERTIES:
            raise ValueError(f"Unknown property {prop!r}. Valid properties: {list(PROPERTIES)}")
        if mo is None:
            return None
        if prop == "shortname":
            return self.shortname(mo)
        rec = self._record(mo)
        if rec is None:
            return None
        return getattr(rec, "class_" if prop == "class" else prop)

    def shortname(self, mo: str | None) -> str | None:
        """'S. aureus' for species, the genus for genus rows, 'CoNS'/'GAS'/... for groups."""
        if mo is None:
            return None
        group = GROUPS.get(mo)
        if group is not None:
            return group.shortname
        rec = self.table.record(mo)
        if rec is None:
            return None
        if not rec.genus or not rec.species or rec.species == "species":
            return rec.genus or rec.fullname
        return f"{rec.genus[0]}. {rec.species}"

    def taxonomy(self, mo: str | None) -> dict[str, str | None]:
        """Ranks from subkingdom down to subspecies."""
        return {rank: self.get(mo, rank) for rank in TAXONOMY_RANKS}  # type: ignore[misc]
