"""
Post-resolution grouping of Staphylococci (Becker) and Streptococci (Lancefield).

Grouping needs the species-level identifier, so it always runs as a second
stage on identifiers produced by the ungrouped cascade.

Sources:
    Becker K et al. Coagulase-Negative Staphylococci. 2014. Clin Microbiol Rev. 27(4): 870-926.
    Lancefield RC. A serological differentiation of human and other groups of
    hemolytic streptococci. 1933. J Exp Med. 57(4): 571-95.
"""

import logging

from domain.schemas import GroupingOptions
from domain.taxonomy.groups import CONS, COPS, GROUP_A, GROUP_B, GROUP_C, GROUP_F, GROUP_H, GROUP_K
from domain.taxonomy.table import TaxonomyTable

logger = logging.getLogger(__name__)

STAPHYLOCOCCUS_PREFIX = "STA"
STREPTOCOCCUS_PREFIX = "STC"

COAGULASE_NEGATIVE_SPECIES: frozenset[str] = frozenset(
    {
        "arlettae", "auricularis", "capitis", "caprae", "carnosus", "cohnii",
        "condimenti", "devriesei", "epidermidis", "equorum", "fleurettii",
        "gallinarum", "haemolyticus", "hominis", "jettensis", "kloosii",
        "lentus", "lugdunensis", "massiliensis", "microti", "muscae",
        "nepalensis", "pasteuri", "petrasii", "pettenkoferi",
        "piscifermentans", "rostri", "saccharolyticus", "saprophyticus",
        "sciuri", "stepanovicii", "simulans", "succinus", "vitulinus",
        "warneri", "xylosus",
    }
)  # fmt: skip

# S. aureus is only added with becker="all"
COAGULASE_POSITIVE_SPECIES: frozenset[str] = frozenset(
    {
        "simiae", "agnetis", "chromogenes", "delphini", "felis", "lutrae",
        "hyicus", "intermedius", "pseudintermedius", "pseudointermedius",
        "schleiferi",
    }
)  # fmt: skip

# First group only: S. dysgalactiae is also G and L, groups D/E are Enterococci
LANCEFIELD_GROUPS: dict[str, str] = {
    "pyogenes": GROUP_A,
    "agalactiae": GROUP_B,
    "equisimilis": GROUP_C,
    "equi": GROUP_C,
    "zooepidemicus": GROUP_C,
    "dysgalactiae": GROUP_C,
    "anginosus": GROUP_F,
    "sanguis": GROUP_H,
    "salivarius": GROUP_K,
}


class GroupingClassifier:
    """Reclassify resolved identifiers into CoNS/CoPS and Lancefield groups."""

    def __init__(self, table: TaxonomyTable) -> None:
        self.table = table

    def reclassify(self, mo: str, options: GroupingOptions) -> str:
        """
        Return the group identifier for `mo`, or `mo` itself when no group applies.

        Species without a known group keep their own identifier.
        """
        if options.becker and mo.startswith(STAPHYLOCOCCUS_PREFIX):
            grouped = self._coagulase_group(mo, extended=options.becker == "all")
            if grouped is not None:
                logger.debug("Becker grouping: %s -> %s", mo, grouped)
                return grouped

        if options.lancefield and mo.startswith(STREPTOCOCCUS_PREFIX):
            grouped = self._lancefield_group(mo)
            if grouped is not None:
                logger.debug("Lancefield grouping: %s -> %s", mo, grouped)
                return grouped

        return mo

    def _coagulase_group(self, mo: str, *, extended: bool) -> str | None:
        species = self.table.species_of(mo)
        if species is None:
            return None
        if species in COAGULASE_NEGATIVE_SPECIES:
            return CONS
        if species in COAGULASE_POSITIVE_SPECIES or (extended and species == "aureus"):
            return COPS
        return None

    def _lancefield_group(self, mo: str) -> str | None:
        species = self.table.species_of(mo)
        if species is None:
            return None
        return LANCEFIELD_GROUPS.get(species)
