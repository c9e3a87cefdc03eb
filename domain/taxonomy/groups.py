"""
Clinically defined group pseudo-identifiers.

These identifiers are valid resolver output but are not rows of the
taxonomy table. Each one borrows the higher ranks of its genus row.
"""

from pydantic import BaseModel, ConfigDict

CONS = "STACNS"
COPS = "STACPS"

GROUP_A = "STCGRA"
GROUP_B = "STCGRB"
GROUP_C = "STCGRC"
GROUP_F = "STCGRF"
GROUP_H = "STCGRH"
GROUP_K = "STCGRK"


class GroupDefinition(BaseModel):
    """Display data for one group pseudo-identifier."""

    model_config = ConfigDict(frozen=True)

    mo: str
    genus_mo: str  # table row the higher ranks are taken from
    fullname: str
    shortname: str
    species: str


GROUPS: dict[str, GroupDefinition] = {
    g.mo: g
    for g in (
        GroupDefinition(
            mo=CONS,
            genus_mo="STA",
            fullname="Coagulase Negative Staphylococcus (CoNS)",
            shortname="CoNS",
            species="coagulase negative",
        ),
        GroupDefinition(
            mo=COPS,
            genus_mo="STA",
            fullname="Coagulase Positive Staphylococcus (CoPS)",
            shortname="CoPS",
            species="coagulase positive",
        ),
        GroupDefinition(mo=GROUP_A, genus_mo="STC", fullname="Streptococcus group A", shortname="GAS", species="group A"),
        GroupDefinition(mo=GROUP_B, genus_mo="STC", fullname="Streptococcus group B", shortname="GBS", species="group B"),
        GroupDefinition(mo=GROUP_C, genus_mo="STC", fullname="Streptococcus group C", shortname="GCS", species="group C"),
        GroupDefinition(mo=GROUP_F, genus_mo="STC", fullname="Streptococcus group F", shortname="GFS", species="group F"),
        GroupDefinition(mo=GROUP_H, genus_mo="STC", fullname="Streptococcus group H", shortname="GHS", species="group H"),
        GroupDefinition(mo=GROUP_K, genus_mo="STC", fullname="Streptococcus group K", shortname="GKS", species="group K"),
    )
}

GROUP_IDENTIFIERS: frozenset[str] = frozenset(GROUPS)
