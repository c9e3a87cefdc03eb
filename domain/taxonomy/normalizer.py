"""Input normalization: derive the search forms used against the taxonomy table."""

import re

from pydantic import BaseModel, ConfigDict

_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9 ]+")


class SearchForms(BaseModel):
    """All derived forms of one raw input value."""

    model_config = ConfigDict(frozen=True)

    raw: str
    trimmed: str
    collapsed: str  # spaces -> ".* " (abbreviated genus + full species), anchored
    wildcarded: str  # spaces -> ".*", anchored
    species_suffixed: str  # "<trimmed> species", compared by equality
    species_wildcarded: str  # "<wildcarded> species", unanchored search

    @property
    def is_empty(self) -> bool:
        return not self.trimmed


def trim_input(raw: object) -> str:
    """
    Reduce a raw value to letters, digits and single spaces.

    Examples:
        >>> trim_input("  E. coli ")
        'E coli'
        >>> trim_input("S.\\taureus (MRSA)")
        'S aureus MRSA'
    """
    if raw is None:
        return ""
    s = _WHITESPACE.sub(" ", str(raw))
    s = _NON_ALNUM.sub("", s)
    return _WHITESPACE.sub(" ", s).strip()


def wildcard(trimmed: str, *, keep_space: bool) -> str:
    """Replace every space with a regex wildcard, optionally followed by a literal space."""
    return trimmed.replace(" ", ".* " if keep_space else ".*")


def normalize_input(raw: object) -> SearchForms:
    """
    Build the search forms for a raw input value.

    `trimmed` only ever contains [A-Za-z0-9 ], so none of the derived
    patterns need escaping.
    """
    trimmed = trim_input(raw)
    loose = wildcard(trimmed, keep_space=False)
    return SearchForms(
        raw="" if raw is None else str(raw),
        trimmed=trimmed,
        collapsed=f"^{wildcard(trimmed, keep_space=True)}$",
        wildcarded=f"^{loose}$",
        species_suffixed=f"{trimmed} species",
        species_wildcarded=f"{loose} species",
    )
