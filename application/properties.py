"""
Property accessors on free text: resolve first, then look up a field.

Every `mo_*` function accepts the same input shapes as `as_mo` and returns a
scalar for string input, otherwise a Series aligned with the input.
"""

import pandas as pd

from application.resolve import get_default_resolver, resolve_values
from domain.properties import PropertyLookup
from domain.resolution import MicroorganismResolver
from domain.schemas import BeckerMode


def mo_property(
    x: object,
    prop: str = "fullname",
    becker: BeckerMode = False,
    lancefield: bool = False,
    *,
    resolver: MicroorganismResolver | None = None,
    stacklevel: int = 1,
) -> object:
    """
    Resolve `x` and return property `prop` of each identifier.

    Examples:
        >>> mo_property("E. coli", "genus")
        'Escherichia'
        >>> mo_property("MRSA", "shortname", becker="all")
        'CoPS'

    Raises:
        ValueError: If `prop` is not a known property
    """
    resolver = resolver or get_default_resolver()
    lookup = PropertyLookup(resolver.table)
    resolution, index = resolve_values(x, becker, lancefield, resolver=resolver, stacklevel=stacklevel + 1)
    values = [lookup.get(mo, prop) for mo in resolution.mo]
    if isinstance(x, str) or x is None:
        return values[0]
    return pd.Series(values, index=index, name=prop, dtype=object)


def mo_fullname(x: object, becker: BeckerMode = False, lancefield: bool = False, **kwargs) -> object:
    return mo_property(x, "fullname", becker, lancefield, stacklevel=2, **kwargs)


def mo_shortname(x: object, becker: BeckerMode = False, lancefield: bool = False, **kwargs) -> object:
    """'S. aureus', or the group label ('CoNS', 'GBS', ...) when grouping applies."""
    return mo_property(x, "shortname", becker, lancefield, stacklevel=2, **kwargs)


def mo_kingdom(x: object, **kwargs) -> object:
    return mo_property(x, "kingdom", stacklevel=2, **kwargs)


def mo_subkingdom(x: object, **kwargs) -> object:
    return mo_property(x, "subkingdom", stacklevel=2, **kwargs)


def mo_phylum(x: object, **kwargs) -> object:
    return mo_property(x, "phylum", stacklevel=2, **kwargs)


def mo_class(x: object, **kwargs) -> object:
    return mo_property(x, "class", stacklevel=2, **kwargs)


def mo_order(x: object, **kwargs) -> object:
    return mo_property(x, "order", stacklevel=2, **kwargs)


def mo_family(x: object, **kwargs) -> object:
    return mo_property(x, "family", stacklevel=2, **kwargs)


def mo_genus(x: object, **kwargs) -> object:
    return mo_property(x, "genus", stacklevel=2, **kwargs)


def mo_species(x: object, **kwargs) -> object:
    return mo_property(x, "species", stacklevel=2, **kwargs)


def mo_subspecies(x: object, **kwargs) -> object:
    return mo_property(x, "subspecies", stacklevel=2, **kwargs)


def mo_type(x: object, **kwargs) -> object:
    return mo_property(x, "type", stacklevel=2, **kwargs)


def mo_gramstain(x: object, **kwargs) -> object:
    return mo_property(x, "gramstain", stacklevel=2, **kwargs)


def mo_authors(x: object, **kwargs) -> object:
    return mo_property(x, "authors", stacklevel=2, **kwargs)


def mo_year(x: object, **kwargs) -> object:
    return mo_property(x, "year", stacklevel=2, **kwargs)


def mo_taxonomy(
    x: str,
    becker: BeckerMode = False,
    lancefield: bool = False,
    *,
    resolver: MicroorganismResolver | None = None,
) -> dict[str, str | None]:
    """All ranks (subkingdom .. subspecies) of a single value, as a dict."""
    resolver = resolver or get_default_resolver()
    mo = resolver.resolve([x], becker=becker, lancefield=lancefield, stacklevel=2).mo[0]
    return PropertyLookup(resolver.table).taxonomy(mo)
