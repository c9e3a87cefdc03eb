"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure: it turns
strings, Series and DataFrames into resolver calls and loads the default
reference tables.

This module exposes the high-level entry points (as_mo, guess_mo, mo_*).
"""

from application.properties import (
    mo_authors,
    mo_class,
    mo_family,
    mo_fullname,
    mo_genus,
    mo_gramstain,
    mo_kingdom,
    mo_order,
    mo_phylum,
    mo_property,
    mo_shortname,
    mo_species,
    mo_subkingdom,
    mo_subspecies,
    mo_taxonomy,
    mo_type,
    mo_year,
)
from application.resolve import (
    as_mo,
    coerce_input,
    detect_input_columns,
    get_default_resolver,
    guess_mo,
    is_mo,
    resolve_dataframe,
)

__all__ = [
    # Main workflows
    "as_mo",
    "guess_mo",
    "is_mo",
    "resolve_dataframe",
    # Data utilities
    "coerce_input",
    "detect_input_columns",
    "get_default_resolver",
    # Properties
    "mo_property",
    "mo_fullname",
    "mo_shortname",
    "mo_kingdom",
    "mo_subkingdom",
    "mo_phylum",
    "mo_class",
    "mo_order",
    "mo_family",
    "mo_genus",
    "mo_species",
    "mo_subspecies",
    "mo_type",
    "mo_gramstain",
    "mo_authors",
    "mo_year",
    "mo_taxonomy",
]
