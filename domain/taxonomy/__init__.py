"""
Taxonomy management: reference table, input normalization, and group codes.

All functions in this module are pure (no file I/O).
"""

from domain.taxonomy.groups import GROUP_IDENTIFIERS, GROUPS, GroupDefinition
from domain.taxonomy.loader import parse_site_codes_frame, parse_taxonomy_frame
from domain.taxonomy.normalizer import SearchForms, normalize_input, trim_input
from domain.taxonomy.table import SiteCodeTable, TaxonomyTable

__all__ = [
    "TaxonomyTable",
    "SiteCodeTable",
    "parse_taxonomy_frame",
    "parse_site_codes_frame",
    "SearchForms",
    "normalize_input",
    "trim_input",
    "GROUPS",
    "GROUP_IDENTIFIERS",
    "GroupDefinition",
]
