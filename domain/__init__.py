"""
Domain layer: Business logic with minimal external dependencies.

Contains:
- schemas: Pydantic models for taxonomy records and resolution results
- taxonomy: Reference table, input normalization, group pseudo-identifiers
- resolution: Override rules, search cascade, grouping, resolver
- properties: Property lookups for resolved identifiers
"""

from domain.schemas import GroupingOptions, Resolution, TaxonomicRecord

__all__ = [
    "TaxonomicRecord",
    "GroupingOptions",
    "Resolution",
]
