"""
Configuration management: models, loading, and validation.

Handles:
- ResolverConfig: Main resolver/CLI configuration
- Reference table loading (taxonomy, site codes) from CSV/Excel
- Resolver construction from a config

The loader module performs file I/O; models are pure Pydantic classes.
"""

from infrastructure.config.loader import (
    build_resolver,
    load_resolver_config,
    load_site_codes,
    load_taxonomy_table,
)
from infrastructure.config.models import ResolverConfig

__all__ = [
    # Main config (most commonly used)
    "ResolverConfig",
    "load_resolver_config",
    # Loaders
    "load_taxonomy_table",
    "load_site_codes",
    "build_resolver",
]
