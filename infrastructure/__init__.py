"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Configuration loading (YAML) and reference tables (CSV/Excel)
- Tabular input/output (pandas)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from infrastructure.config import (
    ResolverConfig,
    build_resolver,
    load_resolver_config,
)

__all__ = [
    "load_resolver_config",
    "build_resolver",
    "ResolverConfig",
]
