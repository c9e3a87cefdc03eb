"""Configuration and reference data loading from YAML/CSV files."""

import logging
from pathlib import Path
from typing import Any

import yaml

from domain.resolution import MicroorganismResolver
from domain.taxonomy import SiteCodeTable, TaxonomyTable, parse_site_codes_frame, parse_taxonomy_frame
from infrastructure.config.models import ResolverConfig
from infrastructure.io import read_table

logger = logging.getLogger(__name__)

# Identifiers like "NA" must stay strings
_TEXT_READ_KWARGS: dict[str, Any] = {"dtype": str, "keep_default_na": False}


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def _resolve_path(base_dir: Path, value: Any) -> Path | None:
    if value is None or not str(value).strip():
        return None
    p = Path(str(value).strip())
    return p if p.is_absolute() else base_dir / p


def load_taxonomy_table(path: Path) -> TaxonomyTable:
    """
    Load the reference taxonomy table from CSV/Excel.

    This function handles file I/O, then delegates parsing to domain layer.
    """
    table = parse_taxonomy_frame(read_table(path, **_TEXT_READ_KWARGS))
    logger.debug("Loaded taxonomy table: %d rows from %s", len(table), path)
    return table


def load_site_codes(path: Path | None) -> SiteCodeTable:
    """Load the site code table, or return an empty one when no path is configured."""
    if path is None:
        return SiteCodeTable()
    codes = parse_site_codes_frame(read_table(path, **_TEXT_READ_KWARGS))
    logger.debug("Loaded site code table: %d codes from %s", len(codes), path)
    return codes


def load_resolver_config(config_path: Path) -> ResolverConfig:
    """
    Load resolver.yaml into a validated ResolverConfig.

    Relative data paths are resolved against the project root, i.e. the
    parent of the directory holding the YAML file (configs/ -> repo root).
    """
    raw = _load_yaml(config_path)
    base_dir = config_path.resolve().parent.parent

    kwargs: dict[str, Any] = {k: v for k, v in raw.items() if k not in ("taxonomy_file", "site_codes_file")}

    taxonomy_file = _resolve_path(base_dir, raw.get("taxonomy_file"))
    if taxonomy_file is not None:
        kwargs["taxonomy_file"] = taxonomy_file
    if "site_codes_file" in raw:
        kwargs["site_codes_file"] = _resolve_path(base_dir, raw.get("site_codes_file"))

    if isinstance(kwargs.get("input_columns"), str):
        kwargs["input_columns"] = [kwargs["input_columns"]]

    return ResolverConfig(**kwargs)


def build_resolver(cfg: ResolverConfig) -> MicroorganismResolver:
    """Load both reference tables named by `cfg` and construct a resolver."""
    table = load_taxonomy_table(cfg.taxonomy_file)
    codes = load_site_codes(cfg.site_codes_file)
    return MicroorganismResolver(table, codes)
