"""Parse taxonomy and site code tables from pre-loaded DataFrames."""

import pandas as pd

from domain.taxonomy.table import TAXONOMY_COLUMNS, SiteCodeTable, TaxonomyTable

_REQUIRED_TAXONOMY_COLUMNS = ("mo", "fullname", "genus", "species")
_REQUIRED_SITE_CODE_COLUMNS = ("code", "mo")


def _is_blank(value: object) -> bool:
    """None, NaN and NA. Strings are never blank here; strip them first."""
    return value is None or (not isinstance(value, str) and bool(pd.isna(value)))


def _clean_cell(value: object) -> object:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    if pd.isna(value):
        return None
    return value


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    out.columns = [str(c).strip().lower() for c in out.columns]
    return out


def parse_taxonomy_frame(df: pd.DataFrame) -> TaxonomyTable:
    """
    Validate a raw taxonomy DataFrame and wrap it in a TaxonomyTable.

    This is a pure function - it does NOT perform file I/O.
    The CSV loading happens in infrastructure.config.loader.

    Args:
        df: DataFrame with at least the columns mo, fullname, genus, species

    Returns:
        TaxonomyTable sorted by fullname (case-insensitive, stable)

    Raises:
        ValueError: If required columns are missing, or mo/fullname are empty or not unique
    """
    frame = _normalize_columns(df)

    missing = [c for c in _REQUIRED_TAXONOMY_COLUMNS if c not in frame.columns]
    if missing:
        raise ValueError(f"Taxonomy table is missing required columns: {missing}")

    for col in TAXONOMY_COLUMNS:
        if col not in frame.columns:
            frame[col] = None

    frame = frame[list(TAXONOMY_COLUMNS)].astype(object).map(_clean_cell)
    # map() may re-infer a string dtype and turn None back into NaN
    frame = frame.astype(object).where(frame.notna(), None)

    for key in ("mo", "fullname"):
        if frame[key].isna().any():
            raise ValueError(f"Taxonomy table has empty values in key column '{key}'")
        frame[key] = frame[key].astype(str)
        dupes = sorted(set(frame.loc[frame[key].duplicated(), key]))
        if dupes:
            raise ValueError(f"Taxonomy table column '{key}' must be unique; duplicates: {dupes}")

    frame = frame.sort_values("fullname", key=lambda s: s.str.casefold(), kind="stable")
    return TaxonomyTable(frame)


def parse_site_codes_frame(df: pd.DataFrame) -> SiteCodeTable:
    """
    Parse a (code, mo) DataFrame into a SiteCodeTable.

    Rows with an empty code or identifier are dropped; the first row wins
    when a code appears more than once (case-insensitive).
    """
    frame = _normalize_columns(df)
    missing = [c for c in _REQUIRED_SITE_CODE_COLUMNS if c not in frame.columns]
    if missing:
        raise ValueError(f"Site code table is missing required columns: {missing}")

    codes: dict[str, str] = {}
    for code, mo in zip(frame["code"].map(_clean_cell), frame["mo"].map(_clean_cell), strict=True):
        if _is_blank(code) or _is_blank(mo):
            continue
        codes.setdefault(str(code).upper(), str(mo))
    return SiteCodeTable(codes)
