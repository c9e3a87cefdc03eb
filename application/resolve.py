"""Column-level entry points: as_mo / guess_mo and DataFrame resolution."""

import logging
from collections.abc import Iterable
from functools import lru_cache

import pandas as pd

from domain.resolution import MicroorganismResolver, is_missing
from domain.schemas import BeckerMode, Resolution
from infrastructure.config import ResolverConfig, build_resolver

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_default_resolver() -> MicroorganismResolver:
    """Resolver over the shipped reference tables, loaded once per process."""
    return build_resolver(ResolverConfig())


def join_genus_species(genus: object, species: object) -> str | None:
    """'Staphylococcus' + 'aureus' -> 'Staphylococcus aureus'; missing parts are skipped."""
    parts = [str(p) for p in (genus, species) if not is_missing(p)]
    return " ".join(parts) if parts else None


def coerce_input(x: object) -> tuple[list[object], pd.Index | None]:
    """
    Flatten the supported input shapes to a list of raw values.

    Accepts a string, a sequence, a pandas Series, or a DataFrame with one
    or two columns (genus, species).

    Returns:
        Tuple of (values, index) where index is the pandas index to keep, if any

    Raises:
        ValueError: If a DataFrame has no columns or more than two columns
    """
    if isinstance(x, pd.DataFrame):
        n_cols = x.shape[1]
        if n_cols == 0:
            raise ValueError("`x` must have at least one column")
        if n_cols > 2:
            raise ValueError(f"`x` can be 2 columns at most, got {n_cols}")
        if n_cols == 2:
            values = [join_genus_species(g, s) for g, s in zip(x.iloc[:, 0], x.iloc[:, 1], strict=True)]
        else:
            values = list(x.iloc[:, 0])
        return values, x.index

    if isinstance(x, pd.Series):
        return list(x), x.index

    if isinstance(x, str) or x is None:
        return [x], None

    if isinstance(x, Iterable):
        return list(x), None

    return [x], None


def resolve_values(
    x: object,
    becker: BeckerMode = False,
    lancefield: bool = False,
    *,
    resolver: MicroorganismResolver | None = None,
    stacklevel: int = 1,
) -> tuple[Resolution, pd.Index | None]:
    values, index = coerce_input(x)
    resolver = resolver or get_default_resolver()
    resolution = resolver.resolve(values, becker=becker, lancefield=lancefield, stacklevel=stacklevel + 1)
    return resolution, index


def as_mo(
    x: object,
    becker: BeckerMode = False,
    lancefield: bool = False,
    *,
    resolver: MicroorganismResolver | None = None,
) -> str | None | pd.Series:
    """
    Transform free text to microorganism identifiers.

    Examples:
        >>> as_mo("S. aureus")
        'STAAUR'
        >>> as_mo("S. epidermidis", becker=True)
        'STACNS'
        >>> as_mo("S. pyogenes", lancefield=True)
        'STCGRA'

    Args:
        x: A string, a sequence/Series of strings, or a DataFrame with one or two columns
        becker: Group Staphylococci into CoNS/CoPS; "all" also groups S. aureus as CoPS
        lancefield: Group beta-haemolytic Streptococci into Lancefield groups
        resolver: Resolver to use (defaults to the shipped reference tables)

    Returns:
        A single identifier (or None) for string input, otherwise a Series named
        "mo" aligned with the input. Unresolved values are None and trigger one
        MoCoercionWarning listing them.

    Raises:
        ValueError: If a DataFrame with zero or more than two columns is given
    """
    resolution, index = resolve_values(x, becker, lancefield, resolver=resolver, stacklevel=2)
    if isinstance(x, str) or x is None:
        return resolution.mo[0]
    return pd.Series(resolution.mo, index=index, name="mo", dtype=object)


guess_mo = as_mo


def is_mo(x: object, *, resolver: MicroorganismResolver | None = None) -> bool:
    """True when every non-missing value is a known identifier or group code."""
    values, _ = coerce_input(x)
    resolver = resolver or get_default_resolver()
    present = [v for v in values if not is_missing(v)]
    return all(isinstance(v, str) and resolver.table.is_valid(v) for v in present)


def detect_input_columns(cfg: ResolverConfig, df: pd.DataFrame) -> list[str]:
    """
    Check that the configured input columns exist in `df`.

    Raises:
        KeyError: If a configured column is not found in the DataFrame
    """
    missing = [c for c in cfg.input_columns if c not in df.columns]
    if missing:
        raise KeyError(f"Configured input_columns {missing} not found in input columns: {list(df.columns)}")
    return list(cfg.input_columns)


def resolve_dataframe(
    cfg: ResolverConfig,
    df: pd.DataFrame,
    *,
    resolver: MicroorganismResolver | None = None,
) -> tuple[pd.DataFrame, Resolution]:
    """
    Resolve the configured column(s) of `df` and attach the identifiers as cfg.output_column.

    Returns:
        Tuple of (copy of df with the output column, Resolution)
    """
    columns = detect_input_columns(cfg, df)
    resolution, _ = resolve_values(df[columns], cfg.becker, cfg.lancefield, resolver=resolver, stacklevel=2)

    df_out = df.copy()
    df_out[cfg.output_column] = pd.Series(resolution.mo, index=df.index, dtype=object)

    logger.info(
        "Resolved %d/%d rows from column(s) %s (%d distinct failures)",
        resolution.n_resolved,
        len(df_out),
        columns,
        len(resolution.failures),
    )
    return df_out, resolution
