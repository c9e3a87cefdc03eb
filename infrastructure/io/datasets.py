"""Dataset loading utilities."""

from pathlib import Path
from typing import Any

import pandas as pd


def read_table(path: Path, **read_kwargs: Any) -> pd.DataFrame:
    """
    Read tabular data file (Excel or CSV) based on file extension.

    Supported formats:
    - Excel: .xlsx, .xls
    - CSV: .csv

    Args:
        path: Path to data file
        **read_kwargs: Passed through to pandas (e.g. dtype=str, keep_default_na=False)

    Returns:
        pandas DataFrame

    Raises:
        ValueError: If file format is not supported
        FileNotFoundError: If file does not exist
        Exception: If file cannot be read (pandas exceptions)
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in [".xlsx", ".xls"]:
        return pd.read_excel(path, **read_kwargs)
    elif suffix == ".csv":
        return pd.read_csv(path, **read_kwargs)
    else:
        raise ValueError(f"Unsupported file format: {suffix}. Supported formats: .xlsx, .xls, .csv")


def write_table(df: pd.DataFrame, path: Path) -> Path:
    """
    Write a DataFrame to CSV or Excel based on file extension.

    Raises:
        ValueError: If file format is not supported
    """
    suffix = path.suffix.lower()
    path.parent.mkdir(parents=True, exist_ok=True)

    if suffix == ".xlsx":
        df.to_excel(path, index=False)
    elif suffix == ".csv":
        df.to_csv(path, index=False)
    else:
        raise ValueError(f"Unsupported output format: {suffix}. Supported formats: .xlsx, .csv")
    return path
