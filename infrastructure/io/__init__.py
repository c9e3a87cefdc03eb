"""I/O utilities: filesystem checks and tabular dataset loading/saving."""

from infrastructure.io.datasets import read_table, write_table
from infrastructure.io.fs import ensure_exists

__all__ = [
    "ensure_exists",
    "read_table",
    "write_table",
]
