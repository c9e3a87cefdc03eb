"""
Logging setup with contextvars-based metadata injection.

Every line carries the short run tag and the input being resolved
(file and column names), so warnings about unresolved values can be
traced back to their source table.
"""

import contextvars
import hashlib
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

cv_run_tag = contextvars.ContextVar("run_tag", default="-")
cv_run_id_full = contextvars.ContextVar("run_id_full", default="-")
cv_source = contextvars.ContextVar("source", default="-")

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] r=%(run)s src=%(source)s | %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s | r=%(run)s src=%(source)s | %(message)s"


def make_run_tag(run_id_full: str, length: int = 8) -> str:
    """Stable short tag derived from the full run_id (BLAKE2s)."""
    h = hashlib.blake2s(run_id_full.encode("utf-8"), digest_size=8).hexdigest()
    return h[:length]


class ContextInjectFilter(logging.Filter):
    """Inject run tag and source into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.run = cv_run_tag.get() or "-"
        record.source = cv_source.get() or "-"
        return True


def set_log_context(*, run_id_full: str | None = None, source: str | None = None) -> None:
    if run_id_full is not None:
        cv_run_id_full.set(str(run_id_full))
        cv_run_tag.set(make_run_tag(str(run_id_full)))
    if source is not None:
        cv_source.set(str(source))


def get_log_context() -> dict[str, str]:
    return {
        "run_tag": str(cv_run_tag.get() or "-"),
        "run_id_full": str(cv_run_id_full.get() or "-"),
        "source": str(cv_source.get() or "-"),
    }


def clear_source_context() -> None:
    """Reset source to the default, keeping run info."""
    cv_source.set("-")


@contextmanager
def log_source(path: Path, columns: list[str]) -> Iterator[str]:
    """
    Tag log lines inside the block with '<file>:<col1>+<col2>'.

    The previous source is restored on exit, also when resolution raises.
    """
    source = f"{path.name}:{'+'.join(columns)}"
    token = cv_source.set(source)
    try:
        yield source
    finally:
        cv_source.reset(token)


def _handler(handler: logging.Handler, level: int, fmt: str, datefmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt, datefmt=datefmt))
    handler.addFilter(ContextInjectFilter())
    return handler


def configure_logging(
    *,
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    max_bytes: int = 10_000_000,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Configure root logging: console handler plus an optional rotating file.

    Calling it again replaces the previous handlers.

    Args:
        log_file: Path to log file (console only when None)
        console_level: Minimum level for console output
        file_level: Minimum level for file output; DEBUG also records grouping changes
        max_bytes: Max log file size before rotation
        backup_count: Number of backup files to keep
    """
    root = logging.getLogger()
    for old in list(root.handlers):
        old.close()
        root.removeHandler(old)
    root.setLevel(logging.DEBUG)  # handlers enforce levels

    root.addHandler(_handler(logging.StreamHandler(), console_level, CONSOLE_FORMAT, "%H:%M:%S"))

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        root.addHandler(_handler(fh, file_level, FILE_FORMAT, "%Y-%m-%d %H:%M:%S"))

    # openpyxl warns on every styled workbook
    logging.getLogger("openpyxl").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured (console_level=%s, file=%s)",
        logging.getLevelName(console_level),
        log_file,
    )
