"""Filesystem checks for CLI inputs."""

from pathlib import Path


def ensure_exists(path: Path, what: str, *, suffixes: tuple[str, ...] | None = None) -> Path:
    """
    Check that `path` is an existing file, optionally with one of `suffixes`.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)
        suffixes: Accepted lowercase extensions, e.g. (".csv", ".xlsx")

    Returns:
        The same path, for chaining

    Raises:
        FileNotFoundError: If path does not exist or is a directory
        ValueError: If the extension is not one of `suffixes`
    """
    if not path.is_file():
        raise FileNotFoundError(f"Missing {what} at: {path}")
    if suffixes is not None and path.suffix.lower() not in suffixes:
        raise ValueError(f"Unsupported {what} format: {path.suffix}. Supported formats: {', '.join(suffixes)}")
    return path
