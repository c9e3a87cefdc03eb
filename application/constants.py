"""Application-level constants."""

from pathlib import Path

# Output directory structure
OUTPUT_ROOT = Path("outputs")
OUTPUT_FILENAME = "resolved.csv"
FAILURES_FILENAME = "unresolved.json"
LOG_FILENAME = "run.log"
