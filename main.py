"""
CLI entrypoint for batch microorganism resolution.

This script performs the following steps:
- loads configs/resolver.yaml (command-line flags override it)
- creates a per-run output folder under outputs/
- loads the reference taxonomy and site code tables
- resolves the configured input column(s) of a CSV/Excel file
- writes the table with an added identifier column and the list of unresolved values
- logs a human-readable summary
"""

import argparse
import json
import logging
import warnings
from datetime import datetime
from pathlib import Path

from application import resolve_dataframe
from application.constants import FAILURES_FILENAME, LOG_FILENAME, OUTPUT_FILENAME, OUTPUT_ROOT
from domain.resolution import MoCoercionWarning
from infrastructure.config import build_resolver, load_resolver_config
from infrastructure.constants import RESOLVER_CONFIG_FILE
from infrastructure.io import ensure_exists, read_table, write_table
from infrastructure.observability import configure_logging, log_source, make_run_tag, set_log_context

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Resolve microorganism names to identifiers")
    p.add_argument(
        "--config",
        type=str,
        default=str(RESOLVER_CONFIG_FILE),
        help="Path to resolver.yaml (default: configs/resolver.yaml)",
    )
    p.add_argument("--input", type=str, required=True, help="CSV/Excel file to resolve")
    p.add_argument(
        "--output",
        type=str,
        default=None,
        help=f"Output CSV/Excel path (default: outputs/<run_id>/{OUTPUT_FILENAME})",
    )
    p.add_argument(
        "--columns",
        nargs="+",
        default=None,
        help="Input column, or genus and species columns (overrides input_columns)",
    )
    becker = p.add_mutually_exclusive_group()
    becker.add_argument("--becker", action="store_true", help="Group Staphylococci into CoNS/CoPS")
    becker.add_argument("--becker-all", action="store_true", help="Like --becker, also S. aureus as CoPS")
    p.add_argument("--lancefield", action="store_true", help="Group Streptococci into Lancefield groups")
    p.add_argument(
        "--console-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Console log level",
    )
    p.add_argument(
        "--file-level",
        type=str,
        default="DEBUG",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="File log level",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)

    config_path = Path(args.config)
    ensure_exists(config_path, "resolver.yaml", suffixes=(".yaml", ".yml"))
    input_path = ensure_exists(Path(args.input), "input table", suffixes=(".csv", ".xlsx", ".xls"))

    cfg = load_resolver_config(config_path)
    overrides: dict[str, object] = {}
    if args.columns:
        overrides["input_columns"] = args.columns
    if args.becker_all:
        overrides["becker"] = "all"
    elif args.becker:
        overrides["becker"] = True
    if args.lancefield:
        overrides["lancefield"] = True
    if overrides:
        cfg = cfg.model_validate({**cfg.model_dump(), **overrides})

    # ---- Per-run output folder ----
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_id = f"{ts}_{input_path.stem}_becker{cfg.becker}_lancefield{int(cfg.lancefield)}"
    run_dir = OUTPUT_ROOT / run_id
    run_dir.mkdir(parents=True, exist_ok=True)

    log_path = run_dir / LOG_FILENAME
    configure_logging(
        log_file=log_path,
        console_level=getattr(logging, args.console_level),
        file_level=getattr(logging, args.file_level),
    )
    set_log_context(run_id_full=run_id, source=input_path.name)

    logger.info("Starting run: run_id=%s (run_tag=%s)", run_id, make_run_tag(run_id))
    logger.info("Run output directory: %s", run_dir)

    resolver = build_resolver(cfg)
    logger.info(
        "Reference tables loaded: %d taxa (%s), %d site codes",
        len(resolver.table),
        cfg.taxonomy_file,
        len(resolver.site_codes),
    )

    logger.info("Loading input data from %s...", input_path)
    # codes such as "00123" must reach the resolver as written
    df = read_table(input_path, dtype={c: str for c in cfg.input_columns})
    logger.info("Input data loaded: %d rows, %d columns", df.shape[0], df.shape[1])

    with log_source(input_path, cfg.input_columns), warnings.catch_warnings():
        # already logged by the resolver
        warnings.simplefilter("ignore", MoCoercionWarning)
        df_out, resolution = resolve_dataframe(cfg, df, resolver=resolver)

    output_path = Path(args.output) if args.output else run_dir / OUTPUT_FILENAME
    write_table(df_out, output_path)
    logger.info("Saved resolved table to %s", output_path)

    failures_path = run_dir / FAILURES_FILENAME
    with failures_path.open("w", encoding="utf-8") as f:
        json.dump({"unresolved": resolution.failures}, f, ensure_ascii=False, indent=2)

    logger.info(
        "Summary: %d rows, %d resolved, %d distinct unresolved values (see %s)",
        len(df_out),
        resolution.n_resolved,
        len(resolution.failures),
        failures_path,
    )
    logger.info("Detailed log: %s", log_path)


if __name__ == "__main__":
    main()
