import json
import logging

import pandas as pd
import pytest

import main as cli
from infrastructure.constants import TAXONOMY_FILE


@pytest.fixture(autouse=True)
def _reset_root_logger():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)


def test_cli_resolves_genus_species_columns(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    src = tmp_path / "isolates.csv"
    pd.DataFrame(
        {
            "genus": ["Staphylococcus", "Streptococcus", "Unknownia"],
            "species": ["epidermidis", "pyogenes", "bogus"],
        }
    ).to_csv(src, index=False)
    out = tmp_path / "resolved.csv"

    cli.main(["--input", str(src), "--output", str(out), "--columns", "genus", "species", "--becker", "--lancefield"])

    df = pd.read_csv(out)
    assert list(df["mo"].fillna("")) == ["STACNS", "STCGRA", ""]

    (run_dir,) = (tmp_path / "outputs").iterdir()
    failures = json.loads((run_dir / "unresolved.json").read_text(encoding="utf-8"))
    assert failures == {"unresolved": ["Unknownia bogus"]}
    assert (run_dir / "run.log").exists()


def test_cli_missing_input(tmp_path) -> None:
    with pytest.raises(FileNotFoundError, match="input table"):
        cli.main(["--input", str(tmp_path / "missing.csv")])


def test_cli_rejects_unsupported_input_format(tmp_path) -> None:
    src = tmp_path / "isolates.txt"
    src.write_text("microorganism\nE. coli\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Unsupported input table format"):
        cli.main(["--input", str(src)])


def test_cli_keeps_zero_padded_site_codes(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    codes = tmp_path / "codes.csv"
    codes.write_text("code,mo\n00123,ESCCOL\n456,KLEPNE\n", encoding="utf-8")
    configs = tmp_path / "configs"
    configs.mkdir()
    config = configs / "resolver.yaml"
    config.write_text(
        f"taxonomy_file: {TAXONOMY_FILE.as_posix()}\nsite_codes_file: {codes.as_posix()}\n",
        encoding="utf-8",
    )
    src = tmp_path / "isolates.csv"
    src.write_text("microorganism,n\n00123,1\n456,2\n,3\n", encoding="utf-8")
    out = tmp_path / "resolved.csv"

    cli.main(["--config", str(config), "--input", str(src), "--output", str(out)])

    df = pd.read_csv(out, dtype=str)
    assert list(df["microorganism"].fillna("")) == ["00123", "456", ""]
    assert list(df["mo"].fillna("")) == ["ESCCOL", "KLEPNE", ""]
    (run_dir,) = (tmp_path / "outputs").iterdir()
    failures = json.loads((run_dir / "unresolved.json").read_text(encoding="utf-8"))
    assert failures == {"unresolved": []}
