import logging

import pytest

from infrastructure.observability import (
    clear_source_context,
    configure_logging,
    get_log_context,
    log_source,
    make_run_tag,
    set_log_context,
)


@pytest.fixture(autouse=True)
def _reset_root_logger():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)
    clear_source_context()


def test_run_tag_is_stable_and_short() -> None:
    assert make_run_tag("20240101_isolates") == make_run_tag("20240101_isolates")
    assert len(make_run_tag("20240101_isolates")) == 8
    assert make_run_tag("a") != make_run_tag("b")


def test_context_is_injected_into_file_log(tmp_path) -> None:
    log_file = tmp_path / "logs" / "run.log"
    configure_logging(log_file=log_file, console_level=logging.ERROR)
    set_log_context(run_id_full="run-1", source="isolates.csv:genus+species")

    logging.getLogger("domain.resolution.pipeline").warning("3 values unresolved")
    for handler in logging.getLogger().handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert f"r={make_run_tag('run-1')}" in text
    assert "src=isolates.csv:genus+species" in text
    assert "3 values unresolved" in text


def test_clear_source_keeps_run(tmp_path) -> None:
    set_log_context(run_id_full="run-2", source="x.csv")
    clear_source_context()

    ctx = get_log_context()
    assert ctx["source"] == "-"
    assert ctx["run_id_full"] == "run-2"


def test_log_source_restores_previous_source(tmp_path) -> None:
    set_log_context(source="outer")

    with pytest.raises(RuntimeError):
        with log_source(tmp_path / "isolates.csv", ["genus", "species"]) as source:
            assert source == "isolates.csv:genus+species"
            assert get_log_context()["source"] == source
            raise RuntimeError("boom")

    assert get_log_context()["source"] == "outer"
