from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from fileops import cli


@pytest.fixture(autouse=True)
def _restore_hooks(monkeypatch):
    # main() installs a process-wide excepthook and resets loguru sinks
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    yield
    cli.configure_logging("WARNING")


@pytest.mark.integration
def test_main_prints_final_content_and_exits_zero(pipeline_root: Path, capsys) -> None:
    code = cli.main([str(pipeline_root), "--log-level", "WARNING"])

    assert code == 0
    assert capsys.readouterr().out == "hello\n\nappending to this file\n"
    assert (pipeline_root / "files" / "newreply.txt").exists()


@pytest.mark.integration
def test_main_exits_one_when_source_missing(make_pipeline_root, capsys) -> None:
    root = make_pipeline_root(None)

    code = cli.main([str(root), "--log-level", "CRITICAL"])

    assert code == 1
    assert capsys.readouterr().out == ""


@pytest.mark.integration
def test_main_json_output_matches_result(pipeline_root: Path, capsys) -> None:
    code = cli.main([str(pipeline_root), "--json", "--log-level", "WARNING"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["success"] is True
    assert payload["content"] == "hello\n\nappending to this file"
    assert len(payload["completed_steps"]) == 6


@pytest.mark.integration
def test_main_json_output_on_failure(make_pipeline_root, capsys) -> None:
    root = make_pipeline_root(None)

    code = cli.main([str(root), "--json", "--log-level", "CRITICAL"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["error"]["kind"] == "not_found"
    assert payload["error"]["index"] == 1


@pytest.mark.integration
def test_main_event_log_flag_writes_log(pipeline_root: Path) -> None:
    code = cli.main([str(pipeline_root), "--event-log", "--log-level", "WARNING"])

    assert code == 0
    assert (pipeline_root / "logs" / "eventLog.txt").exists()


@pytest.mark.unit
def test_main_init_creates_files_dir(tmp_path: Path, capsys) -> None:
    root = tmp_path / "fresh"

    code = cli.main([str(root), "--init", "--log-level", "WARNING"])

    assert code == 0
    assert (root / "files").is_dir()
    assert "files_dir:" in capsys.readouterr().out


@pytest.mark.unit
def test_main_rejects_unknown_flag() -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--bogus"])
    assert exc_info.value.code == 2


@pytest.mark.unit
def test_install_fatal_exception_hook_logs_uncaught_errors() -> None:
    from loguru import logger

    messages = []
    cli.install_fatal_exception_hook()
    assert sys.excepthook is cli._fatal_excepthook

    sink_id = logger.add(messages.append, level="CRITICAL", format="{message}")
    try:
        try:
            raise ValueError("boom")
        except ValueError:
            sys.excepthook(*sys.exc_info())
    finally:
        logger.remove(sink_id)

    assert any("There was an uncaught error: boom" in str(m) for m in messages)
