"""Unit tests for the CLI entrypoint."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from solid_principles import main as cli
from solid_principles.registry import MissingCapability


@pytest.fixture(autouse=True)
def _restore_root_logger(clean_env: Path) -> Iterator[None]:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in saved_handlers:
        root.addHandler(handler)
    root.setLevel(saved_level)


def test_list_prints_every_sample(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["list"]) == 0

    out = capsys.readouterr().out
    for slug in ("single-responsibility", "open-closed", "liskov-substitution"):
        assert slug in out


def test_run_single_sample(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["run", "ocp"]) == 0

    out = capsys.readouterr().out
    assert "== Open-Closed ==" in out
    assert "Total area via Shape: 24.566" in out


def test_run_all_samples(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["run", "all"]) == 0

    out = capsys.readouterr().out
    assert out.count("== ") == 5
    assert "Ostrich walking" in out
    assert "Processed 0 row(s) from postgresql" in out


def test_run_unknown_sample(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["run", "nope"]) == 2
    assert "Unknown sample" in capsys.readouterr().err


def test_contracts_lists_operations_and_variants(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["contracts"]) == 0

    out = capsys.readouterr().out
    assert "LivingWorker (extends Worker)" in out
    assert "  query(sql) -> QueryResult" in out
    assert "  variants: MySQL, PostgreSQL" in out


def test_check_passes_for_bundled_samples(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["check"]) == 0
    assert "All variants satisfy their contracts" in capsys.readouterr().out


def test_check_reports_failures(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    failure = MissingCapability(contract="Shape", missing=("area",), variant="Blob")
    monkeypatch.setattr(cli.default_registry, "verify", lambda strict: [failure])

    assert cli.main(["check"]) == 4
    assert "Blob does not implement contract 'Shape'" in capsys.readouterr().err


def test_configuration_error_exit_code(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SOLID_LOG_FORMAT", "xml")

    assert cli.main(["list"]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_unexpected_errors_are_logged(monkeypatch: pytest.MonkeyPatch) -> None:
    def explode() -> list[str]:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "_print_samples", explode)

    assert cli.main(["list"]) == 1
