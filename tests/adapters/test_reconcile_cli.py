"""Tests for the reconcile_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from zenwallet.adapters import reconcile_cli


def _patch_wiring(monkeypatch, result):
    fake_logger = MagicMock()
    store = object()
    clock = object()
    fake_use_case = MagicMock()
    fake_use_case.run.return_value = result

    monkeypatch.setattr(reconcile_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(reconcile_cli, "build_state_store", lambda: store)
    monkeypatch.setattr(reconcile_cli, "build_clock", lambda: clock)

    def _fake_use_case(state_store, clock, logger):
        assert state_store is store
        assert logger is fake_logger
        return fake_use_case

    monkeypatch.setattr(reconcile_cli, "ReconcileSchedulesUseCase", _fake_use_case)
    return fake_use_case


def test_main_runs_use_case_and_prints_count(monkeypatch, capsys):
    fake_use_case = _patch_wiring(
        monkeypatch,
        SimpleNamespace(generated_count=4, failed_schedule_ids=[]),
    )

    exit_code = reconcile_cli.main()

    fake_use_case.run.assert_called_once()
    assert exit_code == 0
    assert capsys.readouterr().out == "Generated 4 scheduled transactions.\n"


def test_main_reports_failed_schedules(monkeypatch, capsys):
    _patch_wiring(
        monkeypatch,
        SimpleNamespace(generated_count=1, failed_schedule_ids=["s-1", "s-9"]),
    )

    exit_code = reconcile_cli.main()

    assert exit_code == 1
    assert "s-1, s-9" in capsys.readouterr().out
