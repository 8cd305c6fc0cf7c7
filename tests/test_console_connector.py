# tests/test_console_connector.py

from __future__ import annotations

import logging

import pytest

from museum_visits.connectors.console_connector import ConsolePrompter, run_console_loop
from museum_visits.core.state import AppState


def _feed(monkeypatch: pytest.MonkeyPatch, lines: list[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_console_loop_runs_commands_until_exit(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _feed(monkeypatch, ["/add 2025-05-01 Museo Morandi", "", "/toggle 9", "/exit", "/add never"])
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Aggiunto #9: Museo Morandi (2025-05-01)" in out
    assert "#9 Museo Morandi: Visitato" in out
    # Startup list plus one reprint per change.
    assert out.count("Totale:") == 3
    assert state.store.count_total() == 9
    assert state.store.get(9).completed is True


def test_console_loop_bare_text_adds_for_today(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, ["Casa Carducci"])
    run_console_loop(state)
    assert state.store.get(9).name == "Casa Carducci"


def test_console_loop_confirmation_uses_input(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _feed(monkeypatch, ["/clearall", "n", "/clearall", "s"])
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "Annullato." in out
    assert "Lista svuotata (8 musei rimossi)." in out
    assert "Nessun museo trovato con i filtri selezionati." in out
    assert state.store.count_total() == 0


def test_console_loop_stops_listening_on_exit(
    state: AppState, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    _feed(monkeypatch, ["/toggle 1"])
    with caplog.at_level(logging.DEBUG, logger="museum_visits.connectors.console_connector"):
        run_console_loop(state)
        seen_inside = [r.getMessage() for r in caplog.records if "Store changed" in r.getMessage()]
        caplog.clear()

        state.store.toggle_completed(1)
        seen_after = [r.getMessage() for r in caplog.records if "Store changed" in r.getMessage()]

    assert seen_inside == ["Store changed event=toggled ids=[1]"]
    assert seen_after == []


def test_console_loop_without_auto_list_does_not_reprint(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    state.auto_list = False
    _feed(monkeypatch, ["/toggle 1", "/add 2025-05-01 Museo Morandi"])
    run_console_loop(state)

    out = capsys.readouterr().out
    assert "#1 Museo Civico Archeologico: Visitato" in out
    assert "Aggiunto #9: Museo Morandi (2025-05-01)" in out
    # Only the list printed at startup.
    assert out.count("Totale:") == 1


def test_console_prompter_answers(monkeypatch: pytest.MonkeyPatch) -> None:
    prompter = ConsolePrompter()

    _feed(monkeypatch, ["sì", "no", "", "  Museo  "])
    assert prompter.confirm("ok?") is True
    assert prompter.confirm("ok?") is False
    assert prompter.ask("nome", "default") == "default"
    assert prompter.ask("nome", "default") == "Museo"

    _feed(monkeypatch, [])
    assert prompter.confirm("ok?") is False
    assert prompter.ask("nome", "default") is None
