# tests/test_commands.py

from __future__ import annotations

from datetime import date

from museum_visits.cli.commands import CommandRegistry, registry
from museum_visits.core.state import AppState
from museum_visits.visits.visit_models import FilterStatus, SortKey, VisitError

from .fakes import FakePrompter


def test_command_registry_routes_and_aliases(state: AppState, prompter: FakePrompter) -> None:
    reg = CommandRegistry()
    called: list[list[str]] = []

    def handler(state, args, prompter):
        called.append(args)
        return "ok"

    reg.register("a", handler, "a", aliases=["alias"])

    assert reg.handle(state, "/a x y", prompter) == "ok"
    assert reg.handle(state, "/ALIAS", prompter) == "ok"
    assert called == [["x", "y"], []]


def test_command_registry_unknown_and_non_command(state: AppState, prompter: FakePrompter) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello", prompter) is None
    assert "Unknown command" in (reg.handle(state, "/nope", prompter) or "")
    assert "Empty command" in (reg.handle(state, "/", prompter) or "")


def test_command_registry_turns_visit_errors_into_messages(state: AppState, prompter: FakePrompter) -> None:
    reg = CommandRegistry()

    def handler(state, args, prompter):
        raise VisitError("rejected")

    reg.register("bad", handler, "bad")
    assert reg.handle(state, "/bad", prompter) == "rejected"


def test_add_with_date_and_without(state: AppState, prompter: FakePrompter) -> None:
    reply = registry.handle(state, "/add 2025-05-01 Museo Morandi", prompter)
    assert reply == "Aggiunto #9: Museo Morandi (2025-05-01)"

    registry.handle(state, "/add Casa Carducci", prompter)
    visit = state.store.get(10)
    assert visit.name == "Casa Carducci"
    assert visit.visit_date == date.today().isoformat()


def test_add_without_name_is_rejected(state: AppState, prompter: FakePrompter) -> None:
    assert registry.handle(state, "/add 2025-05-01", prompter) == "Inserisci il nome del museo!"
    assert state.store.count_total() == 8


def test_toggle_and_unknown_id(state: AppState, prompter: FakePrompter) -> None:
    assert registry.handle(state, "/toggle 1", prompter) == "#1 Museo Civico Archeologico: Visitato"
    assert registry.handle(state, "/t #1", prompter) == "#1 Museo Civico Archeologico: Da visitare"
    assert registry.handle(state, "/toggle 999", prompter) == ""
    assert registry.handle(state, "/toggle abc", prompter) == "Usage: /toggle <id>"


def test_remove_respects_confirmation(state: AppState) -> None:
    assert registry.handle(state, "/remove 1", FakePrompter.scripted(confirms=[False])) == "Annullato."
    assert state.store.count_total() == 8
    assert registry.handle(state, "/rm 1", FakePrompter()) == "Rimosso #1."
    assert state.store.count_total() == 7


def test_edit_reports_bad_date(state: AppState) -> None:
    prompter = FakePrompter.scripted(answers=["Museo Nuovo", "2025.01.01"])
    reply = registry.handle(state, "/edit 1", prompter) or ""
    assert reply.startswith("Formato data non valido! Usa YYYY-MM-DD")
    assert "Museo Nuovo (2025-02-15)" in reply


def test_filter_search_sort_update_view(state: AppState, prompter: FakePrompter) -> None:
    reply = registry.handle(state, "/filter completed", prompter) or ""
    assert state.view.filter_status is FilterStatus.COMPLETED
    assert "#2" in reply and "#1 " not in reply

    registry.handle(state, "/sort date", prompter)
    assert state.view.sort_key is SortKey.DATE

    reply = registry.handle(state, "/search della musica", prompter) or ""
    assert state.view.search_text == "della musica"
    assert "Museo Internazionale della Musica" in reply

    registry.handle(state, "/search", prompter)
    assert state.view.search_text == ""

    assert (registry.handle(state, "/filter maybe", prompter) or "").startswith("Usage: /filter")
    assert state.view.filter_status is FilterStatus.COMPLETED
    assert (registry.handle(state, "/sort size", prompter) or "").startswith("Usage: /sort")


def test_bulk_commands(state: AppState) -> None:
    prompter = FakePrompter()
    assert registry.handle(state, "/clearcompleted", prompter) == "Rimossi 3 museo/i visitato/i."
    assert registry.handle(state, "/clearcompleted", prompter) == "Non ci sono musei visitati da rimuovere!"
    assert registry.handle(state, "/markall", prompter) == "Tutti i musei sono segnati come visitati."
    assert registry.handle(state, "/clearall", prompter) == "Lista svuotata (5 musei rimossi)."
    assert registry.handle(state, "/clearall", prompter) == "La lista è già vuota!"
    assert registry.handle(state, "/markall", prompter) == "Non ci sono musei nella lista!"


def test_stats_and_help(state: AppState, prompter: FakePrompter) -> None:
    stats = registry.handle(state, "/stats", prompter) or ""
    assert "Totale: 8 | Visitati: 3 | Da visitare: 5" in stats
    assert "Filtro: all" in stats

    help_text = registry.handle(state, "/help", prompter) or ""
    for name in ("add", "toggle", "remove", "edit", "filter", "search", "sort", "clearall"):
        assert f"/{name} " in help_text
