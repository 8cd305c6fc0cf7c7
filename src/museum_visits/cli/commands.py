# src/museum_visits/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from ..core.ports import Prompter
from ..core.state import AppState
from ..visits import visit_api
from ..visits.visit_models import (
    FilterStatus,
    InvalidDateFormatError,
    SortKey,
    VisitError,
    is_iso_date_shape,
)
from ..visits.visit_view import render_stats

CommandHandler = Callable[[AppState, list[str], Prompter], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by connectors (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str, prompter: Prompter) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Rejected operations (VisitError) become their user-facing message.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            return handler(state, args, prompter)
        except VisitError as e:
            logger.debug("Command /%s rejected: %s", name, e)
            return str(e)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if not args:
        return None
    try:
        return int(args[0].lstrip("#"))
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str], prompter: Prompter) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], prompter: Prompter) -> str:
    return visit_api.render_current(state)


def cmd_stats(state: AppState, args: list[str], prompter: Prompter) -> str:
    view = state.view
    search = view.search_text or "-"
    return (
        f"{render_stats(state.store)}\n"
        f"Filtro: {view.filter_status.value} | Ricerca: {search} | Ordine: {view.sort_key.value}"
    )


def cmd_add(state: AppState, args: list[str], prompter: Prompter) -> str:
    """
    /add 2025-05-01 Museo Morandi   -> add with an explicit date
    /add Museo Morandi              -> add for today
    """
    if args and is_iso_date_shape(args[0]):
        visit_date, name_parts = args[0], args[1:]
    else:
        visit_date, name_parts = date.today().isoformat(), args
    visit = state.store.add(" ".join(name_parts), visit_date)
    return f"Aggiunto #{visit.id}: {visit.name} ({visit.visit_date})"


def cmd_toggle(state: AppState, args: list[str], prompter: Prompter) -> str:
    visit_id = _parse_id(args)
    if visit_id is None:
        return "Usage: /toggle <id>"
    visit = state.store.toggle_completed(visit_id)
    if visit is None:
        # Unknown ids are ignored; nothing to report.
        return ""
    return f"#{visit.id} {visit.name}: {visit.status_label}"


def cmd_remove(state: AppState, args: list[str], prompter: Prompter) -> str:
    visit_id = _parse_id(args)
    if visit_id is None:
        return "Usage: /remove <id>"
    removed = visit_api.remove_visit(state, prompter, visit_id)
    if removed is None:
        return "Annullato."
    return f"Rimosso #{visit_id}." if removed else ""


def cmd_edit(state: AppState, args: list[str], prompter: Prompter) -> str:
    visit_id = _parse_id(args)
    if visit_id is None:
        return "Usage: /edit <id>"
    try:
        visit = visit_api.edit_visit(state, prompter, visit_id)
    except InvalidDateFormatError as e:
        if e.visit is not None:
            return f"{e}\n#{e.visit.id} {e.visit.name} ({e.visit.visit_date})"
        return str(e)
    if visit is None:
        return ""
    return f"#{visit.id} {visit.name} ({visit.visit_date})"


def cmd_filter(state: AppState, args: list[str], prompter: Prompter) -> str:
    """
    /filter all | pending | completed
    """
    choices = " | ".join(s.value for s in FilterStatus)
    if not args:
        return f"Filtro: {state.view.filter_status.value}. Usage: /filter {choices}"
    if args[0].lower() not in {s.value for s in FilterStatus}:
        return f"Usage: /filter {choices}"
    visit_api.set_filter(state, args[0])
    return visit_api.render_current(state)


def cmd_search(state: AppState, args: list[str], prompter: Prompter) -> str:
    """
    /search <text>  -> keep visits whose name contains text
    /search         -> clear the search
    """
    visit_api.set_search(state, " ".join(args))
    return visit_api.render_current(state)


def cmd_sort(state: AppState, args: list[str], prompter: Prompter) -> str:
    """
    /sort name | date | status | none
    """
    choices = " | ".join(k.value for k in SortKey)
    if not args:
        return f"Ordine: {state.view.sort_key.value}. Usage: /sort {choices}"
    if args[0].lower() not in {k.value for k in SortKey}:
        return f"Usage: /sort {choices}"
    visit_api.set_sort(state, args[0])
    return visit_api.render_current(state)


def cmd_mark_all(state: AppState, args: list[str], prompter: Prompter) -> str:
    changed = visit_api.mark_all_completed(state, prompter)
    if changed is None:
        return "Annullato."
    return "Tutti i musei sono segnati come visitati."


def cmd_clear_completed(state: AppState, args: list[str], prompter: Prompter) -> str:
    removed = visit_api.clear_completed(state, prompter)
    if removed is None:
        return "Annullato."
    return f"Rimossi {removed} museo/i visitato/i."


def cmd_clear_all(state: AppState, args: list[str], prompter: Prompter) -> str:
    removed = visit_api.clear_all(state, prompter)
    if removed is None:
        return "Annullato."
    return f"Lista svuotata ({removed} musei rimossi)."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show the list with current filter/search/sort.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show counters and current view settings.")
registry.register(
    "add", cmd_add, help_text="Add a museum: /add [YYYY-MM-DD] <name> (date defaults to today)."
)
registry.register("toggle", cmd_toggle, help_text="Toggle visited: /toggle <id>.", aliases=["t"])
registry.register("remove", cmd_remove, help_text="Remove a museum: /remove <id>.", aliases=["rm", "del"])
registry.register("edit", cmd_edit, help_text="Edit name and date: /edit <id>.")
registry.register("filter", cmd_filter, help_text="Filter: /filter all | pending | completed.")
registry.register("search", cmd_search, help_text="Search by name: /search [text].")
registry.register("sort", cmd_sort, help_text="Sort: /sort name | date | status | none.")
registry.register("markall", cmd_mark_all, help_text="Mark every museum as visited.")
registry.register("clearcompleted", cmd_clear_completed, help_text="Remove visited museums.")
registry.register("clearall", cmd_clear_all, help_text="Remove every museum and restart ids.")
