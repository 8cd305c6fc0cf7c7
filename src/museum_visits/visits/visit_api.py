# src/museum_visits/visits/visit_api.py

from __future__ import annotations

"""
High-level helpers used by the interaction layer.

Destructive operations follow a two-step protocol: check the precondition,
ask the Prompter, and only then call the store. A declined confirmation
returns None and leaves the store untouched.
"""

import logging

from ..core.ports import Prompter
from ..core.state import AppState
from .visit_models import (
    EmptyStoreError,
    FilterStatus,
    NothingToClearError,
    SortKey,
    Visit,
)
from .visit_view import render_rows, render_stats

logger = logging.getLogger(__name__)

CONFIRM_REMOVE = "Sei sicuro di voler eliminare questo museo dalla lista?"
CONFIRM_MARK_ALL = "Segnare tutti i musei come visitati?"
CONFIRM_CLEAR_ALL = (
    "Sei sicuro di voler cancellare tutti i musei? Questa azione non può essere annullata!"
)


def confirm_clear_completed_text(count: int) -> str:
    return f"Rimuovere {count} museo/i visitato/i?"


# ---- view ----


def current_visits(state: AppState) -> list[Visit]:
    view = state.view
    return state.store.query(view.filter_status, view.search_text, view.sort_key)


def render_current(state: AppState) -> str:
    rows = render_rows(current_visits(state), state.date_locale)
    return f"{rows}\n\n{render_stats(state.store)}"


def set_filter(state: AppState, raw: str | None) -> FilterStatus:
    state.view.filter_status = FilterStatus.parse(raw)
    return state.view.filter_status


def set_search(state: AppState, text: str | None) -> str:
    # Kept as typed; surrounding spaces take part in the match.
    state.view.search_text = text or ""
    return state.view.search_text


def set_sort(state: AppState, raw: str | None) -> SortKey:
    state.view.sort_key = SortKey.parse(raw)
    return state.view.sort_key


# ---- single-record operations ----


def remove_visit(state: AppState, prompter: Prompter, visit_id: int) -> bool | None:
    """
    Remove after confirmation.
    Returns None if the user declined, otherwise whether a record was removed.
    """
    if not prompter.confirm(CONFIRM_REMOVE):
        logger.debug("remove declined id=%s", visit_id)
        return None
    return state.store.remove(visit_id)


def edit_visit(state: AppState, prompter: Prompter, visit_id: int) -> Visit | None:
    """
    Prompt for a new name and a new date (current values as defaults) and apply them.

    Returns None if the id is unknown. InvalidDateFormatError propagates
    to the caller; the name change, if any, is kept.
    """
    visit = state.store.get(visit_id)
    if visit is None:
        return None

    new_name = prompter.ask("Modifica il nome del museo:", visit.name)
    if new_name is not None:
        # Rename first so a rejected date below cannot undo it.
        renamed = state.store.edit(visit_id, new_name=new_name)
        if renamed is None:
            return None

    new_date = prompter.ask("Modifica la data (YYYY-MM-DD):", visit.visit_date)
    if new_date is None:
        return state.store.get(visit_id)
    return state.store.edit(visit_id, new_date=new_date.strip())


# ---- bulk operations ----


def mark_all_completed(state: AppState, prompter: Prompter) -> int | None:
    if state.store.count_total() == 0:
        raise EmptyStoreError()
    if not prompter.confirm(CONFIRM_MARK_ALL):
        logger.debug("mark_all_completed declined")
        return None
    return state.store.mark_all_completed()


def clear_completed(state: AppState, prompter: Prompter) -> int | None:
    count = state.store.count_completed()
    if count == 0:
        raise NothingToClearError()
    if not prompter.confirm(confirm_clear_completed_text(count)):
        logger.debug("clear_completed declined count=%s", count)
        return None
    return state.store.clear_completed()


def clear_all(state: AppState, prompter: Prompter) -> int | None:
    if state.store.count_total() == 0:
        raise EmptyStoreError("La lista è già vuota!")
    if not prompter.confirm(CONFIRM_CLEAR_ALL):
        logger.debug("clear_all declined")
        return None
    return state.store.clear_all()
