# src/museum_visits/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the VisitStore (seeded with the Bologna museums unless disabled),
- wires store and initial view parameters into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState, ViewState
from ..visits.visit_models import SEED_MUSEUMS, FilterStatus, SortKey
from ..visits.visit_store import VisitStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    seed = SEED_MUSEUMS if getattr(settings, "seed_enabled", True) else ()
    store = VisitStore(seed)

    view = ViewState(
        filter_status=FilterStatus.parse(getattr(settings, "default_filter", "all")),
        sort_key=SortKey.parse(getattr(settings, "default_sort", "none")),
    )

    state = AppState(
        settings=settings,
        store=store,
        view=view,
        date_locale=str(getattr(settings, "date_locale", "it")),
        auto_list=bool(getattr(settings, "auto_list", True)),
    )
    logger.debug(
        "State created visits=%s filter=%s sort=%s",
        store.count_total(),
        view.filter_status.value,
        view.sort_key.value,
    )
    return state
