# src/museum_visits/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..visits.visit_models import FilterStatus, SortKey
from ..visits.visit_store import VisitStore


@dataclass(slots=True)
class ViewState:
    """Current list parameters chosen by the user."""

    filter_status: FilterStatus = FilterStatus.ALL
    search_text: str = ""
    sort_key: SortKey = SortKey.NONE


@dataclass
class AppState:
    # Store Settings on the state for easy access in other modules later.
    settings: object

    store: VisitStore
    view: ViewState = field(default_factory=ViewState)

    date_locale: str = "it"
    auto_list: bool = True
