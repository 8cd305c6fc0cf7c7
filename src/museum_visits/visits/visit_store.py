# src/museum_visits/visits/visit_store.py

from __future__ import annotations

import logging
import time
import unicodedata
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from datetime import date
from enum import StrEnum
from typing import Any

from .visit_models import (
    EmptyNameError,
    EmptyStoreError,
    FilterStatus,
    InvalidDateFormatError,
    MissingDateError,
    NothingToClearError,
    SortKey,
    Visit,
    is_iso_date_shape,
)

logger = logging.getLogger(__name__)


class StoreEvent(StrEnum):
    INITIALIZED = "initialized"
    ADDED = "added"
    TOGGLED = "toggled"
    REMOVED = "removed"
    EDITED = "edited"
    MARKED_ALL = "marked_all"
    CLEARED_COMPLETED = "cleared_completed"
    CLEARED_ALL = "cleared_all"


StoreListener = Callable[[StoreEvent, list[int]], None]


def _name_sort_key(name: str) -> tuple[str, str]:
    # Accent- and case-insensitive first, exact text as tie-break.
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name


def _date_sort_key(raw: str) -> tuple[int, date]:
    # Malformed or non-calendar dates go first.
    if is_iso_date_shape(raw):
        try:
            return 1, date.fromisoformat(raw)
        except ValueError:
            pass
    return 0, date.min


class VisitStore:
    """
    In-memory visit store.

    Records are kept in an insertion-ordered dict keyed by id, so lookups,
    updates and deletes never scan. Ids come from a counter owned by the
    store and are never reused until clear_all() resets it.

    Every public method returns snapshots (copies) of the records; the only
    way to change a record is through the methods below. Validation always
    happens before the first mutation.
    """

    def __init__(self, seed: Iterable[Mapping[str, Any]] | None = None) -> None:
        self._visits: dict[int, Visit] = {}
        self._next_id = 1
        self._listeners: list[StoreListener] = []
        if seed is not None:
            self.initialize(seed)
        logger.info("VisitStore ready total=%s", self.count_total())

    # ---- low-level helpers ----

    @property
    def next_id(self) -> int:
        return self._next_id

    def _emit(self, event: StoreEvent, ids: list[int]) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, ids)
            except Exception:
                logger.exception("Store listener failed event=%s", event.value)

    # ---- subscriptions ----

    def subscribe(self, listener: StoreListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: StoreListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ---- public API ----

    def initialize(self, seed: Iterable[Mapping[str, Any]]) -> None:
        """Replace all state with the seed entries, ids 1..N in seed order."""
        now = time.time()
        visits: dict[int, Visit] = {}
        for idx, item in enumerate(seed, start=1):
            visits[idx] = Visit(
                id=idx,
                name=str(item.get("name", "")),
                visit_date=str(item.get("date") or item.get("visit_date") or ""),
                completed=bool(item.get("completed", False)),
                created_at=now,
            )
        self._visits = visits
        self._next_id = len(visits) + 1
        logger.debug("VisitStore initialized total=%s next_id=%s", len(visits), self._next_id)
        self._emit(StoreEvent.INITIALIZED, list(visits))

    def get(self, visit_id: int) -> Visit | None:
        visit = self._visits.get(visit_id)
        return replace(visit) if visit is not None else None

    def add(self, name: str | None, visit_date: str | None) -> Visit:
        clean_name = (name or "").strip()
        if not clean_name:
            raise EmptyNameError()
        if not visit_date:
            raise MissingDateError()

        visit = Visit(
            id=self._next_id,
            name=clean_name,
            visit_date=visit_date,
            completed=False,
            created_at=time.time(),
        )
        self._visits[visit.id] = visit
        self._next_id += 1
        logger.debug("Visit added id=%s name=%s date=%s", visit.id, visit.name, visit_date)
        self._emit(StoreEvent.ADDED, [visit.id])
        return replace(visit)

    def toggle_completed(self, visit_id: int) -> Visit | None:
        visit = self._visits.get(visit_id)
        if visit is None:
            logger.debug("toggle_completed: id=%s not found", visit_id)
            return None
        visit.completed = not visit.completed
        logger.debug("Visit toggled id=%s completed=%s", visit_id, visit.completed)
        self._emit(StoreEvent.TOGGLED, [visit_id])
        return replace(visit)

    def remove(self, visit_id: int) -> bool:
        if self._visits.pop(visit_id, None) is None:
            logger.debug("remove: id=%s not found", visit_id)
            return False
        logger.debug("Visit removed id=%s", visit_id)
        self._emit(StoreEvent.REMOVED, [visit_id])
        return True

    def edit(
        self,
        visit_id: int,
        new_name: str | None = None,
        new_date: str | None = None,
    ) -> Visit | None:
        """
        Update name and/or date of a visit.

        - the name changes only if new_name is non-blank after trimming and differs
        - the date changes only if new_date is given, differs and looks like YYYY-MM-DD

        Name and date are independent: a rejected date raises
        InvalidDateFormatError after the name update has been kept.
        Returns None if the id is unknown.
        """
        visit = self._visits.get(visit_id)
        if visit is None:
            logger.debug("edit: id=%s not found", visit_id)
            return None

        changed = False

        if new_name is not None:
            clean_name = new_name.strip()
            if clean_name and clean_name != visit.name:
                visit.name = clean_name
                changed = True

        date_error: InvalidDateFormatError | None = None
        if new_date and new_date != visit.visit_date:
            if is_iso_date_shape(new_date):
                visit.visit_date = new_date
                changed = True
            else:
                date_error = InvalidDateFormatError(replace(visit))

        if changed:
            logger.debug("Visit edited id=%s name=%s date=%s", visit_id, visit.name, visit.visit_date)
            self._emit(StoreEvent.EDITED, [visit_id])

        if date_error is not None:
            logger.debug("edit: id=%s rejected date=%r", visit_id, new_date)
            raise date_error

        return replace(visit)

    def query(
        self,
        filter_status: FilterStatus | str = FilterStatus.ALL,
        search_text: str | None = "",
        sort_key: SortKey | str = SortKey.NONE,
    ) -> list[Visit]:
        """
        Filtered, searched and sorted snapshot of the store. Never mutates.

        Values are matched exactly: a filter other than "all", "pending" or
        "completed" keeps nothing, a sort key other than "name", "date" or
        "status" keeps insertion order. All sorts are stable.
        """
        status = str(filter_status)
        needle = (search_text or "").lower()
        key = str(sort_key)

        out: list[Visit] = []
        for visit in self._visits.values():
            keep = (
                status == FilterStatus.ALL
                or (status == FilterStatus.PENDING and not visit.completed)
                or (status == FilterStatus.COMPLETED and visit.completed)
            )
            if not keep:
                continue
            if needle not in visit.name.lower():
                continue
            out.append(replace(visit))

        if key == SortKey.NAME:
            out.sort(key=lambda v: _name_sort_key(v.name))
        elif key == SortKey.DATE:
            out.sort(key=lambda v: _date_sort_key(v.visit_date))
        elif key == SortKey.STATUS:
            out.sort(key=lambda v: v.completed)

        return out

    def count_total(self) -> int:
        return len(self._visits)

    def count_completed(self) -> int:
        return sum(1 for v in self._visits.values() if v.completed)

    def count_pending(self) -> int:
        return self.count_total() - self.count_completed()

    # ---- bulk operations ----

    def mark_all_completed(self) -> int:
        """Mark every visit completed. Returns how many were changed."""
        if not self._visits:
            raise EmptyStoreError()
        changed = [v.id for v in self._visits.values() if not v.completed]
        for visit in self._visits.values():
            visit.completed = True
        logger.info("Marked all visits completed (changed=%s)", len(changed))
        self._emit(StoreEvent.MARKED_ALL, changed)
        return len(changed)

    def clear_completed(self) -> int:
        """Remove every completed visit. Returns how many were removed."""
        removed = [v.id for v in self._visits.values() if v.completed]
        if not removed:
            raise NothingToClearError()
        for visit_id in removed:
            del self._visits[visit_id]
        logger.info("Cleared completed visits removed=%s", len(removed))
        self._emit(StoreEvent.CLEARED_COMPLETED, removed)
        return len(removed)

    def clear_all(self) -> int:
        """Remove every visit and restart ids from 1. Returns how many were removed."""
        if not self._visits:
            raise EmptyStoreError("La lista è già vuota!")
        removed = list(self._visits)
        self._visits = {}
        self._next_id = 1
        logger.info("Cleared all visits removed=%s", len(removed))
        self._emit(StoreEvent.CLEARED_ALL, removed)
        return len(removed)
