# src/museum_visits/visits/visit_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

ISO_DATE_REGEX = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class FilterStatus(StrEnum):
    """Which visits a query keeps, by completion state."""

    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, raw: str | None) -> FilterStatus:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ALL


class SortKey(StrEnum):
    """
    Ordering applied by a query.

    NONE keeps insertion order (it is also what any unknown key maps to).
    """

    NAME = "name"
    DATE = "date"
    STATUS = "status"
    NONE = "none"

    @classmethod
    def parse(cls, raw: str | None) -> SortKey:
        if not raw:
            return cls.NONE
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.NONE


@dataclass(slots=True)
class Visit:
    id: int
    name: str
    visit_date: str
    completed: bool
    created_at: float

    @property
    def status_label(self) -> str:
        return "Visitato" if self.completed else "Da visitare"


def is_iso_date_shape(raw: str | None) -> bool:
    """Shape check only: "2025-13-40" passes, "2025/01/01" does not."""
    return bool(raw) and ISO_DATE_REGEX.match(raw) is not None


# ---- errors ----


class VisitError(ValueError):
    """Base class for rejected visit operations. The message is user-facing."""

    default_message = "Operazione non valida."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class EmptyNameError(VisitError):
    default_message = "Inserisci il nome del museo!"


class MissingDateError(VisitError):
    default_message = "Seleziona una data!"


class InvalidDateFormatError(VisitError):
    """
    Raised by edit() when the new date is not YYYY-MM-DD.

    A name change requested in the same call has already been applied;
    `visit` is the record as it stands after the call.
    """

    default_message = "Formato data non valido! Usa YYYY-MM-DD"

    def __init__(self, visit: Visit | None = None, message: str | None = None) -> None:
        super().__init__(message)
        self.visit = visit


class EmptyStoreError(VisitError):
    default_message = "Non ci sono musei nella lista!"


class NothingToClearError(VisitError):
    default_message = "Non ci sono musei visitati da rimuovere!"


# ---- seed ----

# Bologna museums loaded at startup: (name, date, completed)
SEED_MUSEUMS: tuple[dict[str, Any], ...] = (
    {"name": "Museo Civico Archeologico", "date": "2025-02-15", "completed": False},
    {"name": "Pinacoteca Nazionale di Bologna", "date": "2025-02-20", "completed": True},
    {"name": "Museo della Storia di Bologna", "date": "2025-03-01", "completed": False},
    {"name": "MAMbo - Museo d'Arte Moderna di Bologna", "date": "2025-03-10", "completed": False},
    {"name": "Museo Internazionale della Musica", "date": "2025-03-15", "completed": True},
    {"name": "Museo Civico Medievale", "date": "2025-03-20", "completed": True},
    {"name": "Museo di Palazzo Poggi", "date": "2025-04-01", "completed": False},
    {"name": "Museo della Tappezzeria", "date": "2025-04-05", "completed": False},
)
