# src/museum_visits/visits/visit_view.py

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from .visit_models import Visit, is_iso_date_shape
from .visit_store import VisitStore

NO_RESULTS_TEXT = "Nessun museo trovato con i filtri selezionati."

_WEEKDAYS = {
    "it": ("lunedì", "martedì", "mercoledì", "giovedì", "venerdì", "sabato", "domenica"),
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
}

_MONTHS = {
    "it": (
        "gennaio", "febbraio", "marzo", "aprile", "maggio", "giugno",
        "luglio", "agosto", "settembre", "ottobre", "novembre", "dicembre",
    ),
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
}


def format_date(raw: str, locale: str = "it") -> str:
    """
    Long human date for a YYYY-MM-DD string.

    it: "sabato 15 febbraio 2025"
    en: "Saturday, 15 February 2025"

    Anything that is not a real calendar date is returned unchanged.
    """
    if not is_iso_date_shape(raw):
        return raw
    try:
        d = date.fromisoformat(raw)
    except ValueError:
        return raw

    loc = locale if locale in _WEEKDAYS else "it"
    weekday = _WEEKDAYS[loc][d.weekday()]
    month = _MONTHS[loc][d.month - 1]
    if loc == "en":
        return f"{weekday}, {d.day} {month} {d.year}"
    return f"{weekday} {d.day} {month} {d.year}"


def render_row(visit: Visit, locale: str = "it") -> str:
    box = "[x]" if visit.completed else "[ ]"
    return (
        f"{box} #{visit.id}  {visit.name}\n"
        f"      {format_date(visit.visit_date, locale)} | {visit.status_label}"
    )


def render_rows(visits: Sequence[Visit], locale: str = "it") -> str:
    if not visits:
        return NO_RESULTS_TEXT
    return "\n".join(render_row(v, locale) for v in visits)


def render_stats(store: VisitStore) -> str:
    return (
        f"Totale: {store.count_total()} | "
        f"Visitati: {store.count_completed()} | "
        f"Da visitare: {store.count_pending()}"
    )
