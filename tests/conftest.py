# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from museum_visits.cli.bootstrap import create_initial_state
from museum_visits.core.state import AppState
from museum_visits.visits.visit_models import SEED_MUSEUMS
from museum_visits.visits.visit_store import VisitStore

from .fakes import FakePrompter


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the developer's environment.
    """
    return SimpleNamespace(
        app_name="Musei di Bologna",
        log_level="WARNING",
        log_to_file=False,
        data_dir=tmp_path,
        seed_enabled=True,
        date_locale="it",
        default_filter="all",
        default_sort="none",
        auto_list=True,
    )


@pytest.fixture()
def store() -> VisitStore:
    """Store seeded with the 8 Bologna museums (3 visited, 5 to visit)."""
    return VisitStore(SEED_MUSEUMS)


@pytest.fixture()
def empty_store() -> VisitStore:
    return VisitStore()


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    return create_initial_state(settings=settings)


@pytest.fixture()
def prompter() -> FakePrompter:
    return FakePrompter()
