# src/museum_visits/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the interaction layer.

Commands depend on Protocols instead of concrete implementations.
This keeps the console connector swappable and makes testing easier.
"""

from typing import Protocol


class Prompter(Protocol):
    """
    Synchronous user-decision port.

    confirm() gates every destructive operation; the store itself never asks.
    ask() returns None when the user cancels (e.g. EOF in the console).
    """

    def confirm(self, message: str) -> bool: ...

    def ask(self, message: str, default: str = "") -> str | None: ...
