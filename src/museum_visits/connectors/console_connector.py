# src/museum_visits/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.ports import Prompter
from ..core.state import AppState
from ..visits.visit_api import render_current
from ..visits.visit_store import StoreEvent

logger = logging.getLogger(__name__)

YES_ANSWERS = {"s", "si", "sì", "y", "yes"}


class ConsolePrompter:
    """Prompter backed by input(); EOF/Ctrl+C count as "no"."""

    def confirm(self, message: str) -> bool:
        try:
            answer = input(f"{message} [s/N] ")
        except (EOFError, KeyboardInterrupt):
            print()
            return False
        return answer.strip().lower() in YES_ANSWERS

    def ask(self, message: str, default: str = "") -> str | None:
        try:
            answer = input(f"{message} [{default}] ")
        except (EOFError, KeyboardInterrupt):
            print()
            return None
        answer = answer.strip()
        return answer if answer else default


def run_console_loop(state: AppState, prompter: Prompter | None = None) -> None:
    prompter = prompter or ConsolePrompter()
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "museum_visits"))

    changed = False

    def on_store_change(event: StoreEvent, ids: list[int]) -> None:
        nonlocal changed
        changed = True
        logger.debug("Store changed event=%s ids=%s", event.value, ids)

    state.store.subscribe(on_store_change)
    logger.info("Console connector started (visits=%s).", state.store.count_total())

    print(f"{app_name} - Use /help for commands. Use /exit to quit.\n")
    print(render_current(state))
    print()

    try:
        while True:
            try:
                user_input = input(">>> ").strip()
            except EOFError:
                logger.info("Console EOF received, exiting.")
                break
            except KeyboardInterrupt:
                logger.info("Console KeyboardInterrupt, exiting.")
                print()
                break

            if not user_input:
                continue

            if user_input.lower() in ("/exit", "/quit"):
                logger.info("Console exit command received.")
                break

            if not user_input.startswith("/"):
                # Bare text is a shortcut for adding a museum for today.
                user_input = f"/add {user_input}"

            changed = False
            try:
                response = command_registry.handle(state, user_input, prompter)
            except Exception:
                logger.exception("Command handler crashed.")
                response = "Internal error while handling a command."

            if response:
                print(response)

            if changed and state.auto_list:
                print()
                print(render_current(state))
            print()
    finally:
        state.store.unsubscribe(on_store_change)

    logger.info("Console connector finished.")
