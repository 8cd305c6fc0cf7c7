# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "MUSEUM_APP_NAME": "App display name (default: Musei di Bologna).",
    "MUSEUM_LOG_LEVEL": "Console logging level (default: WARNING).",
    "MUSEUM_LOG_TO_FILE": "Write a DEBUG log file under the data dir (true/false, default: true).",
    # Paths (gitignored)
    "MUSEUM_DATA_DIR": "Local data directory for logs (default: .local/museum_visits).",
    # List behaviour
    "MUSEUM_SEED_ENABLED": "Start with the 8 Bologna museums (true/false, default: true).",
    "MUSEUM_DATE_LOCALE": "Date display language: it | en (default: it).",
    "MUSEUM_DEFAULT_FILTER": "Initial filter: all | pending | completed (default: all).",
    "MUSEUM_DEFAULT_SORT": "Initial sort: name | date | status | none (default: none).",
    "MUSEUM_AUTO_LIST": "Reprint the list after every change (true/false, default: true).",
}
