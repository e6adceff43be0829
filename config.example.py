# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "FARMHAND_APP_NAME": "App display name (default: farmhand).",
    "FARMHAND_LOG_LEVEL": "Console logging level (default: INFO).",
    "FARMHAND_LOG_DIR": "Directory for the daily-rotated log file (default: logs).",
    # Task system timing (milliseconds)
    "FARMHAND_STARTUP_CHECK_DELAY_MS": "Delay before the one-shot startup task check (default: 4000).",
    "FARMHAND_NOTIFY_CLAIM_DELAY_MS": "Delay between a task push and claiming (default: 1000).",
    "FARMHAND_CLAIM_INTERVAL_MS": "Pause after every claim attempt (default: 300).",
    # Game data
    "FARMHAND_ITEM_NAMES_PATH": "Optional JSON file mapping item ids to display names.",
}
