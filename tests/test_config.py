# tests/test_config.py

from __future__ import annotations

from pathlib import Path

from farmhand.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in (
        "FARMHAND_STARTUP_CHECK_DELAY_MS",
        "FARMHAND_NOTIFY_CLAIM_DELAY_MS",
        "FARMHAND_CLAIM_INTERVAL_MS",
        "FARMHAND_ITEM_NAMES_PATH",
        "FARMHAND_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()
    assert s.startup_check_delay_seconds == 4.0
    assert s.notify_claim_delay_seconds == 1.0
    assert s.claim_interval_seconds == 0.3
    assert s.item_names_path is None
    assert s.log_dir == Path("logs")


def test_env_overrides_in_milliseconds(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("FARMHAND_STARTUP_CHECK_DELAY_MS", "2500")
    monkeypatch.setenv("FARMHAND_NOTIFY_CLAIM_DELAY_MS", "0")
    monkeypatch.setenv("FARMHAND_CLAIM_INTERVAL_MS", "-50")
    monkeypatch.setenv("FARMHAND_ITEM_NAMES_PATH", str(tmp_path / "items.json"))

    s = Settings.from_env()
    assert s.startup_check_delay_seconds == 2.5
    assert s.notify_claim_delay_seconds == 0.0
    assert s.claim_interval_seconds == 0.0
    assert s.item_names_path == tmp_path / "items.json"


def test_invalid_numbers_fall_back(monkeypatch) -> None:
    monkeypatch.setenv("FARMHAND_CLAIM_INTERVAL_MS", "fast")
    assert Settings.from_env().claim_interval_seconds == 0.3
