# tests/conftest.py

from __future__ import annotations

import logging

import pytest

from farmhand.core.events import EventBus
from farmhand.game.items import ItemCatalog
from farmhand.tasks.task_claimer import TaskClaimer

from .fakes import FakeTransport


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def events() -> EventBus:
    return EventBus()


@pytest.fixture()
def items() -> ItemCatalog:
    return ItemCatalog({1001: "Carrot seed", 1002: "Fertilizer"})


@pytest.fixture()
def claimer(transport: FakeTransport, items: ItemCatalog) -> TaskClaimer:
    """
    Claimer with no pause between claims.

    Pacing has its own tests with an explicit interval.
    """
    return TaskClaimer(transport, items, claim_interval_seconds=0.0)


@pytest.fixture()
def restore_root_logger():
    """Drop handlers installed by setup_logging() and restore the root level."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
