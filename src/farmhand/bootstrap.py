# src/farmhand/bootstrap.py

"""
Composition root for the task system.

The network layer owns the transport and the push channel; this module only
wires them together with settings and the item-name table.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .config import Settings, get_settings
from .core.ports import EventSource, ItemNameLookup, RpcTransport
from .game.items import ItemCatalog
from .logging_setup import setup_logging
from .tasks.task_claimer import TaskClaimer
from .tasks.task_system import TaskSystem

logger = logging.getLogger(__name__)


def load_item_catalog(settings: Settings) -> ItemCatalog:
    path = settings.item_names_path
    if path is None:
        return ItemCatalog()
    try:
        return ItemCatalog.from_json(path)
    except Exception:
        logger.exception("Failed to load item names from %s; using built-in names", path)
        return ItemCatalog()


def create_task_system(
    transport: RpcTransport,
    events: EventSource,
    *,
    settings: Settings | None = None,
    items: ItemNameLookup | None = None,
) -> TaskSystem:
    """
    Build a TaskSystem from the provided settings.

    If settings is None, falls back to get_settings(). Call initialize() on the result
    once the event loop is running.
    """
    if settings is None:
        settings = get_settings()
    if items is None:
        items = load_item_catalog(settings)

    claimer = TaskClaimer(
        transport,
        items,
        claim_interval_seconds=settings.claim_interval_seconds,
    )
    return TaskSystem(
        transport,
        events,
        claimer,
        startup_check_delay_seconds=settings.startup_check_delay_seconds,
        notify_claim_delay_seconds=settings.notify_claim_delay_seconds,
    )


def configure_logging(settings: Settings | None = None) -> Path:
    """Install console + rotating file logging from settings.log_level / settings.log_dir."""
    if settings is None:
        settings = get_settings()

    level_name = str(settings.log_level or "INFO").upper()
    console_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    return setup_logging(log_dir=settings.log_dir, console_level=console_level)


async def run_task_system(
    transport: RpcTransport,
    events: EventSource,
    *,
    settings: Settings | None = None,
    items: ItemNameLookup | None = None,
) -> None:
    """
    Configure logging, start the task system and keep it running until cancelled.

    The network layer runs this alongside its connection; cancelling it tears the
    task system down (listener removed, pending passes cancelled).
    """
    if settings is None:
        settings = get_settings()

    configure_logging(settings)
    logger.info("Starting %s task system...", settings.app_name)

    system = create_task_system(transport, events, settings=settings, items=items)
    system.initialize()
    try:
        await asyncio.Event().wait()
    finally:
        system.cleanup()
        logger.info("%s task system stopped.", settings.app_name)
