# src/farmhand/tasks/task_system.py

from __future__ import annotations

"""
Task system lifecycle.

Two independent triggers feed the same analyze -> claim pipeline:
- a one-shot check shortly after start (fetches the task state itself),
- the server's task-state push, which carries the snapshot in the payload.

All delayed work runs as asyncio tasks owned by TaskSystem; cleanup() cancels them.
"""

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from ..core.ports import EventSource, RpcTransport
from .task_analyzer import find_claimable
from .task_api import get_task_info
from .task_claimer import TaskClaimer
from .task_models import ClaimableTask, ClaimOutcome, TaskInfo, TaskPayloadError

logger = logging.getLogger(__name__)

TASK_INFO_NOTIFY = "taskInfoNotify"


class TaskSystem:
    def __init__(
        self,
        transport: RpcTransport,
        events: EventSource,
        claimer: TaskClaimer,
        *,
        startup_check_delay_seconds: float = 4.0,
        notify_claim_delay_seconds: float = 1.0,
    ) -> None:
        self._transport = transport
        self._events = events
        self._claimer = claimer
        self._startup_delay = max(0.0, float(startup_check_delay_seconds))
        self._notify_delay = max(0.0, float(notify_claim_delay_seconds))

        self._initialized = False
        self._scheduled: set[asyncio.Task[Any]] = set()

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def claimer(self) -> TaskClaimer:
        return self._claimer

    def pending_tasks(self) -> frozenset[asyncio.Task[Any]]:
        return frozenset(self._scheduled)

    # ---- Lifecycle ----

    def initialize(self) -> bool:
        """
        Subscribe to task pushes and schedule the startup check.

        Must be called from a running event loop. A second call is a no-op and returns False.
        """
        if self._initialized:
            return False

        # Scheduling raises outside a running loop; nothing is registered yet at that point.
        self._schedule(self._startup_check, name="task-startup-check")
        self._events.on(TASK_INFO_NOTIFY, self.on_task_info_notify)
        self._initialized = True
        logger.debug("Task system initialized (startup check in %.1fs)", self._startup_delay)
        return True

    def cleanup(self) -> None:
        """Unsubscribe and cancel every pending or running pass."""
        if self._initialized:
            self._events.off(TASK_INFO_NOTIFY, self.on_task_info_notify)
            self._initialized = False

        for task in list(self._scheduled):
            task.cancel()
        self._scheduled.clear()

    # ---- Triggers ----

    async def check_and_claim(self) -> list[ClaimOutcome]:
        """Fetch the current task state and claim everything that is ready."""
        reply = await get_task_info(self._transport)
        if reply.task_info is None:
            return []

        claimable = find_claimable(reply.task_info)
        if not claimable:
            return []

        logger.info("Found %d claimable tasks", len(claimable))
        return await self._claimer.claim_all(claimable)

    async def best_effort_startup_reconciliation(self) -> None:
        """
        Startup check policy: any failure is dropped without a log line.

        The check is a convenience; the push path covers whatever it misses.
        Per-task claim failures are still logged by the claimer.
        """
        with contextlib.suppress(Exception):
            await self.check_and_claim()

    def on_task_info_notify(self, task_info: TaskInfo | dict[str, Any] | None) -> asyncio.Task[Any] | None:
        """
        Push handler: analyze the pushed snapshot, then claim after a short delay.

        Returns the scheduled claim task, or None when there is nothing to claim.
        """
        if not task_info:
            return None

        try:
            claimable = find_claimable(task_info)
        except TaskPayloadError as e:
            logger.warning("Ignoring malformed task push: %s", e)
            return None

        if not claimable:
            return None

        logger.info("%d tasks claimable, auto-claiming shortly", len(claimable))
        return self._schedule(lambda: self._claim_later(claimable), name="task-notify-claim")

    # ---- Internals ----

    async def _startup_check(self) -> None:
        await asyncio.sleep(self._startup_delay)
        await self.best_effort_startup_reconciliation()

    async def _claim_later(self, claimable: list[ClaimableTask]) -> None:
        await asyncio.sleep(self._notify_delay)
        await self._claimer.claim_all(claimable)

    def _schedule(
        self,
        factory: Callable[[], Coroutine[Any, Any, Any]],
        *,
        name: str,
    ) -> asyncio.Task[Any]:
        loop = asyncio.get_running_loop()
        task = loop.create_task(factory(), name=name)
        self._scheduled.add(task)
        task.add_done_callback(self._on_done)
        return task

    def _on_done(self, task: asyncio.Task[Any]) -> None:
        self._scheduled.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("%s failed", task.get_name(), exc_info=exc)
