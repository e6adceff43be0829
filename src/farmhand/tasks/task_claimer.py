# src/farmhand/tasks/task_claimer.py

from __future__ import annotations

"""
Task reward claimer.

Walks a list of claim candidates strictly one at a time:
- claims each task individually (shared variant when a share multiplier is offered),
- logs the rewards granted,
- logs and skips a task whose claim fails,
- pauses between attempts so the server is not hammered.

The batch claim RPC is deliberately not used: per-task calls keep failures and
reward summaries attributable to a single task.
"""

import asyncio
import logging
from collections.abc import Iterable

from ..core.ports import ItemNameLookup, RpcTransport
from .task_api import claim_task_reward
from .task_models import ClaimableTask, ClaimOutcome
from .task_rewards import get_reward_summary

logger = logging.getLogger(__name__)


class TaskClaimer:
    """
    Sequential claim dispatcher.

    One claimer is shared by every trigger (startup check, push notifications).
    It keeps the ids currently being claimed so that overlapping passes never
    submit the same task twice at once.
    """

    def __init__(
        self,
        transport: RpcTransport,
        names: ItemNameLookup,
        *,
        claim_interval_seconds: float = 0.3,
    ) -> None:
        self._transport = transport
        self._names = names
        self._interval = max(0.0, float(claim_interval_seconds))
        self._in_flight: set[int] = set()

    @property
    def in_flight(self) -> frozenset[int]:
        return frozenset(self._in_flight)

    async def claim_all(self, claimable: Iterable[ClaimableTask]) -> list[ClaimOutcome]:
        outcomes: list[ClaimOutcome] = []

        for task in claimable:
            if task.id in self._in_flight:
                logger.debug("Task #%s is already being claimed; skipping", task.id)
                outcomes.append(
                    ClaimOutcome(task_id=task.id, desc=task.desc, claimed=False, skipped=True)
                )
                continue

            self._in_flight.add(task.id)
            try:
                outcomes.append(await self.claim_one(task))
            finally:
                self._in_flight.discard(task.id)

            await asyncio.sleep(self._interval)

        return outcomes

    async def claim_one(self, task: ClaimableTask) -> ClaimOutcome:
        """Claim a single task. Never raises on remote failure; the failure is logged."""
        use_share = task.use_share
        multiple = f" (x{task.share_multiple})" if use_share else ""

        try:
            reply = await claim_task_reward(self._transport, task.id, use_share)
        except Exception as e:
            logger.warning("Claim failed #%s: %s", task.id, e)
            return ClaimOutcome(
                task_id=task.id,
                desc=task.desc,
                claimed=False,
                use_share=use_share,
                error=str(e),
            )

        items = reply.items
        try:
            reward_str = get_reward_summary(items, self._names) if items else "none"
        except Exception:
            # The claim went through; only the display text is lost.
            logger.exception("Reward summary failed #%s", task.id)
            reward_str = f"{len(items)} items"

        logger.info("Claimed: %s%s -> %s", task.desc, multiple, reward_str)
        return ClaimOutcome(
            task_id=task.id,
            desc=task.desc,
            claimed=True,
            use_share=use_share,
            items=items,
        )
