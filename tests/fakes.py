# tests/fakes.py

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from farmhand.core.ports import Payload

Reply = Payload | BaseException | Callable[[Payload], Any]


def make_task(task_id: int, **overrides: Any) -> dict[str, Any]:
    """Wire-shaped task record that is claimable unless overridden."""
    task: dict[str, Any] = {
        "id": task_id,
        "progress": 5,
        "total_progress": 5,
        "is_unlocked": True,
        "is_claimed": False,
        "share_multiple": 1,
        "desc": f"Task {task_id}",
    }
    task.update(overrides)
    return task


@dataclass(slots=True)
class RpcCall:
    service: str
    method: str
    payload: Payload
    at: float


@dataclass(slots=True)
class FakeTransport:
    """
    Scripted RpcTransport.

    replies maps method name -> reply dict, exception instance, or a callable
    receiving the request payload (and returning either of the former).
    Tracks call times and how many calls were in flight at once.
    """

    replies: dict[str, Reply] = field(default_factory=dict)
    latency: float = 0.0
    calls: list[RpcCall] = field(default_factory=list)
    active: int = 0
    max_active: int = 0

    async def send(self, service: str, method: str, payload: Payload) -> Payload:
        loop = asyncio.get_running_loop()
        self.calls.append(RpcCall(service, method, dict(payload), loop.time()))
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.latency:
                await asyncio.sleep(self.latency)
            reply = self.replies.get(method, {})
            if not isinstance(reply, BaseException) and callable(reply):
                reply = reply(payload)
            if isinstance(reply, BaseException):
                raise reply
            return reply
        finally:
            self.active -= 1

    def calls_to(self, method: str) -> list[RpcCall]:
        return [c for c in self.calls if c.method == method]

    def claimed_ids(self) -> list[int]:
        return [c.payload["id"] for c in self.calls_to("ClaimTaskReward")]
