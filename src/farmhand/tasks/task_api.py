# src/farmhand/tasks/task_api.py

from __future__ import annotations

"""Thin wrappers over the TaskService RPCs."""

from collections.abc import Iterable

from ..core.ports import RpcTransport
from .task_models import BatchClaimTaskRewardReply, ClaimTaskRewardReply, TaskInfoReply

TASK_SERVICE = "gamepb.taskpb.TaskService"


async def get_task_info(transport: RpcTransport) -> TaskInfoReply:
    """Fetch the full task state. A reply without task_info means there is nothing to do."""
    reply = await transport.send(TASK_SERVICE, "TaskInfo", {})
    return TaskInfoReply.from_payload(reply)


async def claim_task_reward(
    transport: RpcTransport, task_id: int, do_shared: bool = False
) -> ClaimTaskRewardReply:
    reply = await transport.send(
        TASK_SERVICE,
        "ClaimTaskReward",
        {"id": int(task_id), "do_shared": bool(do_shared)},
    )
    return ClaimTaskRewardReply.from_payload(reply)


async def batch_claim_task_reward(
    transport: RpcTransport, task_ids: Iterable[int], do_shared: bool = False
) -> BatchClaimTaskRewardReply:
    # Not used by the claimer: per-task calls keep failures and rewards attributable.
    reply = await transport.send(
        TASK_SERVICE,
        "BatchClaimTaskReward",
        {"ids": [int(x) for x in task_ids], "do_shared": bool(do_shared)},
    )
    return BatchClaimTaskRewardReply.from_payload(reply)
