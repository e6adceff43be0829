# src/farmhand/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class TaskPayloadError(ValueError):
    """A task message could not be read as a structured record."""


def _field(raw: dict[str, Any], snake: str, camel: str | None = None) -> Any:
    if snake in raw:
        return raw[snake]
    if camel is not None:
        return raw.get(camel)
    return None


def _to_int(value: Any) -> int:
    # 64-bit ids may arrive as strings.
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise TaskPayloadError(f"expected integer, got {value!r}") from e


def _as_dict(raw: Any, what: str) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise TaskPayloadError(f"{what}: expected object, got {type(raw).__name__}")
    return raw


def _items(raw: Any) -> tuple[RewardItem, ...]:
    if not raw:
        return ()
    return tuple(RewardItem.from_payload(x) for x in raw)


@dataclass(slots=True, frozen=True)
class RewardItem:
    id: int
    count: int

    @classmethod
    def from_payload(cls, raw: Any) -> RewardItem:
        if isinstance(raw, RewardItem):
            return raw
        d = _as_dict(raw, "reward item")
        return cls(id=_to_int(d.get("id")), count=_to_int(d.get("count")))


@dataclass(slots=True, frozen=True)
class TaskRecord:
    """One task as reported by the server (poll reply or push snapshot)."""

    id: int
    progress: int = 0
    total_progress: int = 0
    is_unlocked: bool = False
    is_claimed: bool = False
    share_multiple: int = 0
    desc: str = ""
    rewards: tuple[RewardItem, ...] = ()

    @property
    def claimable(self) -> bool:
        # total_progress == 0 would make any progress "complete".
        return (
            self.is_unlocked
            and not self.is_claimed
            and self.progress >= self.total_progress
            and self.total_progress > 0
        )

    @classmethod
    def from_payload(cls, raw: Any) -> TaskRecord:
        if isinstance(raw, TaskRecord):
            return raw
        d = _as_dict(raw, "task")
        return cls(
            id=_to_int(d.get("id")),
            progress=_to_int(d.get("progress")),
            total_progress=_to_int(_field(d, "total_progress", "totalProgress")),
            is_unlocked=bool(_field(d, "is_unlocked", "isUnlocked")),
            is_claimed=bool(_field(d, "is_claimed", "isClaimed")),
            share_multiple=_to_int(_field(d, "share_multiple", "shareMultiple")),
            desc=str(d.get("desc") or ""),
            rewards=_items(d.get("rewards")),
        )


def _records(raw: Any) -> tuple[TaskRecord, ...]:
    if not raw:
        return ()
    return tuple(TaskRecord.from_payload(x) for x in raw)


@dataclass(slots=True, frozen=True)
class TaskInfo:
    """
    Task-state snapshot grouped by category.

    Missing categories are empty, never an error.
    """

    growth_tasks: tuple[TaskRecord, ...] = ()
    daily_tasks: tuple[TaskRecord, ...] = ()
    tasks: tuple[TaskRecord, ...] = ()

    @classmethod
    def from_payload(cls, raw: Any) -> TaskInfo:
        if isinstance(raw, TaskInfo):
            return raw
        d = _as_dict(raw, "task info")
        return cls(
            growth_tasks=_records(_field(d, "growth_tasks", "growthTasks")),
            daily_tasks=_records(_field(d, "daily_tasks", "dailyTasks")),
            tasks=_records(d.get("tasks")),
        )

    def all_tasks(self) -> tuple[TaskRecord, ...]:
        """Growth, then daily, then generic tasks."""
        return self.growth_tasks + self.daily_tasks + self.tasks


@dataclass(slots=True, frozen=True)
class TaskInfoReply:
    task_info: TaskInfo | None = None

    @classmethod
    def from_payload(cls, raw: Any) -> TaskInfoReply:
        d = _as_dict(raw or {}, "task info reply")
        info = _field(d, "task_info", "taskInfo")
        return cls(task_info=None if info is None else TaskInfo.from_payload(info))


@dataclass(slots=True, frozen=True)
class ClaimTaskRewardReply:
    items: tuple[RewardItem, ...] = ()

    @classmethod
    def from_payload(cls, raw: Any) -> ClaimTaskRewardReply:
        d = _as_dict(raw or {}, "claim reply")
        return cls(items=_items(d.get("items")))


@dataclass(slots=True, frozen=True)
class BatchClaimTaskRewardReply:
    items: tuple[RewardItem, ...] = ()

    @classmethod
    def from_payload(cls, raw: Any) -> BatchClaimTaskRewardReply:
        d = _as_dict(raw or {}, "batch claim reply")
        return cls(items=_items(d.get("items")))


@dataclass(slots=True, frozen=True)
class ClaimableTask:
    """
    A task that passed the claimability check, pending a claim attempt.

    rewards comes from the snapshot (usually empty), not from the claim reply.
    """

    id: int
    desc: str
    share_multiple: int
    rewards: tuple[RewardItem, ...] = ()

    @property
    def use_share(self) -> bool:
        return self.share_multiple > 1


@dataclass(slots=True, frozen=True)
class ClaimOutcome:
    task_id: int
    desc: str
    claimed: bool
    use_share: bool = False
    items: tuple[RewardItem, ...] = ()
    error: str | None = None
    skipped: bool = False
