# src/farmhand/tasks/task_analyzer.py

from __future__ import annotations

"""
Claimability analysis.

Pure functions: a task-info snapshot in, an ordered list of claim candidates out.
"""

from collections.abc import Iterable
from typing import Any

from .task_models import ClaimableTask, TaskInfo, TaskRecord


def analyze_task_list(tasks: Iterable[TaskRecord]) -> list[ClaimableTask]:
    """
    Keep tasks that are unlocked, not yet claimed and fully progressed.

    Input order is preserved. A task without a description is shown as "task#<id>".
    """
    claimable: list[ClaimableTask] = []
    for task in tasks:
        if not task.claimable:
            continue
        claimable.append(
            ClaimableTask(
                id=task.id,
                desc=task.desc or f"task#{task.id}",
                share_multiple=task.share_multiple,
                rewards=task.rewards,
            )
        )
    return claimable


def collect_tasks(task_info: TaskInfo) -> tuple[TaskRecord, ...]:
    return task_info.all_tasks()


def find_claimable(task_info: TaskInfo | dict[str, Any]) -> list[ClaimableTask]:
    """Analyze every category of a snapshot (raw payloads are parsed first)."""
    return analyze_task_list(collect_tasks(TaskInfo.from_payload(task_info)))
