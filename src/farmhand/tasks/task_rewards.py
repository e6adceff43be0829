# src/farmhand/tasks/task_rewards.py

from __future__ import annotations

from collections.abc import Iterable

from ..core.ports import ItemNameLookup
from ..game.items import EXP_ITEM_ID, GOLD_ITEM_ID
from .task_models import RewardItem


def get_reward_summary(items: Iterable[RewardItem], names: ItemNameLookup) -> str:
    """
    Human-readable reward list, entries joined by "/".

    Gold and exp get a short entry *in addition to* the generic "name(id)xN" one,
    so those two ids show up twice.
    """
    summary: list[str] = []
    for item in items:
        if item.id == GOLD_ITEM_ID:
            summary.append(f"gold:{item.count}")
        elif item.id == EXP_ITEM_ID:
            summary.append(f"exp:{item.count}")
        summary.append(f"{names.get_item_name(item.id)}({item.id})x{item.count}")
    return "/".join(summary)
