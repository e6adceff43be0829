# tests/test_task_models.py

from __future__ import annotations

import pytest

from farmhand.tasks.task_models import (
    ClaimTaskRewardReply,
    RewardItem,
    TaskInfo,
    TaskInfoReply,
    TaskPayloadError,
    TaskRecord,
)

from .fakes import make_task


def test_task_record_reads_wire_fields_and_string_ids() -> None:
    rec = TaskRecord.from_payload(
        make_task("9007199254740993", progress="3", total_progress="3", share_multiple=2)
    )
    assert rec.id == 9007199254740993
    assert rec.progress == 3
    assert rec.total_progress == 3
    assert rec.share_multiple == 2
    assert rec.is_unlocked is True
    assert rec.is_claimed is False
    assert rec.rewards == ()


def test_task_record_accepts_camel_case_keys() -> None:
    rec = TaskRecord.from_payload(
        {
            "id": 7,
            "progress": 1,
            "totalProgress": 1,
            "isUnlocked": True,
            "isClaimed": False,
            "shareMultiple": 3,
            "rewards": [{"id": 1, "count": 10}],
        }
    )
    assert rec.total_progress == 1
    assert rec.share_multiple == 3
    assert rec.desc == ""
    assert rec.rewards == (RewardItem(id=1, count=10),)
    assert rec.claimable


def test_task_info_missing_and_null_categories_are_empty() -> None:
    info = TaskInfo.from_payload({"daily_tasks": [make_task(3)], "tasks": None})
    assert info.growth_tasks == ()
    assert info.tasks == ()
    assert [t.id for t in info.all_tasks()] == [3]


def test_task_info_reply_without_task_info() -> None:
    assert TaskInfoReply.from_payload({}).task_info is None
    assert TaskInfoReply.from_payload(None).task_info is None

    reply = TaskInfoReply.from_payload({"task_info": {}})
    assert reply.task_info == TaskInfo()


def test_claim_reply_items_default_empty() -> None:
    assert ClaimTaskRewardReply.from_payload({}).items == ()
    reply = ClaimTaskRewardReply.from_payload({"items": [{"id": "2", "count": "50"}]})
    assert reply.items == (RewardItem(id=2, count=50),)


@pytest.mark.parametrize("payload", [["not", "a", "dict"], "task", 42])
def test_malformed_task_info_raises(payload) -> None:
    with pytest.raises(TaskPayloadError):
        TaskInfo.from_payload(payload)


def test_bad_integer_raises_payload_error() -> None:
    with pytest.raises(TaskPayloadError):
        TaskRecord.from_payload(make_task(1, progress="lots"))
