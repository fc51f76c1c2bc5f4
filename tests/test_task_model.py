from datetime import datetime, timedelta, timezone

import pytest

from core import Tag, Task, TaskStatus

NOW = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


def test_new_task_defaults():
    task = Task(title="Write code")
    assert task.status is TaskStatus.TODO
    assert task.tags == set()
    assert task.due_date is None and task.finish_date is None
    assert task.created_at.tzinfo is not None


def test_update_status_from_due_date():
    task = Task(title="t")
    assert task.update_status(NOW) is TaskStatus.TODO
    task.set_due_date(NOW - timedelta(minutes=1), NOW)
    assert task.status is TaskStatus.OVERDUE
    task.set_due_date(NOW + timedelta(hours=2), NOW)
    assert task.status is TaskStatus.DUE_TODAY
    task.set_due_date(NOW + timedelta(days=3), NOW)
    assert task.status is TaskStatus.TODO
    task.set_due_date(None, NOW)
    assert task.status is TaskStatus.TODO


def test_completed_is_sticky():
    task = Task(title="t", due_date=NOW - timedelta(days=1))
    task.complete(NOW)
    assert task.completed and task.finish_date == NOW
    assert task.update_status(NOW + timedelta(days=10)) is TaskStatus.COMPLETED
    task.complete(NOW + timedelta(days=1))
    assert task.finish_date == NOW


def test_tags_are_unique_and_sorted():
    task = Task(title="t")
    task.add_tag("coding")
    task.add_tag(" coding ")
    task.add_tag("")
    task.add_tag("alpha")
    assert task.tags == {Tag("coding"), Tag("alpha")}
    assert task.tag_names() == ["alpha", "coding"]
    task.remove_tag("coding")
    assert task.tag_names() == ["alpha"]


def test_matches_title_and_description_case_insensitive():
    task = Task(title="Buy milk", description="Low FAT")
    assert task.matches("MILK")
    assert task.matches("fat")
    assert not task.matches("bread")
    assert not task.matches("   ")


def test_status_properties_and_parsing():
    assert TaskStatus.COMPLETED.icon == "✓"
    assert TaskStatus.OVERDUE.style == "status.fail"
    assert TaskStatus.from_string("due-today") is TaskStatus.DUE_TODAY
    assert TaskStatus.from_string(" todo ") is TaskStatus.TODO
    with pytest.raises(ValueError):
        TaskStatus.from_string("someday")
