from datetime import datetime, timedelta, timezone

from core import Task, TaskStatus
from core.desktop.devtools.application.task_store import TaskStore, demo_tasks

NOW = datetime(2024, 5, 10, 12, 0, tzinfo=timezone.utc)


def test_create_appends_todo_task():
    store = TaskStore()
    task = store.create("  Buy milk ", "2%", tags=["shopping"], now=NOW)
    assert len(store) == 1
    assert task.title == "Buy milk"
    assert task.description == "2%"
    assert task.status is TaskStatus.TODO
    assert task.created_at == NOW
    assert task.tag_names() == ["shopping"]


def test_create_ignores_blank_title():
    store = TaskStore()
    assert store.create("   ", "text") is None
    assert len(store) == 0


def test_create_with_past_due_date_is_overdue():
    store = TaskStore()
    task = store.create("late", due_date=NOW - timedelta(hours=1), now=NOW)
    assert task.status is TaskStatus.OVERDUE


def test_get_out_of_range_returns_none():
    store = TaskStore([Task(title="a")])
    assert store.get(0).title == "a"
    assert store.get(None) is None
    assert store.get(1) is None
    assert store.get(-1) is None


def test_complete_marks_task_once():
    store = TaskStore([Task(title="a")])
    assert store.complete(0, NOW) is True
    assert store.get(0).status is TaskStatus.COMPLETED
    assert store.complete(0, NOW) is False
    assert store.complete(5, NOW) is False


def test_refresh_statuses_keeps_completed():
    done = Task(title="done", due_date=NOW - timedelta(days=2))
    done.complete(NOW - timedelta(days=3))
    pending = Task(title="pending", due_date=NOW + timedelta(hours=1))
    store = TaskStore([done, pending])
    store.refresh_statuses(NOW + timedelta(hours=2))
    assert done.status is TaskStatus.COMPLETED
    assert pending.status is TaskStatus.OVERDUE


def test_find_scans_circularly_from_start():
    store = TaskStore([Task(title="milk"), Task(title="bread"), Task(title="more milk")])
    assert store.find("milk") == 0
    assert store.find("milk", start=1) == 2
    assert store.find("milk", start=3) == 0
    assert store.find("cheese") is None
    assert TaskStore().find("milk") is None


def test_counts_by_status():
    store = TaskStore(demo_tasks(NOW))
    counts = store.counts()
    assert sum(counts.values()) == 5
    assert counts[TaskStatus.COMPLETED] == 1
    assert counts[TaskStatus.OVERDUE] == 1


def test_demo_tasks_shape():
    tasks = demo_tasks(NOW)
    assert [t.title for t in tasks][:2] == ["Write code", "Go for a run"]
    run = tasks[1]
    assert run.completed and run.finish_date == run.due_date
    assert all(t.tags for t in tasks)
    assert tasks[3].status is TaskStatus.DUE_TODAY


def test_create_keeps_description_as_typed():
    store = TaskStore()
    task = store.create(" Buy milk ", "  2%, not skim ")
    assert task.title == "Buy milk"
    assert task.description == "  2%, not skim "
