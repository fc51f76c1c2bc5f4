"""In-memory task collection (ordered, never deleted)."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable, List, Optional

from core import Task, TaskStatus, utc_now

logger = logging.getLogger("tomatodo.tasks")


class TaskStore:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self):
        return iter(self.tasks)

    def get(self, index: Optional[int]) -> Optional[Task]:
        if index is None or not 0 <= index < len(self.tasks):
            return None
        return self.tasks[index]

    def create(
        self,
        title: str,
        description: str = "",
        tags: Iterable[str] = (),
        due_date: Optional[datetime] = None,
        now: Optional[datetime] = None,
    ) -> Optional[Task]:
        """Append a new task; blank titles are ignored."""
        title = title.strip()
        if not title:
            logger.debug("Ignoring task with empty title")
            return None
        now = now or utc_now()
        task = Task(title=title, description=description, created_at=now)
        for name in tags:
            task.add_tag(name)
        task.set_due_date(due_date, now)
        self.tasks.append(task)
        logger.info("Created task %r", task.title)
        return task

    def complete(self, index: Optional[int], now: Optional[datetime] = None) -> bool:
        task = self.get(index)
        if task is None or task.completed:
            return False
        task.complete(now)
        logger.info("Completed task %r", task.title)
        return True

    def refresh_statuses(self, now: Optional[datetime] = None) -> None:
        now = now or utc_now()
        for task in self.tasks:
            task.update_status(now)

    def find(self, query: str, start: int = 0) -> Optional[int]:
        """Index of the first task matching `query`, scanning circularly from `start`."""
        total = len(self.tasks)
        for offset in range(total):
            idx = (start + offset) % total
            if self.tasks[idx].matches(query):
                return idx
        return None

    def counts(self) -> dict:
        result = {status: 0 for status in TaskStatus}
        for task in self.tasks:
            result[task.status] += 1
        return result


def demo_tasks(now: Optional[datetime] = None) -> List[Task]:
    """Starter tasks shown on first launch (nothing is persisted)."""
    now = now or utc_now()
    samples = [
        ("Write code", "Build the terminal UI", ["coding", "learning"], now - timedelta(days=2), now + timedelta(days=5), False),
        ("Go for a run", "5 km, fresh air", ["health", "sport"], now - timedelta(days=3), now - timedelta(days=1), True),
        ("Debug the app", "Fix the rendering glitch", ["coding", "debug"], now - timedelta(hours=5), now + timedelta(days=2), False),
        ("Buy milk", "Low fat", ["shopping"], now - timedelta(days=1), now, False),
        ("Pay the bills", "Water and electricity", ["home", "urgent"], now - timedelta(days=7), now - timedelta(days=2), False),
    ]
    tasks: List[Task] = []
    for title, description, tags, created, due, done in samples:
        task = Task(title=title, description=description, created_at=created)
        for tag in tags:
            task.add_tag(tag)
        if done:
            task.complete(due)
        task.set_due_date(due, now)
        tasks.append(task)
    return tasks


__all__ = ["TaskStore", "demo_tasks"]
