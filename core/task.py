from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional, Set

from .status import TaskStatus


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Tag:
    name: str


@dataclass
class Task:
    """A single todo item.

    Status is stored, and only `update_status` / `complete` change it.
    COMPLETED is sticky: recomputation never downgrades a completed task.
    """

    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    tags: Set[Tag] = field(default_factory=set)
    created_at: datetime = field(default_factory=utc_now)
    due_date: Optional[datetime] = None
    finish_date: Optional[datetime] = None

    @property
    def completed(self) -> bool:
        return self.status is TaskStatus.COMPLETED

    def add_tag(self, name: str) -> None:
        name = name.strip()
        if name:
            self.tags.add(Tag(name))

    def remove_tag(self, name: str) -> None:
        self.tags = {tag for tag in self.tags if tag.name != name}

    def tag_names(self) -> List[str]:
        return sorted(tag.name for tag in self.tags)

    def complete(self, now: Optional[datetime] = None) -> None:
        if self.completed:
            return
        self.status = TaskStatus.COMPLETED
        self.finish_date = now or utc_now()

    def set_due_date(self, due_date: Optional[datetime], now: Optional[datetime] = None) -> None:
        self.due_date = due_date
        self.update_status(now)

    def update_status(self, now: Optional[datetime] = None) -> TaskStatus:
        if self.completed:
            return self.status
        now = now or utc_now()
        due = self.due_date
        if due is None:
            self.status = TaskStatus.TODO
        elif due < now:
            self.status = TaskStatus.OVERDUE
        elif due.astimezone(timezone.utc).date() == now.astimezone(timezone.utc).date():
            self.status = TaskStatus.DUE_TODAY
        else:
            self.status = TaskStatus.TODO
        return self.status

    def matches(self, query: str) -> bool:
        needle = query.strip().lower()
        if not needle:
            return False
        return needle in self.title.lower() or needle in self.description.lower()
