from enum import Enum


class TaskStatus(Enum):
    TODO = ("TODO", "status.todo", "○")
    DUE_TODAY = ("DUE_TODAY", "status.warn", "◐")
    OVERDUE = ("OVERDUE", "status.fail", "●")
    COMPLETED = ("COMPLETED", "status.ok", "✓")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def icon(self) -> str:
        return self.value[2]

    @classmethod
    def from_string(cls, value: str) -> "TaskStatus":
        token = (value or "").strip().upper().replace(" ", "_").replace("-", "_")
        for status in cls:
            if status.value[0] == token:
                return status
        raise ValueError(f"Invalid task status: {value!r}")
