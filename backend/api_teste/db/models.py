from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict

class Priority(str, Enum):
    LOW = "baixa"
    MEDIUM = "media"
    HIGH = "alta"

class Status(str, Enum):
    PENDING = "pendente"
    IN_PROGRESS = "em_andamento"
    DONE = "concluida"

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

@dataclass(frozen=True)
class Task:
    id: int
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    status: Status = Status.PENDING
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)

@dataclass(frozen=True)
class TaskStats:
    total: int
    by_status: Dict[Status, int]
    by_priority: Dict[Priority, int]
