from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from ..db.models import Priority, Status, Task, TaskStats

class TaskIn(BaseModel):
    title: str = Field(..., alias="titulo", min_length=1, description="Título da tarefa")
    description: str = Field("", alias="descricao", description="Descrição detalhada da tarefa")
    priority: Priority = Field(Priority.MEDIUM, alias="prioridade")
    status: Status = Status.PENDING

    class Config:
        populate_by_name = True

class TaskUpdate(BaseModel):
    title: Optional[str] = Field(None, alias="titulo", min_length=1)
    description: Optional[str] = Field(None, alias="descricao")
    priority: Optional[Priority] = Field(None, alias="prioridade")
    status: Optional[Status] = None

    class Config:
        populate_by_name = True

    def changes(self) -> dict:
        """Fields the client actually sent, without explicit nulls."""
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}

class TaskOut(BaseModel):
    id: int
    title: str = Field(..., alias="titulo")
    description: str = Field(..., alias="descricao")
    priority: Priority = Field(..., alias="prioridade")
    status: Status
    created_at: datetime = Field(..., alias="criadaEm")
    updated_at: datetime = Field(..., alias="atualizadaEm")

    class Config:
        from_attributes = True
        populate_by_name = True

    @classmethod
    def from_task(cls, task: Task) -> "TaskOut":
        return cls.model_validate(task)

class TaskList(BaseModel):
    total: int = Field(..., description="Total de tarefas encontradas")
    tarefas: List[TaskOut]

class TaskDeleted(BaseModel):
    message: str
    tarefa: TaskOut

class TaskStatsOut(BaseModel):
    total: int
    porStatus: Dict[str, int]
    porPrioridade: Dict[str, int]

    @classmethod
    def from_stats(cls, stats: TaskStats) -> "TaskStatsOut":
        return cls(
            total=stats.total,
            porStatus={s.value: n for s, n in stats.by_status.items()},
            porPrioridade={p.value: n for p, n in stats.by_priority.items()},
        )
