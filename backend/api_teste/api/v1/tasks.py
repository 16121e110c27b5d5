import re
from typing import Optional
from fastapi import APIRouter, Depends, Query, status as http_status
from ...core.errors import TaskNotFound
from ...db.models import Priority, Status
from ...db.session import get_store
from ...db.store import TaskStore
from ...schemas.tasks import TaskDeleted, TaskIn, TaskList, TaskOut, TaskStatsOut, TaskUpdate

router = APIRouter(prefix="/tarefas", tags=["tarefas"])

_ID = re.compile(r"[0-9]+")

def _parse_id(task_id: str) -> int:
    # plain ASCII digits only; int() would also take "1_0" or " 7"
    if not _ID.fullmatch(task_id):
        raise TaskNotFound()
    return int(task_id)

@router.get("", response_model=TaskList)
def list_all(
    status: Optional[Status] = Query(None, description="Filtrar por status da tarefa"),
    prioridade: Optional[Priority] = Query(None, description="Filtrar por prioridade da tarefa"),
    store: TaskStore = Depends(get_store),
):
    """Lista todas as tarefas com filtros opcionais por status e prioridade."""
    tasks = store.list(status=status, priority=prioridade)
    return TaskList(total=len(tasks), tarefas=[TaskOut.from_task(t) for t in tasks])

# declared before /{task_id} so "stats" is not taken for an id
@router.get("/stats", response_model=TaskStatsOut)
def stats(store: TaskStore = Depends(get_store)):
    """Retorna estatísticas sobre as tarefas."""
    return TaskStatsOut.from_stats(store.stats())

@router.get("/{task_id}", response_model=TaskOut)
def get_one(task_id: str, store: TaskStore = Depends(get_store)):
    return TaskOut.from_task(store.get(_parse_id(task_id)))

@router.post("", response_model=TaskOut, status_code=http_status.HTTP_201_CREATED)
def create(body: TaskIn, store: TaskStore = Depends(get_store)):
    t = store.create(
        title=body.title,
        description=body.description,
        priority=body.priority,
        status=body.status,
    )
    return TaskOut.from_task(t)

@router.put("/{task_id}", response_model=TaskOut)
def update(task_id: str, body: TaskUpdate, store: TaskStore = Depends(get_store)):
    t = store.update(_parse_id(task_id), body.changes())
    return TaskOut.from_task(t)

@router.delete("/{task_id}", response_model=TaskDeleted)
def delete(task_id: str, store: TaskStore = Depends(get_store)):
    t = store.delete(_parse_id(task_id))
    return TaskDeleted(message="Tarefa removida com sucesso", tarefa=TaskOut.from_task(t))
