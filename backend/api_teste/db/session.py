from fastapi import Request
from .store import TaskStore

def init_store() -> TaskStore:
    return TaskStore()

def get_store(request: Request) -> TaskStore:
    return request.app.state.store
