
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Path

from dailytasks.db.store import TaskStore
from dailytasks.routers import deps

SQLITE_MAX_INTEGER = 2**63 - 1

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
)


@router.get("")
def list_tasks(store: TaskStore = Depends(deps.get_task_store)):
    return [task.to_dict() for task in store.list_tasks()]


@router.post("")
def add_task(
    text: Optional[Any] = Body(None, embed=True),
    store: TaskStore = Depends(deps.get_task_store),
):
    task = store.add_task(text)
    # Respond only once the row is written
    return {"id": task.id, "text": task.text, "completed": False}


@router.put("/{id}")
def set_task_completion(
    id: int = Path(..., le=SQLITE_MAX_INTEGER),
    completed: Optional[Any] = Body(None, embed=True),
    store: TaskStore = Depends(deps.get_task_store),
):
    store.set_completion(id, completed)
    return {"success": True}


@router.delete("/{id}")
def delete_task(id: int = Path(..., le=SQLITE_MAX_INTEGER), store: TaskStore = Depends(deps.get_task_store)):
    store.delete_task(id)
    return {"success": True}


# Clear all tasks (daily reset, also reachable by hand)
@router.delete("")
def clear_tasks(store: TaskStore = Depends(deps.get_task_store)):
    deleted = store.clear_all()
    return {"success": True, "deleted": deleted}
