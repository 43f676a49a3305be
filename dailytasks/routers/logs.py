
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends

from dailytasks.db.store import LogStore
from dailytasks.routers import deps

router = APIRouter(
    prefix="/api/logs",
    tags=["logs"],
)


@router.get("")
def list_logs(store: LogStore = Depends(deps.get_log_store)):
    return [entry.to_dict() for entry in store.list_logs()]


@router.post("")
def save_log(
    date: Optional[Any] = Body(None, embed=True),
    tasks: Optional[Any] = Body(None, embed=True),
    store: LogStore = Depends(deps.get_log_store),
):
    log_id = store.append_log(date, tasks)
    return {"success": True, "id": log_id}
