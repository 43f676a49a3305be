from fastapi import Request

from dailytasks.db.store import LogStore, TaskStore


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


def get_log_store(request: Request) -> LogStore:
    return request.app.state.log_store
