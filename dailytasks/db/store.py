
import json
import logging
from contextlib import contextmanager
from typing import Any, List

from sqlalchemy import asc, desc
from sqlalchemy.exc import SQLAlchemyError

from dailytasks.core.errors import NotFoundError, StorageError, ValidationError
from dailytasks.db.models.log import TaskLog
from dailytasks.db.models.task import Task

logger = logging.getLogger(__name__)


class _SessionStore:
    """
    Base for the stores: one short-lived session per operation.

    Any SQLAlchemy failure is rolled back and re-raised as StorageError
    carrying the backend's own message.
    """

    def __init__(self, session_factory):
        self._session_factory = session_factory

    @contextmanager
    def _session(self):
        db = self._session_factory()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            raise StorageError(str(getattr(e, "orig", None) or e)) from e
        except OverflowError as e:
            # sqlite3 raises this itself for integers wider than 64 bits
            db.rollback()
            raise StorageError(str(e)) from e
        finally:
            db.close()


class TaskStore(_SessionStore):

    def count_tasks(self) -> int:
        with self._session() as db:
            return db.query(Task).count()

    def list_tasks(self) -> List[Task]:
        with self._session() as db:
            return db.query(Task).order_by(asc(Task.created_at), asc(Task.id)).all()

    def add_task(self, text) -> Task:
        if not isinstance(text, str) or not text.strip():
            raise ValidationError("Task text is required")

        with self._session() as db:
            task = Task(text=text.strip(), completed=False)
            db.add(task)
            db.commit()
            db.refresh(task)
            logger.debug("Task added id=%s", task.id)
            return task

    def set_completion(self, task_id: int, completed: Any) -> None:
        with self._session() as db:
            changed = db.query(Task)\
                .filter(Task.id == task_id)\
                .update({Task.completed: bool(completed)}, synchronize_session=False)
            db.commit()
        if changed == 0:
            raise NotFoundError("Task not found")

    def delete_task(self, task_id: int) -> None:
        with self._session() as db:
            deleted = db.query(Task)\
                .filter(Task.id == task_id)\
                .delete(synchronize_session=False)
            db.commit()
        if deleted == 0:
            raise NotFoundError("Task not found")

    def clear_all(self) -> int:
        with self._session() as db:
            deleted = db.query(Task).delete(synchronize_session=False)
            db.commit()
            return deleted


class LogStore(_SessionStore):

    def list_logs(self) -> List[TaskLog]:
        with self._session() as db:
            return db.query(TaskLog).order_by(desc(TaskLog.created_at), desc(TaskLog.id)).all()

    def append_log(self, date, tasks) -> int:
        """Store a snapshot of ``tasks`` under the ``date`` label and return its id."""
        # [] and {} are valid snapshots; other falsy values are not
        if not date or (not tasks and not isinstance(tasks, (list, dict))):
            raise ValidationError("Date and tasks are required")

        tasks_data = json.dumps(tasks)
        with self._session() as db:
            entry = TaskLog(date=str(date), tasks_data=tasks_data)
            db.add(entry)
            db.commit()
            log_id = entry.id
            logger.debug("Log entry added id=%s date=%s", log_id, date)
            return log_id
