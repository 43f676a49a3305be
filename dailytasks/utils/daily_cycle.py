
import logging
from datetime import date
from typing import Optional

from dailytasks.db.store import LogStore, TaskStore

logger = logging.getLogger(__name__)


def date_label(day: date) -> str:
    """Human-readable day label stored with each archive, e.g. ``Fri Oct 16 2026``."""
    return day.strftime("%a %b %d %Y")


def archive_tasks(task_store: TaskStore, log_store: LogStore, today: Optional[date] = None) -> Optional[int]:
    """
    Copy the current task list into the log.

    Returns the new log entry id, or None when there was nothing to archive.
    """
    tasks = task_store.list_tasks()
    if not tasks:
        logger.info("No tasks to archive")
        return None

    label = date_label(today or date.today())
    log_id = log_store.append_log(label, [t.to_dict() for t in tasks])
    logger.info("Saved %d tasks to log for %s", len(tasks), label)
    return log_id


def reset_tasks(task_store: TaskStore) -> int:
    deleted = task_store.clear_all()
    logger.info("Reset completed. Deleted %d tasks.", deleted)
    return deleted
