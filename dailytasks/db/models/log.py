
from sqlalchemy import Column, Integer, Text, DateTime
from sqlalchemy.sql import func
from dailytasks.db.base_class import Base
from dailytasks.db.models.task import format_timestamp


class TaskLog(Base):
    """Archived snapshot of the task list. Rows are written once and never updated."""

    __tablename__ = "task_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    date = Column(Text, nullable=False)
    tasks_data = Column(Text, nullable=False)  # JSON, opaque to the store
    created_at = Column(DateTime, server_default=func.current_timestamp())

    def to_dict(self):
        return {
            "id": self.id,
            "date": self.date,
            "tasks_data": self.tasks_data,
            "created_at": format_timestamp(self.created_at),
        }
