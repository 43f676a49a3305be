
from sqlalchemy import Column, Integer, Text, Boolean, DateTime
from sqlalchemy.sql import func
from dailytasks.db.base_class import Base

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(value):
    if value is None:
        return None
    return value.strftime(TIMESTAMP_FORMAT)


class Task(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)
    completed = Column(Boolean, default=False, server_default="0")
    created_at = Column(DateTime, server_default=func.current_timestamp())

    def to_dict(self):
        return {
            "id": self.id,
            "text": self.text,
            "completed": bool(self.completed),
            "created_at": format_timestamp(self.created_at),
        }
