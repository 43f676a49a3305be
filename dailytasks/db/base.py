
# Import all models here so Base.metadata.create_all can find them
from dailytasks.db.base_class import Base  # noqa: F401
from dailytasks.db.models.task import Task  # noqa: F401
from dailytasks.db.models.log import TaskLog  # noqa: F401
