import sys
import os

sys.path.append(os.getcwd())

from dailytasks.core.config import settings
from dailytasks.db.session import make_engine
from dailytasks.db.base import Base  # Imports all models so they are registered


def create_tables():
    print(f"Creating all tables in {settings.DATABASE_PATH}...")
    engine = make_engine(settings.SQLALCHEMY_DATABASE_URI)
    Base.metadata.create_all(bind=engine)
    engine.dispose()
    print("Tables created.")

if __name__ == "__main__":
    create_tables()
