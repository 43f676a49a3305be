
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker


def make_engine(database_uri: str):
    # The scheduler and FastAPI's threadpool share one SQLite engine
    return create_engine(
        database_uri,
        connect_args={"check_same_thread": False},
    )


def make_session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
