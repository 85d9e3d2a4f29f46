import logging
from typing import Annotated
from fastapi import Depends
from sqlmodel import Session, SQLModel, create_engine
from .config import DEV, SQLITE_URL, POSTGRES_URL

logger = logging.getLogger(__name__)


def make_engine(url: str, **kwargs):
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


if DEV:
    # SQLite for development
    engine = make_engine(SQLITE_URL)
    logger.info("Using SQLite database for development")
else:
    # PostgreSQL for production
    if not POSTGRES_URL:
        raise ValueError("POSTGRES_URL environment variable is required in production")

    engine = make_engine(POSTGRES_URL)
    logger.info("Using PostgreSQL database for production")


def create_db_and_tables(bind=None):
    # registers RoundRecord and EliminationRecord on the metadata
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(bind or engine)
    logger.info("Database tables created")


def get_session():
    with Session(engine) as session:
        yield session


SessionDep = Annotated[Session, Depends(get_session)]
