# products_api/db.py

from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Database:
    """Owns the engine and session factory for one storage connection string.

    Built once by the caller, handed to ``create_app`` and reached by request
    handlers through ``app.state.database``.
    """

    def __init__(self, url: str, **engine_kwargs):
        self.url = url
        if url.startswith("sqlite"):
            # SQLite connections are shared with the worker threadpool.
            engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
            if url in ("sqlite://", "sqlite:///:memory:"):
                engine_kwargs.setdefault("poolclass", StaticPool)
        self.engine = create_engine(url, **engine_kwargs)
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, bind=self.engine
        )

    def ping(self) -> None:
        with self.engine.connect() as connection:
            connection.execute(text("SELECT 1"))

    def create_tables(self) -> None:
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        Base.metadata.drop_all(bind=self.engine)

    def dispose(self) -> None:
        self.engine.dispose()

    def __repr__(self):
        return f"<Database(url='{self.engine.url!r}')>"


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.database.SessionLocal()
    try:
        yield db
    finally:
        db.close()
