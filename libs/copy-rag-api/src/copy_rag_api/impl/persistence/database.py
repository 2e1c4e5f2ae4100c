"""SQLAlchemy engine and session handling."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.exc import DisconnectionError, InterfaceError, OperationalError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from copy_core_lib.errors import PersistenceUnavailableError
from copy_rag_api.impl.persistence.orm_models import Base
from copy_rag_api.impl.settings.database_settings import DatabaseSettings

logger = logging.getLogger(__name__)

# Errors that mean the store cannot be reached, as opposed to a bad statement.
UNAVAILABLE_ERRORS = (OperationalError, InterfaceError, DisconnectionError)


class Database:
    """Own the engine and hand out transactional sessions."""

    def __init__(self, settings: DatabaseSettings):
        self._settings = settings
        url = make_url(settings.url)
        engine_kwargs = {"echo": settings.echo}
        if url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # One shared connection, otherwise every session sees its own empty database.
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        self.engine = create_engine(url, **engine_kwargs)
        self._session_factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def create_all(self) -> None:
        """Create every missing table."""
        try:
            Base.metadata.create_all(bind=self.engine)
        except UNAVAILABLE_ERRORS as exc:
            raise PersistenceUnavailableError(f"Could not create schema: {exc}") from exc
        logger.info("Database schema ready at %s", self.engine.url.render_as_string(hide_password=True))

    def dispose(self) -> None:
        self.engine.dispose()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Yield a session that commits on success and rolls back on error.

        Connectivity failures surface as ``PersistenceUnavailableError``.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except UNAVAILABLE_ERRORS as exc:
            session.rollback()
            raise PersistenceUnavailableError(str(exc)) from exc
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
