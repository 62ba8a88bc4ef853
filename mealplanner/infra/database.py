"""
Process-wide store handle.

One ``Database`` is opened at start-up, handed to the repositories and closed
exactly once on shutdown. Every repository call runs inside ``session()``, which
commits the whole unit of work or rolls all of it back.
"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from mealplanner.infra.tables import Base
from mealplanner.utilities.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite ships with foreign key enforcement switched off per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """SQLite-backed store with an explicit open/close lifecycle."""

    def __init__(self, path, echo: bool = False):
        self.path = Path(path)
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> "Database":
        """Connect and create missing tables. Existing rows are never touched."""
        if self.is_open:
            return self
        engine = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            engine = create_engine(f"sqlite:///{self.path}", echo=self.echo)
            event.listen(engine, "connect", _enable_foreign_keys)
            Base.metadata.create_all(engine)
        except (OSError, SQLAlchemyError) as e:
            if engine is not None:
                engine.dispose()
            logger.error(f"Cannot open meal store at {self.path}: {e}")
            raise PersistenceError(f"Cannot open meal store at {self.path}: {e}") from e
        self._engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        logger.info(f"Meal store opened: {self.path}")
        return self

    def close(self) -> None:
        """Release every pooled connection. Safe to call more than once."""
        if not self.is_open:
            return
        self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info(f"Meal store closed: {self.path}")

    def __enter__(self) -> "Database":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Yield a session whose work is committed as a single transaction."""
        if self._session_factory is None:
            raise PersistenceError("Meal store is not open")
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Store operation failed and was rolled back: {e}")
            raise PersistenceError(f"Storage operation failed: {e}") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
