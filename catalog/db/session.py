"""Database session management."""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from .models import Base

class SessionManager:
    """Manages database sessions."""

    def __init__(self, database_url: str):
        """Initialize session manager with database URL."""
        self.database_url = database_url
        self.engine = create_engine(database_url)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.engine
        )
        self.logger = logging.getLogger(__name__)

    def create_tables(self) -> None:
        """Create missing tables for all known models."""
        self.logger.debug(f"Creating tables on {self.engine.url}")
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        """Get a new database session."""
        session = self.SessionLocal()
        self.logger.debug(f"Created new session: {id(session)}")
        return session

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Provide a transactional scope around a series of operations.

        Each call opens its own session, so scopes may be nested or used
        from several threads. The session is committed when the block
        exits cleanly and rolled back when it raises.
        """
        session = self.get_session()
        self.logger.debug(f"Entering scope with session: {id(session)}")
        try:
            yield session
            self.logger.debug("Committing session")
            session.commit()
        except Exception:
            self.logger.debug("Rolling back session")
            session.rollback()
            raise
        finally:
            self.logger.debug(f"Closing session: {id(session)}")
            session.close()
