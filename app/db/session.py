"""Engine and session factory for the application database."""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings


def build_engine(url: str, echo: bool = False) -> Engine:
	"""Create an engine for ``url``.

	SQLite connections may be used from worker threads, and SQLite does not
	enforce foreign keys unless asked to on every connection, so both are
	configured for SQLite URLs.
	"""
	connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
	engine = create_engine(url, echo=echo, connect_args=connect_args)

	if engine.dialect.name == "sqlite":
		@event.listens_for(engine, "connect")
		def _enable_foreign_keys(dbapi_connection, connection_record):
			cursor = dbapi_connection.cursor()
			cursor.execute("PRAGMA foreign_keys=ON")
			cursor.close()

	return engine


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
