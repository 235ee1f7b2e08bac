from typing import Iterator

from sqlalchemy.orm import Session

from app.db.session import SessionLocal


def get_db() -> Iterator[Session]:
	"""One session per request, closed when the response is done."""
	db = SessionLocal()
	try:
		yield db
	finally:
		db.close()
