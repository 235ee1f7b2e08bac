"""Base service class: transaction boundaries and structured logging."""

import logging
from typing import Optional, Callable, TypeVar, Any
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.services.exceptions import ServiceError

T = TypeVar("T")


class BaseService:
    """Base class for services that wrap repository calls in transactions.

    Repositories only execute statements; a service call is the unit of work.
    Writes go through ``run_in_transaction`` and reads through ``run_read``.
    Whatever goes wrong, the session is rolled back and the original
    exception is re-raised unchanged.
    """

    def __init__(self, correlation_id: Optional[str] = None):
        self.correlation_id = correlation_id
        self.logger = logging.getLogger(self.__class__.__name__)

    def _set_repositories(self, **repositories):
        """Attach repository instances as attributes (``job_repo=...``)."""
        for name, repo in repositories.items():
            setattr(self, name, repo)

    def run_in_transaction(self, db: Session, operation: Callable[[], T]) -> T:
        """Run a write and commit it.

        Raises:
            ServiceError: e.g. ``EmptyInputError`` or a not-found error
            IntegrityError: a foreign key, unique or check constraint failed
            SQLAlchemyError: any other database failure
        """
        try:
            result = operation()
            db.commit()
        except Exception as e:
            db.rollback()
            self._log_rollback(e)
            raise
        self.log_operation("commit")
        return result

    def run_read(self, db: Session, operation: Callable[[], T]) -> T:
        """Run a read; the session is rolled back afterwards, never committed."""
        try:
            return operation()
        except Exception as e:
            self._log_rollback(e)
            raise
        finally:
            db.rollback()

    def _log_rollback(self, error: Exception) -> None:
        extra = {
            "correlation_id": self.correlation_id,
            "service": self.__class__.__name__,
            "error": str(error),
        }
        if isinstance(error, ServiceError):
            extra["error_code"] = error.error_code
            self.logger.info("Request rejected, transaction rolled back", extra=extra)
        elif isinstance(error, IntegrityError):
            self.logger.warning("Constraint violated, transaction rolled back", extra=extra)
        elif isinstance(error, SQLAlchemyError):
            self.logger.error("Database error, transaction rolled back", extra=extra)
        else:
            self.logger.exception("Unexpected error, transaction rolled back", extra=extra)

    def log_operation(self, operation: str, **kwargs: Any) -> None:
        log_data = {
            "correlation_id": self.correlation_id,
            "service": self.__class__.__name__,
            "operation": operation,
            **kwargs
        }
        self.logger.info(f"Service operation: {operation}", extra=log_data)
