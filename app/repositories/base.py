"""Base repository class for parameterized raw-SQL data access."""

import logging
from abc import ABC
from typing import Generic, TypeVar, Type, Optional, List, Any, Dict, Mapping
from sqlalchemy.orm import Session
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql.base import Executable
from sqlalchemy import bindparam, text

from app.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType], ABC):
    """Base repository class for statements built from SQL text.

    Provides:
    - Execution of ``text()`` statements with bind types taken from the
      model's table, so values such as ``Decimal`` are adapted per dialect
    - Result typing for the columns the statement returns
    - Structured logging for data operations

    Repositories never commit; the service layer owns the transaction.
    """

    def __init__(self, db: Session, model: Type[ModelType], correlation_id: Optional[str] = None):
        """Initialize repository with database session and model type.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class whose table the statements target
            correlation_id: Optional request correlation ID for logging
        """
        self.db = db
        self.model = model
        self.correlation_id = correlation_id
        self.logger = logging.getLogger(self.__class__.__name__)

    @property
    def columns(self):
        return self.model.__table__.c

    def _statement(
        self,
        sql: str,
        params: Mapping[str, Any],
        bind_columns: Optional[Mapping[str, str]] = None,
        result_columns: Optional[List[str]] = None,
        result_types: Optional[Mapping[str, Any]] = None,
    ) -> Executable:
        """Build a ``text()`` statement with typed binds and result columns.

        Args:
            sql: Statement text using ``:name`` placeholders
            params: Values that will be bound at execution
            bind_columns: Parameter name -> column name, for parameters whose
                name is not itself a column (e.g. ``p1``)
            result_columns: Returned column names to type from the table
            result_types: Explicit types for returned columns of other tables
        """
        bind_columns = bind_columns or {}
        stmt = text(sql)

        binds = []
        for name in params:
            column_name = bind_columns.get(name, name)
            if column_name in self.columns:
                binds.append(bindparam(name, type_=self.columns[column_name].type))
        if binds:
            stmt = stmt.bindparams(*binds)

        types = {
            name: self.columns[name].type for name in (result_columns or []) if name in self.columns
        }
        types.update(result_types or {})
        if types:
            stmt = stmt.columns(**types)
        return stmt

    def _execute(
        self,
        operation: str,
        sql: str,
        params: Optional[Mapping[str, Any]] = None,
        bind_columns: Optional[Mapping[str, str]] = None,
        result_columns: Optional[List[str]] = None,
        result_types: Optional[Mapping[str, Any]] = None,
    ) -> Result:
        """Execute a statement in the current session.

        Raises:
            SQLAlchemyError: On database operation failure, after logging it
        """
        params = dict(params or {})
        stmt = self._statement(sql, params, bind_columns, result_columns, result_types)
        try:
            return self.db.execute(stmt, params)
        except SQLAlchemyError as e:
            self.logger.error(
                f"Failed to {operation} {self.model.__name__}",
                extra={
                    "correlation_id": self.correlation_id,
                    "repository": self.__class__.__name__,
                    "operation": operation,
                    "error": str(e)
                }
            )
            raise

    def _log_operation(self, operation: str, **kwargs: Any) -> None:
        """Log repository operation with structured fields.

        Args:
            operation: Name of the operation being performed
            **kwargs: Additional fields to include in log
        """
        log_data: Dict[str, Any] = {
            "correlation_id": self.correlation_id,
            "repository": self.__class__.__name__,
            "operation": operation,
            **kwargs
        }
        self.logger.info(f"Repository operation: {operation}", extra=log_data)
