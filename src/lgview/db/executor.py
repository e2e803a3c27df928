"""Query execution against the database session."""

from __future__ import annotations

import logging

from sqlalchemy import Result, Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class DataRetrievalError(RuntimeError):
    """Raised when the data store fails to execute a query."""


class QueryExecutor:
    """Runs built queries on a session.

    Failures are not retried; the caller gets a DataRetrievalError with the
    store error as its cause.
    """

    def __init__(self, session: Session):
        """Initialize executor.

        Args:
            session: Database session to run queries on.
        """
        self.session = session

    def execute(self, query: Select) -> Result:
        """Execute a query.

        Args:
            query: Select statement to run.

        Returns:
            Forward-only result; rows support positional access.

        Raises:
            DataRetrievalError: If the store raises while executing.
        """
        try:
            return self.session.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Query execution failed: {e}")
            raise DataRetrievalError("Error retrieving data.") from e
