"""
PositronicDB
============

Placeholder database operations. Both operations accept any value, record
it in the application log and return nothing. No connection is opened and
no query is run.
"""

from typing import Any, Optional

from positronic.config.logging import get_logger

logger = get_logger(__name__)


class PositronicDB:
    """Database operations exposed to the welcome console."""

    def test_connection(self, config: Any = None) -> None:
        """Log a connection test request."""
        logger.info("Testing database connection", config=config)

    def execute_query(self, query: Any = None, connection: Any = None) -> None:
        """Log a query execution request."""
        logger.info("Executing query", query=query, connection=connection)


_positronic_db: Optional[PositronicDB] = None


def get_positronic_db() -> PositronicDB:
    """Get the global PositronicDB instance."""
    global _positronic_db
    if _positronic_db is None:
        _positronic_db = PositronicDB()
    return _positronic_db
