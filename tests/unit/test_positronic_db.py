"""
Unit Tests for PositronicDB
===========================

The placeholder operations accept anything, log it and return nothing.
"""

import pytest
from unittest.mock import patch

from positronic.client import positronic_db
from positronic.client.positronic_db import PositronicDB, get_positronic_db


ARBITRARY_VALUES = [
    None,
    "",
    "mysql://root@localhost/app",
    {"driver": "pgsql", "host": "db", "port": 5432},
    ["not", "a", "config"],
    42,
    object(),
]


class TestPositronicDB:
    """Test the placeholder database operations."""

    @pytest.fixture
    def db(self):
        return PositronicDB()

    @pytest.mark.parametrize("config", ARBITRARY_VALUES)
    def test_test_connection_logs_config(self, db, config):
        with patch.object(positronic_db, "logger") as mock_logger:
            result = db.test_connection(config)

        assert result is None
        mock_logger.info.assert_called_once_with("Testing database connection", config=config)

    def test_test_connection_without_arguments(self, db):
        with patch.object(positronic_db, "logger") as mock_logger:
            assert db.test_connection() is None

        mock_logger.info.assert_called_once_with("Testing database connection", config=None)

    @pytest.mark.parametrize("query", ARBITRARY_VALUES)
    def test_execute_query_logs_query_and_connection(self, db, query):
        with patch.object(positronic_db, "logger") as mock_logger:
            result = db.execute_query(query, "default")

        assert result is None
        mock_logger.info.assert_called_once_with(
            "Executing query", query=query, connection="default"
        )

    def test_execute_query_without_arguments(self, db):
        with patch.object(positronic_db, "logger") as mock_logger:
            assert db.execute_query() is None

        mock_logger.info.assert_called_once_with("Executing query", query=None, connection=None)

    def test_operations_do_not_raise_with_real_logger(self, db):
        """Test the configured structlog pipeline accepts arbitrary values."""
        db.test_connection({"password": "secret", "nested": {"ssl": True}})
        db.execute_query(b"SELECT 1", object())


class TestGetPositronicDB:
    """Test the global instance accessor."""

    def test_returns_cached_instance(self, monkeypatch):
        monkeypatch.setattr(positronic_db, "_positronic_db", None)

        db = get_positronic_db()

        assert isinstance(db, PositronicDB)
        assert get_positronic_db() is db
