"""
Shared fixtures for pager tests.

Provides:
- In-memory result sets of configurable size
- A sqlite3 cursor over a small table
- Mock row sources for counting delegated calls
"""

import sqlite3
from unittest.mock import MagicMock

import pytest

from db_pager.clients.row_source import SequenceRowSource


def make_rows(count: int) -> list[tuple[int, str]]:
    """Rows of (id, name) with ids 0..count-1."""
    return [(i, f"item-{i}") for i in range(count)]


@pytest.fixture
def rows_95():
    """95 rows, the classic 5-page result set for limit=20."""
    return make_rows(95)


@pytest.fixture
def source_95(rows_95):
    """In-memory row source with id/name columns."""
    return SequenceRowSource(rows_95, columns=["id", "name"])


@pytest.fixture
def mock_source():
    """
    Mock row source reporting 95 rows.

    fetch_row echoes the requested index so tests can check which rows
    the pager asked for.
    """
    source = MagicMock()
    source.num_rows.return_value = 95
    source.fetch_row.side_effect = lambda index, mode: {"index": index, "mode": mode}
    source.fetch_into.return_value = True
    return source


@pytest.fixture
def sqlite_cursor():
    """Executed cursor over 7 employees ordered by id."""
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE employees (id INTEGER PRIMARY KEY, name TEXT, dept TEXT)")
    conn.executemany(
        "INSERT INTO employees (id, name, dept) VALUES (?, ?, ?)",
        [
            (1, "Ada", "eng"),
            (2, "Grace", "eng"),
            (3, "Linus", "ops"),
            (4, "Barbara", "eng"),
            (5, "Ken", "ops"),
            (6, "Margaret", "sci"),
            (7, "Dennis", "ops"),
        ],
    )
    cursor = conn.execute("SELECT id, name, dept FROM employees ORDER BY id")
    yield cursor
    conn.close()
