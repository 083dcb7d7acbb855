"""
Unit tests for row sources.

Tests cover:
- Fetch modes over sequence and mapping rows
- Out-of-range indexes
- Buffer filling
- DB-API cursors (sqlite3) paged end to end

Run with: pytest tests/unit/test_row_source.py -v
"""

import sqlite3
from types import SimpleNamespace

import pytest

from db_pager.clients.row_source import DBAPIRowSource, RowSource, SequenceRowSource
from db_pager.constants import FetchMode
from db_pager.services.pager import Pager


class TestSequenceRowSource:
    """In-memory rows."""

    def test_num_rows(self, source_95):
        assert source_95.num_rows() == 95

    def test_fetch_modes(self, source_95):
        assert source_95.fetch_row(3, FetchMode.ORDERED) == (3, "item-3")
        assert source_95.fetch_row(3, FetchMode.ASSOC) == {"id": 3, "name": "item-3"}
        assert source_95.fetch_row(3, FetchMode.OBJECT) == SimpleNamespace(id=3, name="item-3")

    def test_mode_given_as_string(self, source_95):
        assert source_95.fetch_row(0, "assoc") == {"id": 0, "name": "item-0"}

    def test_out_of_range(self, source_95):
        assert source_95.fetch_row(95) is None
        assert source_95.fetch_row(-1) is None
        assert source_95.fetch_into([], 95) is None

    def test_mapping_rows_infer_columns(self):
        source = SequenceRowSource([{"a": 1, "b": 2}, {"a": 3, "b": 4}])

        assert source.columns == ["a", "b"]
        assert source.fetch_row(1) == (3, 4)
        assert source.fetch_row(1, FetchMode.OBJECT).b == 4

    def test_mapping_row_missing_column(self):
        """Test a later mapping row without a first-row key."""
        source = SequenceRowSource([{"a": 1, "b": 2}, {"a": 3}])

        with pytest.raises(ValueError, match="missing columns: b"):
            source.fetch_row(1)
        with pytest.raises(ValueError):
            source.fetch_into({}, 1, FetchMode.ASSOC)

    def test_assoc_requires_columns(self):
        source = SequenceRowSource([(1, 2)])

        assert source.fetch_row(0) == (1, 2)
        with pytest.raises(ValueError):
            source.fetch_row(0, FetchMode.ASSOC)

    def test_column_count_mismatch(self):
        source = SequenceRowSource([(1, 2, 3)], columns=["a", "b"])

        with pytest.raises(ValueError):
            source.fetch_row(0, FetchMode.ASSOC)

    def test_fetch_into_list_replaces_contents(self, source_95):
        buffer = ["stale", "values", "here"]

        assert source_95.fetch_into(buffer, 7) is True
        assert buffer == [7, "item-7"]

    def test_fetch_into_dict(self, source_95):
        buffer = {"stale": True}

        source_95.fetch_into(buffer, 7, FetchMode.OBJECT)
        assert buffer == {"id": 7, "name": "item-7"}

        source_95.fetch_into(buffer, 8, FetchMode.ORDERED)
        assert buffer == {0: 8, 1: "item-8"}

    def test_fetch_into_rejects_other_buffers(self, source_95):
        with pytest.raises(TypeError):
            source_95.fetch_into((), 0)

    def test_satisfies_protocol(self, source_95):
        assert isinstance(source_95, RowSource)


class TestDBAPIRowSource:
    """Executed DB-API cursors."""

    def test_columns_from_description(self, sqlite_cursor):
        source = DBAPIRowSource(sqlite_cursor)

        assert source.columns == ["id", "name", "dept"]
        assert source.num_rows() == 7

    def test_random_access_on_forward_only_cursor(self, sqlite_cursor):
        source = DBAPIRowSource(sqlite_cursor)

        assert source.fetch_row(5, FetchMode.ASSOC) == {"id": 6, "name": "Margaret", "dept": "sci"}
        assert source.fetch_row(0) == (1, "Ada", "eng")

    def test_sqlite_row_factory(self):
        conn = sqlite3.connect(":memory:")
        conn.row_factory = sqlite3.Row
        cursor = conn.execute("SELECT 1 AS x, 'a' AS y UNION ALL SELECT 2, 'b'")

        source = DBAPIRowSource(cursor)

        assert source.fetch_row(1) == (2, "b")
        assert source.fetch_row(1, FetchMode.OBJECT).y == "b"
        conn.close()

    def test_cursor_without_result_set(self):
        conn = sqlite3.connect(":memory:")
        cursor = conn.execute("CREATE TABLE t (x INTEGER)")

        with pytest.raises(ValueError):
            DBAPIRowSource(cursor).num_rows()
        conn.close()

    def test_pages_through_query(self, sqlite_cursor):
        source = DBAPIRowSource(sqlite_cursor)

        pager = Pager(source, from_=3, limit=3)
        data = pager.build()
        names = [row.name for row in iter(lambda: pager.fetch_row(FetchMode.OBJECT), None)]

        assert data.current_page == 2
        assert data.num_pages == 3
        assert data.remaining == 1
        assert names == ["Barbara", "Ken", "Margaret"]

    def test_cursor_left_open(self, sqlite_cursor):
        source = DBAPIRowSource(sqlite_cursor)
        pager = Pager(source, from_=6, limit=3)
        pager.build()
        list(pager)

        # Still usable by the caller
        assert sqlite_cursor.execute("SELECT COUNT(*) FROM employees").fetchone() == (7,)
