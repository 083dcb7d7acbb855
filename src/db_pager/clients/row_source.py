"""
Row sources consumed by the pager.

A row source answers three questions: how many rows exist, what is the row
at a zero-based index, and can that row be copied into a caller buffer.
The pager only borrows a source; opening, querying and closing it stay with
the caller.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from types import SimpleNamespace
from typing import Any, Protocol, runtime_checkable

from db_pager.constants import ERROR_BUFFER_TYPE, FetchMode

logger = logging.getLogger(__name__)


@runtime_checkable
class RowSource(Protocol):
    """Capabilities the pager needs from a result set."""

    def num_rows(self) -> int: ...

    def fetch_row(self, index: int, mode: FetchMode = FetchMode.ORDERED) -> Any: ...

    def fetch_into(
        self, buffer: list | dict, index: int, mode: FetchMode = FetchMode.ORDERED
    ) -> bool | None: ...


class SequenceRowSource:
    """
    Row source over rows already held in memory.

    Rows may be sequences (tuples, lists, ``sqlite3.Row``) or mappings.
    Column names come from ``columns`` or, for mapping rows, from the keys
    of the first row. They are required for ASSOC and OBJECT fetches of
    sequence rows.
    """

    def __init__(self, rows: Iterable[Any], columns: Sequence[str] | None = None):
        self._rows = list(rows)
        self._columns = list(columns) if columns is not None else None

    @property
    def rows(self) -> list[Any]:
        return self._rows

    @property
    def columns(self) -> list[str] | None:
        rows = self.rows
        if self._columns is None and rows and isinstance(rows[0], Mapping):
            return list(rows[0].keys())
        return self._columns

    def num_rows(self) -> int:
        return len(self.rows)

    def fetch_row(self, index: int, mode: FetchMode = FetchMode.ORDERED) -> Any:
        """
        Return the row at a zero-based index.

        Args:
            index: Absolute row index
            mode: Shape of the returned row

        Returns:
            Row shaped by mode, or None past the end of the result set
        """
        rows = self.rows
        if index < 0 or index >= len(rows):
            return None
        return self._shape(rows[index], FetchMode(mode))

    def fetch_into(
        self, buffer: list | dict, index: int, mode: FetchMode = FetchMode.ORDERED
    ) -> bool | None:
        """
        Copy the row at a zero-based index into a caller buffer.

        Lists receive the row values; dicts receive the row keyed by column
        name (or by position for ORDERED rows).

        Returns:
            True once the buffer is filled, None past the end of the result set

        Raises:
            TypeError: If buffer is neither a list nor a dict
        """
        if not isinstance(buffer, (list, dict)):
            raise TypeError(ERROR_BUFFER_TYPE.format(type_name=type(buffer).__name__))

        row = self.fetch_row(index, mode)
        if row is None:
            return None

        if isinstance(row, SimpleNamespace):
            row = vars(row)

        if isinstance(buffer, list):
            buffer[:] = row.values() if isinstance(row, dict) else row
        else:
            buffer.clear()
            buffer.update(row if isinstance(row, dict) else enumerate(row))
        return True

    def _shape(self, row: Any, mode: FetchMode) -> Any:
        """Convert a stored row to the requested fetch mode."""
        columns = self.columns

        if isinstance(row, Mapping):
            keys = columns if columns is not None else list(row.keys())
            missing = [key for key in keys if key not in row]
            if missing:
                raise ValueError(f"Row is missing columns: {', '.join(map(str, missing))}")
            values = tuple(row[key] for key in keys)
        else:
            values = tuple(row)

        if mode == FetchMode.ORDERED:
            return values

        if columns is None:
            raise ValueError(f"Column names are required for {mode.value} fetches")
        if len(columns) != len(values):
            raise ValueError(
                f"Row has {len(values)} values but {len(columns)} columns are defined"
            )

        assoc = dict(zip(columns, values))
        if mode == FetchMode.ASSOC:
            return assoc
        return SimpleNamespace(**assoc)


class DBAPIRowSource(SequenceRowSource):
    """
    Row source over an executed DB-API 2.0 cursor (sqlite3, psycopg, ...).

    Many drivers only offer forward-only cursors and report ``rowcount`` as
    -1 for SELECT statements, so the result is materialised on first access.
    The cursor is never closed here.
    """

    def __init__(self, cursor: Any):
        super().__init__([])
        self.cursor = cursor
        self._loaded = False

    def _load(self) -> None:
        if self._loaded:
            return
        if self.cursor.description is None:
            raise ValueError("Cursor has no result set. Execute a query that returns rows.")

        self._columns = [column[0] for column in self.cursor.description]
        self._rows = list(self.cursor.fetchall())
        self._loaded = True
        logger.debug(f"Materialised {len(self._rows)} rows ({len(self._columns)} columns)")

    @property
    def rows(self) -> list[Any]:
        self._load()
        return self._rows

    @property
    def columns(self) -> list[str] | None:
        self._load()
        return self._columns
