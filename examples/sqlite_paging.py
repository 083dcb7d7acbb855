"""
SQLite Paging Examples for DB Pager

This module demonstrates how to page through a query result with Pager:
1. Walk every page of a result set using the descriptor's next offset
2. Fetch rows as dicts into a reused buffer
3. Handle an offset that does not start a page

The connection and cursor stay owned by the example code; the pager only
reads from them.
"""

import sqlite3

from db_pager import DBAPIRowSource, FetchMode, InvalidParameterError, Pager
from db_pager.logging_config import configure_logging

configure_logging()


def create_database() -> sqlite3.Connection:
    """Create an in-memory table with 23 books."""
    conn = sqlite3.connect(":memory:")
    conn.execute("CREATE TABLE books (id INTEGER PRIMARY KEY, title TEXT, year INTEGER)")
    conn.executemany(
        "INSERT INTO books (title, year) VALUES (?, ?)",
        [(f"Volume {i}", 1990 + i) for i in range(1, 24)],
    )
    return conn


# Example 1: Walk all pages
def example_walk_pages(conn: sqlite3.Connection) -> None:
    """
    Example 1: Follow next_offset from the first page to the last.

    A new cursor and pager are created per request, as a web handler would.
    """
    print("\n" + "=" * 70)
    print("Example 1: Walk all pages (limit=10)")
    print("=" * 70)

    offset = 0
    while offset is not None:
        cursor = conn.execute("SELECT id, title, year FROM books ORDER BY id")
        pager = Pager(DBAPIRowSource(cursor), from_=offset, limit=10)
        data = pager.build()

        print(
            f"\nPage {data.current_page}/{data.num_pages} "
            f"(rows {data.from_row}-{data.to_row} of {data.numrows}, "
            f"{data.remaining} on next page)"
        )
        for book in iter(lambda: pager.fetch_row(FetchMode.OBJECT), None):
            print(f"  {book.id:>3}. {book.title} ({book.year})")

        offset = data.next_offset


# Example 2: Fetch into a buffer
def example_fetch_into(conn: sqlite3.Connection) -> None:
    """Example 2: Reuse one dict for every row of the second page."""
    print("\n" + "=" * 70)
    print("Example 2: fetch_into with ASSOC rows")
    print("=" * 70)

    cursor = conn.execute("SELECT title, year FROM books ORDER BY year DESC")
    pager = Pager(DBAPIRowSource(cursor), from_=5, limit=5)
    pager.build()

    row: dict = {}
    while pager.fetch_into(row, FetchMode.ASSOC):
        print(f"  {row['year']}: {row['title']}")


# Example 3: Misaligned offset
def example_bad_offset(conn: sqlite3.Connection) -> None:
    """Example 3: An offset in the middle of a page is rejected."""
    print("\n" + "=" * 70)
    print("Example 3: Offset that does not start a page")
    print("=" * 70)

    cursor = conn.execute("SELECT id FROM books")
    try:
        Pager(DBAPIRowSource(cursor), from_=7, limit=10).build()
    except InvalidParameterError as e:
        print(f"\n✗ {e} (param={e.param})")


def main():
    conn = create_database()
    try:
        example_walk_pages(conn)
        example_fetch_into(conn)
        example_bad_offset(conn)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
