"""
Page-bounded cursor over a row source.

The pager computes a PageDescriptor once and then serves only the rows of
that page, stopping exactly at the page boundary.

Usage:
    pager = Pager(source, from_=40, limit=20)
    data = pager.build()
    if data is not None:
        for row in pager:
            ...
"""

import logging
from collections.abc import Iterator
from typing import Any

from db_pager.clients.row_source import RowSource
from db_pager.config import settings
from db_pager.constants import FetchMode
from db_pager.exceptions import PagerNotBuiltError
from db_pager.schemas import PageDescriptor
from db_pager.services.page_calculator import compute_descriptor

logger = logging.getLogger(__name__)


class Pager:
    """
    Serve the rows of one page of a result set.

    States:
    - Initialized: constructed, build() not yet successful
    - Active: position < top, each fetch delegates to the source
    - Exhausted: position >= top, fetches return None without touching the source

    Not safe for concurrent use; one caller advances the cursor.
    """

    # The calculator is reachable from the pager class as well
    get_data = staticmethod(compute_descriptor)

    def __init__(
        self,
        source: RowSource,
        from_: int | None = 0,
        limit: int | None = None,
        numrows: int | None = None,
    ):
        """
        Initialize pager.

        Args:
            source: Row source owned by the caller
            from_: Zero-based offset of the requested page
            limit: Rows per page (default: settings.default_page_size)
            numrows: Total rows; asked from source.num_rows() when None
        """
        self.source = source
        self.from_ = from_
        self.limit = settings.default_page_size if limit is None else limit
        self.numrows = numrows

        self.descriptor: PageDescriptor | None = None
        self.position: int | None = None
        self.top: int | None = None

    def build(self) -> PageDescriptor | None:
        """
        Calculate the pagination data and position the cursor.

        Returns:
            PageDescriptor, or None when the result set is empty

        Raises:
            InvalidParameterError: If limit or from_ is invalid
            Exception: Anything raised by source.num_rows(), unchanged
        """
        self.descriptor = self.position = self.top = None

        if self.numrows is None:
            self.numrows = self.source.num_rows()

        descriptor = compute_descriptor(self.from_, self.limit, self.numrows)
        if descriptor is None:
            logger.debug(f"Nothing to paginate (numrows={self.numrows})")
            return None

        self.descriptor = descriptor
        self.position = (self.from_ or 0) - 1
        self.top = descriptor.to_row
        return descriptor

    @property
    def exhausted(self) -> bool:
        """Whether the page has been fully served."""
        self._check_built()
        return self.position + 1 >= self.top

    def fetch_row(self, mode: FetchMode | None = None) -> Any:
        """
        Fetch the next row of the page.

        Args:
            mode: Row shape, passed to the source unchanged (default: settings.default_fetch_mode)

        Returns:
            The row from the source, or None once the page is exhausted

        Raises:
            PagerNotBuiltError: If build() has not produced a descriptor
        """
        if not self._advance():
            return None
        return self.source.fetch_row(
            self.position, settings.default_fetch_mode if mode is None else mode
        )

    def fetch_into(self, buffer: list | dict, mode: FetchMode | None = None) -> bool | None:
        """
        Copy the next row of the page into buffer.

        Returns:
            Whatever source.fetch_into() returns, or None once the page is exhausted

        Raises:
            PagerNotBuiltError: If build() has not produced a descriptor
        """
        if not self._advance():
            return None
        return self.source.fetch_into(
            buffer, self.position, settings.default_fetch_mode if mode is None else mode
        )

    def __iter__(self) -> Iterator[Any]:
        while True:
            row = self.fetch_row()
            if row is None:
                return
            yield row

    def _advance(self) -> bool:
        """Move the cursor one row; False once it is past the page."""
        self._check_built()
        self.position += 1
        if self.position >= self.top:
            logger.debug(f"Page {self.descriptor.current_page} exhausted at row {self.top}")
            return False
        return True

    def _check_built(self) -> None:
        if self.descriptor is None:
            raise PagerNotBuiltError()
