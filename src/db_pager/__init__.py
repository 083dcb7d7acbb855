"""
DB Pager

Pagination metadata and page-bounded row cursors for linear result sets.

Computes the current page, page offsets, neighbouring pages and the row
window to serve, then walks only that window of a caller-owned row source.
"""

__version__ = "0.5.2"
__author__ = "DB Pager Team"

from db_pager.clients.row_source import DBAPIRowSource, RowSource, SequenceRowSource
from db_pager.constants import FetchMode
from db_pager.exceptions import InvalidParameterError, PagerError, PagerNotBuiltError
from db_pager.schemas import PageDescriptor
from db_pager.services.page_calculator import compute_descriptor
from db_pager.services.pager import Pager

__all__ = [
    "DBAPIRowSource",
    "FetchMode",
    "InvalidParameterError",
    "PageDescriptor",
    "Pager",
    "PagerError",
    "PagerNotBuiltError",
    "RowSource",
    "SequenceRowSource",
    "compute_descriptor",
    "__version__",
]
