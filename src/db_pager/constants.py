"""
Constants used throughout the package.

Includes fetch modes, paging defaults and error message templates.
"""

from enum import Enum

# ============================================================================
# Fetch Modes
# ============================================================================


class FetchMode(str, Enum):
    """Shape of the rows returned by a row source."""

    ORDERED = "ordered"  # Positional values (tuple)
    ASSOC = "assoc"  # Column name -> value (dict)
    OBJECT = "object"  # Attribute access (SimpleNamespace)


# ============================================================================
# Paging Defaults
# ============================================================================

DEFAULT_PAGE_SIZE = 20
MIN_PAGE_SIZE = 1
DEFAULT_OFFSET = 0

# ============================================================================
# Error Messages
# ============================================================================

ERROR_INVALID_PARAM = 'wrong "{param}" param'
ERROR_NOT_BUILT = "Pager has no descriptor. Call build() and check it is not None first."
ERROR_BUFFER_TYPE = "Row buffer must be a list or dict, got {type_name}"
