"""
Page calculator.

Turns a starting offset, a page size and a total row count into a
PageDescriptor. Pure and deterministic; cheap enough that nothing is cached.
"""

import logging

from db_pager.exceptions import InvalidParameterError
from db_pager.schemas import PageDescriptor

logger = logging.getLogger(__name__)


def compute_descriptor(
    from_: int | None,
    limit: int | None,
    numrows: int | None,
) -> PageDescriptor | None:
    """
    Build pagination metadata for a result set.

    Args:
        from_: Zero-based offset of the requested page (None/0 means first page)
        limit: Rows per page
        numrows: Total rows in the result set

    Returns:
        PageDescriptor, or None when there is nothing to paginate
        (numrows missing, zero or negative)

    Raises:
        InvalidParameterError: If limit <= 0 ("limit") or from_ is not the
            offset of one of the pages ("from")
    """
    if limit is None or limit <= 0:
        raise InvalidParameterError("limit")

    if not numrows or numrows < 0:
        return None
    from_ = from_ or 0

    num_pages = -(-numrows // limit)
    page_offsets = {page: limit * (page - 1) for page in range(1, num_pages + 1)}

    # from_ must point exactly at one page
    current_page = next(
        (page for page, offset in page_offsets.items() if offset == from_),
        None,
    )
    if current_page is None:
        raise InvalidParameterError("from")

    prev_offset = from_ - limit
    next_offset = from_ + limit

    if current_page == num_pages:
        remaining = 0
        to_row = numrows
    else:
        if current_page == num_pages - 1:
            remaining = numrows - limit * (num_pages - 1)
        else:
            remaining = limit
        to_row = current_page * limit

    descriptor = PageDescriptor(
        current_page=current_page,
        num_pages=num_pages,
        page_offsets=page_offsets,
        prev_offset=prev_offset if prev_offset >= 0 else None,
        next_offset=next_offset if next_offset < numrows else None,
        remaining=remaining,
        from_row=from_ + 1,
        to_row=to_row,
        numrows=numrows,
        limit=limit,
    )
    logger.debug(
        f"Page {current_page}/{num_pages} computed: "
        f"rows {descriptor.from_row}-{to_row} of {numrows} (limit={limit})"
    )
    return descriptor
