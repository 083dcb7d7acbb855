"""
Pydantic schemas for pagination data.

Field aliases reproduce the keys of the classic pager data array
(``current``, ``numpages``, ``pages``...), so ``model_dump(by_alias=True)``
can feed templates written against that layout.
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class PageDescriptor(BaseModel):
    """Pagination metadata for one (from, limit, numrows) triple."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )

    current_page: int = Field(..., ge=1, alias="current", description="Page containing 'from'")
    num_pages: int = Field(..., ge=1, alias="numpages", description="Total number of pages")
    page_offsets: Mapping[int, int] = Field(
        ...,
        alias="pages",
        description="Page number -> zero-based row offset where the page starts",
    )
    prev_offset: int | None = Field(
        None, alias="prev", description="Offset of the previous page (None on the first page)"
    )
    next_offset: int | None = Field(
        None, alias="next", description="Offset of the next page (None on the last page)"
    )
    remaining: int = Field(
        ..., ge=0, alias="remain", description="Rows available in the page after this one"
    )
    from_row: int = Field(..., ge=1, alias="from", description="1-based first row of the page")
    to_row: int = Field(..., ge=1, alias="to", description="Row where fetching stops")
    numrows: int = Field(..., ge=1, description="Total number of rows")
    limit: int = Field(..., ge=1, description="Rows per page")

    @field_validator("page_offsets")
    @classmethod
    def freeze_page_offsets(cls, v: Mapping[int, int]) -> Mapping[int, int]:
        """Store offsets as a read-only mapping."""
        return MappingProxyType(dict(v))

    @field_serializer("page_offsets")
    def dump_page_offsets(self, v: Mapping[int, int]) -> dict[int, int]:
        return dict(v)

    @property
    def offset(self) -> int:
        """Zero-based offset of the current page."""
        return self.from_row - 1

    @property
    def is_first_page(self) -> bool:
        return self.current_page == 1

    @property
    def is_last_page(self) -> bool:
        return self.current_page == self.num_pages
