from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from blockpager.utils.pagination import calculate_pagination

DataT = TypeVar('DataT')


class BaseSchema(BaseModel):
    model_config = ConfigDict(frozen=True)


class PaginationSchema(BaseSchema):
    """Page, block and slice values for one page of a collection."""

    total_entries: int = Field(ge=0)
    entries_per_page: int = Field(gt=0)
    pages_per_block: int = Field(gt=0)

    total_pages: int = Field(ge=1)
    current_page: int = Field(ge=1)
    prev_page: int | None = None
    next_page: int | None = None

    start_of_block: int = Field(ge=1)
    end_of_block: int = Field(ge=1)
    prev_block_page: int | None = None
    next_block_page: int | None = None

    start_of_slice: int = Field(ge=0)
    end_of_slice: int
    length_of_slice: int = Field(ge=0)

    @classmethod
    def calculate(
        cls,
        *,
        total_entries: int,
        entries_per_page: int,
        pages_per_block: int,
        requested_page: int,
        allow_empty: bool = False,
    ) -> Self:
        values = calculate_pagination(
            total_entries,
            entries_per_page,
            pages_per_block,
            requested_page,
            allow_empty=allow_empty,
        )
        return cls(**values)

    def for_page(self, page: int) -> Self:
        """Recompute for another page of the same collection."""
        return self.calculate(
            total_entries=self.total_entries,
            entries_per_page=self.entries_per_page,
            pages_per_block=self.pages_per_block,
            requested_page=page,
            allow_empty=self.total_entries == 0,
        )

    @property
    def has_prev(self) -> bool:
        return self.prev_page is not None

    @property
    def has_next(self) -> bool:
        return self.next_page is not None

    @property
    def block_pages(self) -> range:
        return range(self.start_of_block, self.end_of_block + 1)

    @property
    def offset(self) -> int:
        return self.start_of_slice

    @property
    def limit(self) -> int:
        return self.length_of_slice

    @property
    def first_entry(self) -> int:
        """1-based position of the first entry on the page, 0 when empty."""
        return self.start_of_slice + 1 if self.length_of_slice else 0

    @property
    def last_entry(self) -> int:
        return self.end_of_slice + 1

    def slice_of[ItemT](self, items: Sequence[ItemT]) -> Sequence[ItemT]:
        return items[self.start_of_slice : self.end_of_slice + 1]


class PageSchema(BaseSchema, Generic[DataT]):
    meta: PaginationSchema
    data: list[DataT]
