import logging
from collections.abc import Sequence
from typing import Any

from blockpager.config import PaginatorConfig
from blockpager.schemas.base import PageSchema, PaginationSchema

log = logging.getLogger(__name__)


def compute(
    total_entries: int,
    entries_per_page: int,
    pages_per_block: int,
    requested_page: int,
    *,
    allow_empty: bool = False,
) -> PaginationSchema:
    """Lay ``total_entries`` out into pages and blocks around ``requested_page``.

    Raises:
        InvalidDivisorError: ``entries_per_page`` or ``pages_per_block`` is not positive.
        NonPositiveTotalError: ``total_entries`` is negative, or zero without ``allow_empty``.
    """
    return PaginationSchema.calculate(
        total_entries=total_entries,
        entries_per_page=entries_per_page,
        pages_per_block=pages_per_block,
        requested_page=requested_page,
        allow_empty=allow_empty,
    )


class Paginator:
    """Computes pagination with configured page and block sizes."""

    def __init__(self, config: PaginatorConfig | None = None, **overrides: Any) -> None:
        config = config or PaginatorConfig()
        if overrides:
            config = PaginatorConfig.model_validate({**config.model_dump(), **overrides})
        self.config = config
        log.debug('Paginator configured with %s', config)

    def compute(
        self,
        total_entries: int,
        requested_page: int = 1,
        *,
        entries_per_page: int | None = None,
        pages_per_block: int | None = None,
        allow_empty: bool | None = None,
    ) -> PaginationSchema:
        return compute(
            total_entries,
            self.config.entries_per_page if entries_per_page is None else entries_per_page,
            self.config.pages_per_block if pages_per_block is None else pages_per_block,
            requested_page,
            allow_empty=self.config.allow_empty if allow_empty is None else allow_empty,
        )

    def paginate_sequence[ItemT](
        self,
        items: Sequence[ItemT],
        requested_page: int = 1,
    ) -> PageSchema[ItemT]:
        meta = self.compute(len(items), requested_page)
        return PageSchema(meta=meta, data=list(meta.slice_of(items)))
