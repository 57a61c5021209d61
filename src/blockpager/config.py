from pydantic import ConfigDict, Field

from blockpager.schemas.base import BaseSchema


class PaginatorConfig(BaseSchema):
    """Defaults a :class:`~blockpager.paginator.Paginator` falls back to."""

    model_config = ConfigDict(frozen=True, extra='forbid')

    entries_per_page: int = Field(default=10, gt=0)
    pages_per_block: int = Field(default=10, gt=0)
    allow_empty: bool = False
