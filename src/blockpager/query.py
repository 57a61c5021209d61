from typing import Any

from sqlalchemy import Select, func, select

from blockpager.schemas.base import PaginationSchema

from .types import SupportsLimitOffset


def apply_slice[StatementT: SupportsLimitOffset](
    statement: StatementT,
    pagination: PaginationSchema,
) -> StatementT:
    """Restrict ``statement`` to the rows of the current page."""
    return statement.limit(pagination.limit).offset(pagination.offset)


def count_statement(statement: Select[Any]) -> Select[tuple[int]]:
    """Build ``SELECT count(*)`` over ``statement`` with its ordering and slice dropped."""
    subquery = statement.order_by(None).limit(None).offset(None).subquery()
    return select(func.count()).select_from(subquery)
