from .config import PaginatorConfig
from .exceptions.common import InvalidDivisorError, NonPositiveTotalError, PaginationError
from .paginator import Paginator, compute
from .query import apply_slice, count_statement
from .schemas.base import PageSchema, PaginationSchema

__all__ = [
    'InvalidDivisorError',
    'NonPositiveTotalError',
    'PageSchema',
    'PaginationError',
    'PaginationSchema',
    'Paginator',
    'PaginatorConfig',
    'apply_slice',
    'compute',
    'count_statement',
]
