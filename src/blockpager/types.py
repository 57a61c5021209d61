from typing import Protocol, Self


class SupportsLimitOffset(Protocol):
    """Statements that accept ``limit``/``offset`` clauses."""

    def limit(self, limit: int) -> Self: ...

    def offset(self, offset: int) -> Self: ...
