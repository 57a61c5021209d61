class PaginationError(ValueError):
    """Base error for pagination input that cannot be laid out into pages."""


class InvalidDivisorError(PaginationError):
    def __init__(self, msg: str, *, field: str, value: int) -> None:
        super().__init__(msg)
        self.field = field
        self.value = value


class NonPositiveTotalError(PaginationError):
    def __init__(self, msg: str, *, value: int) -> None:
        super().__init__(msg)
        self.value = value
