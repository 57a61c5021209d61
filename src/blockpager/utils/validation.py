from blockpager.exceptions.common import InvalidDivisorError, NonPositiveTotalError


def validate_divisor(field: str, value: int) -> int:
    if value <= 0:
        msg = f'{field} must be a positive integer, got {value}.'
        raise InvalidDivisorError(msg, field=field, value=value)
    return value


def validate_total(value: int, *, allow_empty: bool = False) -> int:
    """Reject totals that cannot produce a page.

    Zero is accepted only when ``allow_empty`` is set; negative totals never are.
    """
    if value < 0 or (value == 0 and not allow_empty):
        expected = 'zero or a positive integer' if allow_empty else 'a positive integer'
        msg = f'total_entries must be {expected}, got {value}.'
        raise NonPositiveTotalError(msg, value=value)
    return value
