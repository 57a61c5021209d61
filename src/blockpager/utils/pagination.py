import logging

from .validation import validate_divisor, validate_total

log = logging.getLogger(__name__)


def calculate_pagination(
    total_entries: int,
    entries_per_page: int,
    pages_per_block: int,
    requested_page: int,
    *,
    allow_empty: bool = False,
) -> dict[str, int | None]:
    """Derive page, block and slice values for ``requested_page``.

    ``requested_page`` is clamped into ``[1, total_pages]``. An empty collection
    (only reachable with ``allow_empty``) is laid out as a single page holding a
    zero-length slice whose ``end_of_slice`` is ``-1``.
    """
    validate_divisor('entries_per_page', entries_per_page)
    validate_divisor('pages_per_block', pages_per_block)
    validate_total(total_entries, allow_empty=allow_empty)

    # floor division would give zero pages for an empty collection
    total_pages = max((total_entries - 1) // entries_per_page + 1, 1)

    current_page = min(max(requested_page, 1), total_pages)
    if current_page != requested_page:
        log.debug(
            'Requested page %s is outside 1..%s, using page %s.',
            requested_page,
            total_pages,
            current_page,
        )

    prev_page = current_page - 1
    next_page = current_page + 1

    start_of_block = (current_page - 1) // pages_per_block * pages_per_block + 1
    end_of_block = min(start_of_block + pages_per_block - 1, total_pages)
    prev_block_page = start_of_block - 1
    next_block_page = end_of_block + 1

    start_of_slice = (current_page - 1) * entries_per_page
    end_of_slice = min(current_page * entries_per_page - 1, total_entries - 1)

    return {
        'total_entries': total_entries,
        'entries_per_page': entries_per_page,
        'pages_per_block': pages_per_block,
        'total_pages': total_pages,
        'current_page': current_page,
        'prev_page': prev_page if prev_page >= 1 else None,
        'next_page': next_page if next_page <= total_pages else None,
        'start_of_block': start_of_block,
        'end_of_block': end_of_block,
        'prev_block_page': prev_block_page if prev_block_page >= 1 else None,
        'next_block_page': next_block_page if next_block_page <= total_pages else None,
        'start_of_slice': start_of_slice,
        'end_of_slice': end_of_slice,
        'length_of_slice': end_of_slice - start_of_slice + 1,
    }
