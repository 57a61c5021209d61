import math

from hypothesis import given, settings
from hypothesis import strategies as st

from blockpager import compute

counts = st.integers(min_value=1, max_value=10_000)
pages = st.integers(min_value=-1_000, max_value=20_000)


@settings(max_examples=200)
@given(total=counts, per_page=counts, per_block=counts, requested=pages)
def test_page_control_invariants(total: int, per_page: int, per_block: int, requested: int) -> None:
    pg = compute(total, per_page, per_block, requested)

    assert pg.total_pages == math.ceil(total / per_page)
    assert 1 <= pg.current_page <= pg.total_pages
    if pg.current_page == 1:
        assert pg.prev_page is None
    else:
        assert pg.prev_page == pg.current_page - 1
    if pg.current_page == pg.total_pages:
        assert pg.next_page is None
    else:
        assert pg.next_page == pg.current_page + 1


@settings(max_examples=200)
@given(total=counts, per_page=counts, per_block=counts, requested=pages)
def test_block_invariants(total: int, per_page: int, per_block: int, requested: int) -> None:
    pg = compute(total, per_page, per_block, requested)

    assert pg.start_of_block <= pg.current_page <= pg.end_of_block <= pg.total_pages
    assert (pg.start_of_block - 1) % per_block == 0
    assert pg.end_of_block == min(pg.start_of_block + per_block - 1, pg.total_pages)
    if pg.start_of_block == 1:
        assert pg.prev_block_page is None
    else:
        assert pg.prev_block_page == pg.start_of_block - 1
    if pg.end_of_block == pg.total_pages:
        assert pg.next_block_page is None
    else:
        assert pg.next_block_page == pg.end_of_block + 1


@settings(max_examples=200)
@given(total=counts, per_page=counts, per_block=counts, requested=pages)
def test_slice_invariants(total: int, per_page: int, per_block: int, requested: int) -> None:
    pg = compute(total, per_page, per_block, requested)

    assert pg.start_of_slice == (pg.current_page - 1) * per_page
    assert pg.end_of_slice == min(pg.current_page * per_page - 1, total - 1)
    assert pg.length_of_slice == min(per_page, total - pg.start_of_slice)
    assert pg.length_of_slice >= 1


@given(total=counts, per_page=counts, per_block=counts, requested=pages)
def test_compute_is_deterministic(
    total: int,
    per_page: int,
    per_block: int,
    requested: int,
) -> None:
    assert compute(total, per_page, per_block, requested) == compute(
        total, per_page, per_block, requested
    )
