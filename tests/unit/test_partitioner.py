import pytest

from branch_sales.partitioner import chunk_ranges, chunk_size, partition


def _covered(total_rows: int, workers: int) -> list[int]:
    return [
        index
        for chunk in chunk_ranges(total_rows, workers)
        for index in range(chunk.start, chunk.end)
    ]


@pytest.mark.parametrize("total_rows", [0, 1, 2, 3, 7, 8, 9, 64, 100, 101])
@pytest.mark.parametrize("workers", [1, 2, 3, 4, 8, 13, 200])
def test_chunks_cover_every_row_exactly_once(total_rows: int, workers: int):
    assert _covered(total_rows, workers) == list(range(total_rows))


def test_chunk_size_is_ceiling_division():
    assert chunk_size(10, 3) == 4
    assert chunk_size(9, 3) == 3
    assert chunk_size(0, 4) == 0
    assert chunk_size(1, 8) == 1


def test_partition_distributes_remainder_to_leading_workers():
    ranges = [(c.start, c.end) for c in chunk_ranges(10, 3)]
    assert ranges == [(0, 4), (4, 8), (8, 10)]


def test_trailing_workers_get_empty_chunks_when_workers_exceed_rows():
    chunks = chunk_ranges(3, 8)
    assert [(c.start, c.end) for c in chunks[:3]] == [(0, 1), (1, 2), (2, 3)]
    assert all(c.is_empty and c.start == c.end == 3 for c in chunks[3:])


def test_ceiling_chunks_can_leave_a_middle_worker_short():
    # ceil(5 / 4) == 2, so the last worker starts past the end.
    ranges = [(c.start, c.end) for c in chunk_ranges(5, 4)]
    assert ranges == [(0, 2), (2, 4), (4, 5), (5, 5)]


def test_empty_dataset_yields_only_empty_chunks():
    chunks = chunk_ranges(0, 4)
    assert len(chunks) == 4
    assert all(len(c) == 0 for c in chunks)


def test_partition_is_deterministic():
    assert partition(1_000, 7, 3) == partition(1_000, 7, 3)
    assert chunk_ranges(1_000, 7) == chunk_ranges(1_000, 7)


def test_chunk_carries_worker_id():
    assert [c.worker_id for c in chunk_ranges(20, 4)] == [0, 1, 2, 3]


@pytest.mark.parametrize(
    ("total_rows", "workers", "worker_id"),
    [(-1, 2, 0), (10, 0, 0), (10, 2, 2), (10, 2, -1)],
)
def test_partition_rejects_invalid_arguments(total_rows: int, workers: int, worker_id: int):
    with pytest.raises(ValueError):
        partition(total_rows, workers, worker_id)
