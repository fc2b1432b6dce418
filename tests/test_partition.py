import pytest

from pixpool.parallel.partition import RowRange, partition


@pytest.mark.parametrize("height", [0, 1, 2, 7, 10, 33])
def test_ranges_cover_rows_exactly(height):
    for workers in range(1, height + 4):
        ranges = partition(height, workers)

        assert len(ranges) == workers
        assert ranges[0].start == 0
        assert ranges[-1].end == height
        for prev, cur in zip(ranges, ranges[1:]):
            assert prev.end == cur.start
        assert sum(len(r) for r in ranges) == height


def test_ceil_split_with_shrinking_tail():
    assert partition(10, 4) == [RowRange(0, 3), RowRange(3, 6), RowRange(6, 9), RowRange(9, 10)]


def test_excess_workers_get_empty_ranges_at_end():
    ranges = partition(5, 4)
    assert ranges == [RowRange(0, 2), RowRange(2, 4), RowRange(4, 5), RowRange(5, 5)]
    assert ranges[-1].empty


def test_zero_rows_gives_all_empty_ranges():
    ranges = partition(0, 3)
    assert ranges == [RowRange(0, 0)] * 3
    assert all(r.empty for r in ranges)


@pytest.mark.parametrize("workers", [0, -2])
def test_worker_count_clamped_to_one(workers):
    assert partition(6, workers) == [RowRange(0, 6)]


def test_negative_row_count_rejected():
    with pytest.raises(ValueError):
        partition(-1, 2)


def test_row_range_helpers():
    r = RowRange(2, 5)
    assert len(r) == 3
    assert list(r.rows()) == [2, 3, 4]
    assert not r.empty
