"""Split an image's rows into contiguous worker ranges."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class RowRange:
    """Half-open interval ``[start, end)`` of image rows."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    @property
    def empty(self) -> bool:
        return self.end <= self.start

    def rows(self) -> range:
        return range(self.start, self.end)


def partition(total_rows: int, workers: int) -> list[RowRange]:
    """Compute one row range per worker.

    Every worker gets ``ceil(total_rows / workers)`` rows until the rows run out;
    the trailing ranges shrink and then become empty (``start == end == total_rows``)
    so that exactly ``workers`` ranges are always returned.

    Args:
        total_rows (int): Number of rows to cover.
        workers (int): Requested worker count, clamped to at least 1.

    Returns:
        list[RowRange]: Contiguous, non-overlapping ranges covering ``[0, total_rows)``.
    """
    if total_rows < 0:
        raise ValueError(f"Row count must be non-negative, got {total_rows}")
    workers = max(1, workers)
    rows_per_worker = math.ceil(total_rows / workers)

    ranges = []
    for i in range(workers):
        start = min(i * rows_per_worker, total_rows)
        end = min(start + rows_per_worker, total_rows)
        ranges.append(RowRange(start, end))
    return ranges
