"""Fork-join execution of a kernel over row ranges."""

from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Callable, Sequence

from pixpool.errors import AllocationFailure, KernelFailure, PixpoolError, WorkerSpawnFailure
from pixpool.logging_config import get_logger
from pixpool.parallel.partition import RowRange, partition

logger = get_logger("dispatcher")

RangeKernel = Callable[[RowRange], None]


class ParallelDispatcher:
    """Runs one task per row range on a thread pool and joins them all."""

    thread_name_prefix: str

    def __init__(self, thread_name_prefix: str = "pixpool") -> None:
        self.thread_name_prefix = thread_name_prefix

    def run(self, ranges: Sequence[RowRange], kernel: RangeKernel) -> None:
        """Process every range and block until all of them are done.

        Empty ranges are skipped. If any task fails the remaining tasks still run
        to completion before the first failure, in range order, is raised.

        Args:
            ranges (Sequence[RowRange]): Disjoint row ranges, one per worker.
            kernel (RangeKernel): Callable processing a single range.

        Raises:
            AllocationFailure: A worker ran out of memory.
            WorkerSpawnFailure: A worker thread could not be started.
            KernelFailure: A worker raised any other exception.
        """
        work = [row_range for row_range in ranges if not row_range.empty]
        if not work:
            return

        logger.debug(f"Dispatching {len(work)} task(s): {[(r.start, r.end) for r in work]}")

        futures: list[tuple[RowRange, Future]] = []
        spawn_failure: tuple[RowRange, RuntimeError] | None = None

        # Leaving the with-block joins every task that was started.
        with ThreadPoolExecutor(
            max_workers=len(work), thread_name_prefix=self.thread_name_prefix
        ) as executor:
            for row_range in work:
                try:
                    futures.append((row_range, executor.submit(kernel, row_range)))
                except RuntimeError as exc:
                    logger.error(
                        f"Could not start worker for rows [{row_range.start}, {row_range.end}): {exc}"
                    )
                    spawn_failure = (row_range, exc)
                    break
            wait([future for _, future in futures])

        failures = []
        for row_range, future in futures:
            exc = future.exception()
            if exc is not None:
                logger.error(f"Worker for rows [{row_range.start}, {row_range.end}) failed: {exc!r}")
                failures.append((row_range, exc))

        if failures:
            _raise_worker_failure(*failures[0])
        if spawn_failure is not None:
            row_range, exc = spawn_failure
            raise WorkerSpawnFailure(
                f"Could not start worker for rows [{row_range.start}, {row_range.end})"
            ) from exc


def _raise_worker_failure(row_range: RowRange, exc: BaseException) -> None:
    if isinstance(exc, PixpoolError):
        raise exc
    if isinstance(exc, MemoryError):
        raise AllocationFailure(
            f"Out of memory in rows [{row_range.start}, {row_range.end})"
        ) from exc
    raise KernelFailure(
        row_range, f"Kernel failed on rows [{row_range.start}, {row_range.end}): {exc}"
    ) from exc


def dispatch(total_rows: int, workers: int, kernel: RangeKernel) -> None:
    """Partition ``total_rows`` across ``workers`` and run ``kernel`` on each range."""
    ParallelDispatcher().run(partition(total_rows, workers), kernel)
