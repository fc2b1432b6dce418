"""Exceptions raised by the transform engine."""


class PixpoolError(Exception):
    """Base class for every failure the engine reports."""


class AllocationFailure(PixpoolError):
    """A buffer or worker bookkeeping allocation could not be satisfied."""


class WorkerSpawnFailure(PixpoolError):
    """The thread pool could not start a worker task."""


class UnsupportedOperation(PixpoolError):
    """The requested operation is not available, e.g. an unknown image format."""


class KernelFailure(PixpoolError):
    """A kernel raised while processing its row range."""

    def __init__(self, row_range, message: str) -> None:
        super().__init__(message)
        self.row_range = row_range
