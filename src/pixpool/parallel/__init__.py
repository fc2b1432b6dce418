from pixpool.parallel.dispatcher import ParallelDispatcher, dispatch
from pixpool.parallel.partition import RowRange, partition

__all__ = ["ParallelDispatcher", "RowRange", "dispatch", "partition"]
