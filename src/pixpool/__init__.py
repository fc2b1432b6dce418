"""Row-partitioned parallel image transforms."""

__version__ = "0.1.0"
