"""Unix-style utilities, concurrency primitives and small network servers."""

__version__ = "0.1.0"