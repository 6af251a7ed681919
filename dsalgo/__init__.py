"""Classic algorithm exercises: graphs, sorting, recursion and records."""

__version__ = "0.1.0"
__all__ = ["graph", "sorting", "recursion", "records"]