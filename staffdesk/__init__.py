"""Employee record search, paged text tables and salary statistics."""

__version__ = "0.1.0"
__all__ = ["model", "search", "table", "statistics"]