"""N-puzzle solver: best-first search over flat sliding-tile boards."""

__version__ = "0.1.0"
