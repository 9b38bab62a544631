"""In-memory order management: order books, venue routing, slicing algorithms and basket trading."""

__version__ = "0.1.0"