"""Console trading simulator that replays an order book from CSV data."""

__version__ = "0.1.0"