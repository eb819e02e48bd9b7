"""Command-line tools: bitcoin value calculator, reverse Polish calculator and merge sorter."""

__version__ = "0.1.0"
__all__ = ["btc", "exchange", "pmergeme", "rpn"]