"""recipectl — parse typed recipe input into validated value objects."""

__version__ = "0.1.0"
