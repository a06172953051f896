"""Exception types raised by the career details package"""

from pathlib import Path


class CareerDetailsError(Exception):
    """Base class for errors raised by this package."""


class ContentStoreError(CareerDetailsError):
    """A content asset could not be read or does not match the schema."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load content from {path}: {reason}")
