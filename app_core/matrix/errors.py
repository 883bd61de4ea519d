from __future__ import annotations


class MatrixError(Exception):
    """Base class for failures while building the temperature matrix."""


class ParseError(MatrixError, ValueError):
    """A raw daily row could not be turned into a DailyRecord."""

    def __init__(self, message: str, row=None):
        super().__init__(message)
        self.row = row


class EmptyDatasetError(MatrixError):
    """No usable records, so no window or colour domain can be derived."""
