"""Exception hierarchy shared by every step of a run."""

from __future__ import annotations


class XatcoderError(Exception):
    """Base class for failures that abort a run."""


class UsageError(XatcoderError):
    """Missing or invalid command line arguments."""


class NetworkError(XatcoderError):
    """The request could not be sent or its body could not be read."""


class SelectorError(XatcoderError):
    """The CSS selector is not syntactically valid."""


class NotFoundError(XatcoderError):
    """No element in the document matched the selector."""


class ClipboardError(XatcoderError):
    """The system clipboard is unavailable or rejected the write."""
