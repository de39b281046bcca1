"""xatcoder package exports."""

from .models import Language, InvocationArgs, FetchResult
from .errors import (
    XatcoderError,
    UsageError,
    NetworkError,
    SelectorError,
    NotFoundError,
    ClipboardError,
)
from .fetcher import Fetcher
from .extractor import ContentExtractor, selector_for
from .clipboard import ClipboardWriter, PyperclipClipboard
from .pipeline import Pipeline

__all__ = [
    "Language",
    "InvocationArgs",
    "FetchResult",
    "XatcoderError",
    "UsageError",
    "NetworkError",
    "SelectorError",
    "NotFoundError",
    "ClipboardError",
    "Fetcher",
    "ContentExtractor",
    "selector_for",
    "ClipboardWriter",
    "PyperclipClipboard",
    "Pipeline",
]
