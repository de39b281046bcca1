"""Fetch, extract and copy for one invocation."""

from __future__ import annotations

from .clipboard import ClipboardWriter
from .extractor import ContentExtractor
from .fetcher import Fetcher
from .models import InvocationArgs


class Pipeline:
    """Run the fetch -> extract -> copy steps using the provided collaborators."""

    def __init__(self, fetcher: Fetcher, extractor: ContentExtractor, clipboard: ClipboardWriter) -> None:
        self.fetcher = fetcher
        self.extractor = extractor
        self.clipboard = clipboard

    def run(self, args: InvocationArgs) -> str:
        """Copy the language block of ``args.url`` and return what was copied."""
        page = self.fetcher.fetch(args.url)
        content = self.extractor.extract(page.html, args.language)
        self.clipboard.set_text(content)
        return content
