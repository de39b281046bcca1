"""Shared dataclasses and enumerations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Language(str, Enum):
    JA = "ja"
    EN = "en"

    @property
    def selector(self) -> str:
        return f"span.lang-{self.value}"


@dataclass(frozen=True)
class InvocationArgs:
    url: str
    language: Language = Language.JA
    timeout: Optional[float] = None
    strict_status: bool = False
    impersonate: Optional[str] = None


@dataclass
class FetchResult:
    """Body of a fetched page plus where it finally came from."""

    url: str
    html: str
    status_code: int = 200
