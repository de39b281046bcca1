"""Global settings for xatcoder."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    timeout: float = 10
    default_language: str = "ja"
    strict_status: bool = False
    impersonate: Optional[str] = None


settings = Settings()
