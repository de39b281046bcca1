from __future__ import annotations

import pytest

from stubs import RecordingClipboard


@pytest.fixture
def clipboard() -> RecordingClipboard:
    return RecordingClipboard()
