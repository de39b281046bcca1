"""End-to-end flows with stubbed network and clipboard."""

from __future__ import annotations

import pytest
from curl_cffi.requests import RequestsError

from xatcoder import ContentExtractor, Fetcher, InvocationArgs, Language, NetworkError, Pipeline
from xatcoder import cli

from stubs import SAMPLE_HTML, FakeResponse, FakeSession


class TrackingExtractor(ContentExtractor):
    def __init__(self) -> None:
        super().__init__()
        self.calls = 0

    def extract(self, html, language):
        self.calls += 1
        return super().extract(html, language)


def test_pipeline_copies_extracted_content(clipboard):
    fetcher = Fetcher(session=FakeSession(FakeResponse(SAMPLE_HTML)))
    pipeline = Pipeline(fetcher, ContentExtractor(), clipboard)

    content = pipeline.run(InvocationArgs(url="http://example.com", language=Language.JA))

    assert content == "こんにちは"
    assert clipboard.writes == ["こんにちは"]


def test_pipeline_stops_on_network_error(clipboard):
    fetcher = Fetcher(session=FakeSession(error=RequestsError("Connection refused")))
    extractor = TrackingExtractor()
    pipeline = Pipeline(fetcher, extractor, clipboard)

    with pytest.raises(NetworkError):
        pipeline.run(InvocationArgs(url="http://example.com"))

    assert extractor.calls == 0
    assert clipboard.writes == []


def _patch_cli(monkeypatch, session, clipboard):
    monkeypatch.setattr(cli, "Fetcher", lambda **kwargs: Fetcher(session=session, **kwargs))
    monkeypatch.setattr(cli, "PyperclipClipboard", lambda: clipboard)


def test_main_reports_success(monkeypatch, capsys, clipboard):
    url = "https://atcoder.jp/contests/abc300/tasks/abc300_a"
    _patch_cli(monkeypatch, FakeSession(FakeResponse(SAMPLE_HTML)), clipboard)

    assert cli.main([url]) == 0

    assert clipboard.writes == ["こんにちは"]
    assert capsys.readouterr().out.strip() == f"Copied!: {url}"


def test_main_reports_network_error(monkeypatch, capsys, clipboard):
    _patch_cli(monkeypatch, FakeSession(error=RequestsError("Connection refused")), clipboard)

    assert cli.main(["http://example.com"]) == 1

    captured = capsys.readouterr()
    assert "Copied!" not in captured.out
    assert "[ERROR] Failed to send request" in captured.err
    assert clipboard.writes == []


def test_main_reports_not_found(monkeypatch, capsys, clipboard):
    _patch_cli(monkeypatch, FakeSession(FakeResponse(SAMPLE_HTML)), clipboard)

    assert cli.main(["http://example.com", "en"]) == 1
    assert "No elements found" in capsys.readouterr().err
    assert clipboard.writes == []


def test_main_reports_usage_error(capsys):
    assert cli.main([]) == 2
    err = capsys.readouterr().err
    assert "usage: xatcoder" in err
    assert "[ERROR] URL required" in err


def test_main_prints_help(capsys):
    assert cli.main(["--help"]) == 0
    out = capsys.readouterr().out
    assert "usage: xatcoder" in out
    assert "--impersonate" in out


def test_main_passes_impersonation_to_fetcher(monkeypatch, capsys, clipboard):
    session = FakeSession(FakeResponse(SAMPLE_HTML))
    _patch_cli(monkeypatch, session, clipboard)

    assert cli.main(["http://example.com", "--impersonate", "chrome120"]) == 0
    assert session.calls[0]["impersonate"] == "chrome120"
