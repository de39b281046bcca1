"""Minimal demo using inline HTML and a clipboard that prints instead of copying."""

from xatcoder import ClipboardWriter, ContentExtractor, Fetcher, FetchResult, InvocationArgs, Language, Pipeline


class PrintClipboard(ClipboardWriter):
    def set_text(self, content: str) -> None:
        print(content)


def main() -> None:
    url = "https://atcoder.jp/contests/abc300/tasks/abc300_a"
    html = """<html><body><span class="lang">
    <span class="lang-ja"><h3>問題文</h3><p>整数を出力してください。</p></span>
    <span class="lang-en"><h3>Problem Statement</h3><p>Print an integer.</p></span>
    </span></body></html>"""

    fetcher = Fetcher(session=object())
    # Monkey patch fetcher to avoid network dependency in the demo.
    fetcher.fetch = lambda target: FetchResult(url=target, html=html)  # type: ignore

    pipeline = Pipeline(fetcher, ContentExtractor(), PrintClipboard())
    for language in Language:
        pipeline.run(InvocationArgs(url=url, language=language))


if __name__ == "__main__":
    main()
