"""Tests for the snippet line tokenizer."""

from themestudio.core.highlight import SpanKind, tokenize_line


def _kinds(line: str) -> list[tuple[str, SpanKind]]:
    return [(span.text, span.kind) for span in tokenize_line(line) if span.text.strip()]


def test_import_line() -> None:
    kinds = _kinds('import { createConfig } from "@luno-kit/react";')
    assert kinds[0] == ("import", SpanKind.KEYWORD)
    assert ("{", SpanKind.BRACKET) in kinds
    assert ("createConfig", SpanKind.IDENTIFIER) in kinds
    assert ("from", SpanKind.KEYWORD) in kinds
    assert ('"@luno-kit/react"', SpanKind.STRING) in kinds


def test_comment_takes_rest_of_line() -> None:
    spans = tokenize_line("    // Select at least one connector")
    assert spans[-1].kind is SpanKind.COMMENT
    assert spans[-1].text == "// Select at least one connector"
    assert spans[-1].start == 4


def test_jsx_tags_and_types() -> None:
    kinds = _kinds("<QueryClientProvider client={queryClient}>")
    assert kinds[1] == ("QueryClientProvider", SpanKind.TAG)
    assert ("queryClient", SpanKind.IDENTIFIER) in kinds
    closing = _kinds("</LunoKitProvider>")
    assert ("LunoKitProvider", SpanKind.TAG) in closing
    assert ("QueryClient", SpanKind.TYPE) in _kinds("const queryClient = new QueryClient();")


def test_strings_with_escapes_and_numbers() -> None:
    kinds = _kinds(r'label: "say \"hi\"", size: 12.5')
    assert (r'"say \"hi\""', SpanKind.STRING) in kinds
    assert ("12.5", SpanKind.NUMBER) in kinds


def test_spans_cover_the_whole_line() -> None:
    line = 'const config = { ...baseConfig, modalSize: "wide" };'
    assert "".join(span.text for span in tokenize_line(line)) == line
