"""Line tokenizer used to color the exported snippet in the code preview."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

KEYWORDS = frozenset(
    {
        "import", "from", "export", "default", "function", "return", "const",
        "let", "var", "new", "if", "else", "true", "false", "null", "undefined",
        "class", "extends", "async", "await", "try", "catch", "finally",
    }
)

_BRACKETS = "<>{}[]()"
_QUOTES = "'\"`"


class SpanKind(Enum):
    COMMENT = "comment"
    STRING = "string"
    NUMBER = "number"
    TAG = "tag"
    KEYWORD = "keyword"
    TYPE = "type"
    IDENTIFIER = "identifier"
    BRACKET = "bracket"
    PLAIN = "plain"


# One Dark inspired palette for the code preview.
SPAN_COLORS: dict[SpanKind, str] = {
    SpanKind.COMMENT: "#5c6370",
    SpanKind.STRING: "#98c379",
    SpanKind.NUMBER: "#d19a66",
    SpanKind.TAG: "#56b6c2",
    SpanKind.KEYWORD: "#c678dd",
    SpanKind.TYPE: "#e5c07b",
    SpanKind.IDENTIFIER: "#abb2bf",
    SpanKind.BRACKET: "#89a4ff",
    SpanKind.PLAIN: "#abb2bf",
}


@dataclass(frozen=True, slots=True)
class CodeSpan:
    start: int
    text: str
    kind: SpanKind


def _is_word_start(char: str) -> bool:
    return char.isascii() and (char.isalpha() or char in "_$")


def _is_word_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char in "_$")


def _prev_non_space(line: str, index: int) -> str:
    while index >= 0:
        if line[index] not in " \t":
            return line[index]
        index -= 1
    return ""


def _string_end(line: str, start: int) -> int:
    quote = line[start]
    index = start + 1
    escaped = False
    while index < len(line):
        char = line[index]
        index += 1
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == quote:
            break
    return index


def tokenize_line(line: str) -> list[CodeSpan]:
    spans: list[CodeSpan] = []
    index = 0
    while index < len(line):
        char = line[index]
        if line.startswith("//", index):
            spans.append(CodeSpan(index, line[index:], SpanKind.COMMENT))
            break
        if char in _QUOTES:
            end = _string_end(line, index)
            spans.append(CodeSpan(index, line[index:end], SpanKind.STRING))
            index = end
            continue
        if char.isascii() and char.isdigit():
            end = index + 1
            while end < len(line) and (line[end].isdigit() or line[end] in "._"):
                end += 1
            spans.append(CodeSpan(index, line[index:end], SpanKind.NUMBER))
            index = end
            continue
        if _is_word_start(char):
            end = index + 1
            while end < len(line) and _is_word_char(line[end]):
                end += 1
            word = line[index:end]
            spans.append(CodeSpan(index, word, _word_kind(line, index, word)))
            index = end
            continue
        kind = SpanKind.BRACKET if char in _BRACKETS else SpanKind.PLAIN
        spans.append(CodeSpan(index, char, kind))
        index += 1
    return spans


def _word_kind(line: str, index: int, word: str) -> SpanKind:
    previous = _prev_non_space(line, index - 1)
    if previous == "<" or (previous == "/" and _prev_non_space(line, index - 2) == "<"):
        return SpanKind.TAG
    if word in KEYWORDS:
        return SpanKind.KEYWORD
    if word[0].isupper():
        return SpanKind.TYPE
    return SpanKind.IDENTIFIER
