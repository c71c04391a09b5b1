"""Tests for trailing delimiter resolution."""

import pytest

from enlace.delimiters import resolve_delimiters
from enlace.span import Span


def _resolve(data: bytes) -> bytes | None:
    span = resolve_delimiters(data, Span(0, len(data)))
    return None if span is None else span.slice(data)


class TestTrailingPunctuation:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (b"http://a.com.", b"http://a.com"),
            (b"http://a.com,", b"http://a.com"),
            (b"http://a.com:", b"http://a.com"),
            (b"http://a.com?!", b"http://a.com"),
            (b"http://a.com/?q", b"http://a.com/?q"),
            (b"http://a.com...", b"http://a.com"),
        ],
    )
    def test_stripped(self, raw: bytes, expected: bytes) -> None:
        assert _resolve(raw) == expected

    def test_everything_stripped(self) -> None:
        assert _resolve(b".,:?!") is None


class TestMarkup:
    def test_truncates_at_tag(self) -> None:
        assert _resolve(b"http://a.com/x<br>") == b"http://a.com/x"

    def test_truncates_then_strips(self) -> None:
        assert _resolve(b"http://a.com.</p>") == b"http://a.com"


class TestEntities:
    def test_named_entity_removed(self) -> None:
        assert _resolve(b"http://a.com&quot;") == b"http://a.com"

    def test_entity_then_punctuation(self) -> None:
        assert _resolve(b"http://a.com&quot;.") == b"http://a.com"

    def test_numeric_entity_keeps_body(self) -> None:
        """Numeric references only lose the semicolon."""
        assert _resolve(b"http://a.com&#39;") == b"http://a.com&#39"

    def test_stray_semicolon(self) -> None:
        assert _resolve(b"http://a.com/x;") == b"http://a.com/x"

    def test_semicolon_without_letters(self) -> None:
        assert _resolve(b"http://a.com&;") == b"http://a.com&"

    def test_lone_semicolon(self) -> None:
        assert _resolve(b";") is None


class TestBrackets:
    def test_balanced_paren_kept(self) -> None:
        assert _resolve(b"http://a.com/P_(E)") == b"http://a.com/P_(E)"

    def test_unbalanced_paren_dropped(self) -> None:
        assert _resolve(b"http://a.com/P_(E))") == b"http://a.com/P_(E)"

    def test_paren_without_opener(self) -> None:
        assert _resolve(b"http://a.com)") == b"http://a.com"

    def test_braces_and_brackets(self) -> None:
        assert _resolve(b"http://a.com/{x}") == b"http://a.com/{x}"
        assert _resolve(b"http://a.com/x]") == b"http://a.com/x"

    def test_quotes_always_dropped(self) -> None:
        assert _resolve(b'http://a.com/"x"') == b'http://a.com/"x'
        assert _resolve(b"http://a.com'") == b"http://a.com"

    def test_only_one_closer_dropped(self) -> None:
        assert _resolve(b"http://a.com))") == b"http://a.com)"

    def test_punctuation_before_closer(self) -> None:
        assert _resolve(b"http://a.com/x).") == b"http://a.com/x"

    def test_single_closer(self) -> None:
        assert _resolve(b")") is None


class TestSpanOffsets:
    def test_start_is_preserved(self) -> None:
        data = b"see http://a.com."
        assert resolve_delimiters(data, Span(4, len(data))) == Span(4, 16)

    def test_entity_scan_stays_in_span(self) -> None:
        data = b"&amp;x;"
        assert resolve_delimiters(data, Span(5, 7)) == Span(5, 6)
