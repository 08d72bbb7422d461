"""Unit tests for chunk finding."""

import logging
import re

import pytest

from highlightwords.chunks import combine_chunks, default_find_chunks, fill_in_chunks, find_chunks
from highlightwords.exceptions import InvalidChunkError, InvalidSearchTermError, ValidationError
from highlightwords.options import HighlightOptions
from highlightwords.sanitizers import fold_accents
from highlightwords.types import Chunk, MatchSpan


def _texts(chunks, text):
    return [(chunk.text_of(text), chunk.highlight) for chunk in chunks]


@pytest.mark.unit
class TestFindChunks:
    """Test the full chunk-finding pipeline."""

    def test_case_insensitive_by_default(self):
        """All case variants are highlighted when matching ignores case."""
        text = "foobar foo FOO"
        chunks = find_chunks(["Foo"], text)

        assert _texts(chunks, text) == [
            ("foo", True),
            ("bar ", False),
            ("foo", True),
            (" ", False),
            ("FOO", True),
        ]

    def test_case_sensitive_without_exact_match(self):
        """Case-sensitive matching with no exact variant yields one plain chunk."""
        chunks = find_chunks(["Foo"], "foobar foo FOO", case_sensitive=True)

        assert chunks == [Chunk(start=0, end=14, highlight=False)]

    def test_case_sensitive_exact_match(self):
        """Only the exact case variant is highlighted."""
        text = "foo Foo FOO"
        chunks = find_chunks(["Foo"], text, HighlightOptions(case_sensitive=True))

        assert _texts(chunks, text) == [("foo ", False), ("Foo", True), (" FOO", False)]

    def test_auto_escape_matches_literally(self):
        """Escaped terms do not treat '.' as a wildcard."""
        text = "a.b axb"
        chunks = find_chunks(["a.b"], text, auto_escape=True)

        assert _texts(chunks, text) == [("a.b", True), (" axb", False)]

    def test_without_auto_escape_terms_are_patterns(self):
        """Unescaped terms are regular expressions."""
        text = "a.b axb"
        chunks = find_chunks(["a.b"], text, auto_escape=False)

        assert _texts(chunks, text) == [("a.b", True), (" ", False), ("axb", True)]

    def test_overlapping_terms_merge(self):
        """Overlapping matches from different terms become one chunk."""
        chunks = find_chunks(["the", "he"], "the cat")

        assert chunks == [Chunk(start=0, end=3, highlight=True), Chunk(start=3, end=7, highlight=False)]

    def test_adjacent_matches_merge(self):
        """Touching matches are coalesced into one highlighted chunk."""
        chunks = find_chunks(["ab", "cd"], "abcd!")

        assert chunks == [Chunk(start=0, end=4, highlight=True), Chunk(start=4, end=5, highlight=False)]

    def test_repeated_term_matches_merge(self):
        """Consecutive matches of one term are merged."""
        chunks = find_chunks(["a"], "aaab")

        assert chunks == [Chunk(start=0, end=3, highlight=True), Chunk(start=3, end=4, highlight=False)]

    def test_empty_text(self):
        """Empty text yields no chunks."""
        assert find_chunks(["x"], "") == []

    def test_no_matches(self):
        """Text without matches is one unhighlighted chunk."""
        assert find_chunks(["zzz"], "hello") == [Chunk(start=0, end=5, highlight=False)]

    def test_no_search_words(self):
        """No search words yields one unhighlighted chunk."""
        assert find_chunks([], "hello") == [Chunk(start=0, end=5, highlight=False)]

    def test_empty_search_words_are_ignored(self):
        """Empty strings and None entries are filtered out before matching."""
        text = "hello world"
        chunks = find_chunks(["", None, "world"], text)

        assert _texts(chunks, text) == [("hello ", False), ("world", True)]

    def test_whole_text_match(self):
        """A match covering the whole text is one highlighted chunk."""
        assert find_chunks(["hello"], "hello") == [Chunk(start=0, end=5, highlight=True)]

    def test_compiled_pattern_term(self):
        """Compiled patterns are used as search terms."""
        text = "call 555-1234 or 555-9876"
        chunks = find_chunks([re.compile(r"\d{3}-\d{4}")], text)

        assert [chunk.text_of(text) for chunk in chunks if chunk.highlight] == ["555-1234", "555-9876"]

    def test_compiled_pattern_follows_case_option(self):
        """Case sensitivity applies to compiled patterns too."""
        text = "Cat cat"
        insensitive = find_chunks([re.compile("cat")], text)
        sensitive = find_chunks([re.compile("cat", re.IGNORECASE)], text, case_sensitive=True)

        assert _texts(insensitive, text) == [("Cat", True), (" ", False), ("cat", True)]
        assert _texts(sensitive, text) == [("Cat ", False), ("cat", True)]

    def test_auto_escape_leaves_patterns_alone(self):
        """auto_escape only affects plain string terms."""
        text = "a.b axb"
        chunks = find_chunks([re.compile("a.b")], text, auto_escape=True)

        assert _texts(chunks, text) == [("a.b", True), (" ", False), ("axb", True)]

    def test_zero_length_pattern_does_not_loop(self):
        """Patterns that can match the empty string terminate and skip empty matches."""
        text = "abc"
        chunks = find_chunks(["x*"], text)

        assert chunks == [Chunk(start=0, end=3, highlight=False)]

    def test_zero_length_pattern_with_real_matches(self):
        """Non-empty matches of a pattern that also matches empty are kept."""
        text = "axxbx"
        chunks = find_chunks(["x*"], text)

        assert _texts(chunks, text) == [("a", False), ("xx", True), ("b", False), ("x", True)]

    def test_invalid_pattern_raises(self):
        """An invalid regular expression fails fast and names the term."""
        with pytest.raises(InvalidSearchTermError) as exc_info:
            find_chunks(["ok", "(unclosed"], "some text")

        assert exc_info.value.term == "(unclosed"
        assert "(unclosed" in str(exc_info.value)
        assert isinstance(exc_info.value.original_error, re.error)

    def test_invalid_pattern_is_fine_with_auto_escape(self):
        """Escaped terms never fail to compile."""
        text = "f(x) = (unclosed"
        chunks = find_chunks(["(unclosed"], text, auto_escape=True)

        assert _texts(chunks, text) == [("f(x) = ", False), ("(unclosed", True)]

    def test_unsupported_term_type_raises(self):
        """Search words must be strings or compiled patterns."""
        with pytest.raises(InvalidSearchTermError):
            find_chunks([42], "42")

    def test_unknown_option_raises(self):
        """Keyword overrides must name real options."""
        with pytest.raises(ValidationError):
            find_chunks(["a"], "a", ignore_case=True)

    def test_idempotent(self, sample_text):
        """Repeated calls return identical results."""
        first = find_chunks(["the", "dog", "o"], sample_text)
        second = find_chunks(["the", "dog", "o"], sample_text)

        assert first == second

    def test_options_object_with_overrides(self):
        """Keyword overrides win over the options object."""
        options = HighlightOptions(case_sensitive=True)
        chunks = find_chunks(["foo"], "FOO", options, case_sensitive=False)

        assert chunks == [Chunk(start=0, end=3, highlight=True)]


@pytest.mark.unit
class TestSanitize:
    """Test sanitize handling during matching."""

    def test_sanitize_applies_to_text_and_terms(self):
        """Accent folding matches accented text with plain terms and vice versa."""
        text = "Crème brûlée"
        chunks = find_chunks(["creme", "brûlee"], text, sanitize=fold_accents)

        assert _texts(chunks, text) == [("Crème", True), (" ", False), ("brûlée", True)]

    def test_sanitize_by_name(self):
        """Built-in sanitizers may be given by name."""
        text = "tab\there"
        chunks = find_chunks(["tab here"], text, sanitize="normalize_whitespace")

        assert chunks == [Chunk(start=0, end=8, highlight=True)]

    def test_sanitize_sequence(self):
        """A sequence of sanitizers is applied in order."""
        text = "Ça\tva"
        chunks = find_chunks(["ca va"], text, sanitize=["fold_accents", "normalize_whitespace"])

        assert chunks == [Chunk(start=0, end=5, highlight=True)]

    def test_offsets_index_original_text(self):
        """Offsets refer to the unsanitized text."""
        text = "Hello WORLD"
        chunks = find_chunks(["world"], text, sanitize=str.lower, case_sensitive=True)

        assert [chunk.text_of(text) for chunk in chunks if chunk.highlight] == ["WORLD"]

    def test_length_changing_sanitize_logs_warning(self, caplog):
        """A sanitize function that changes the length is reported."""
        with caplog.at_level(logging.WARNING, logger="highlightwords.chunks"):
            find_chunks(["a"], "a b", sanitize=lambda s: s.replace(" ", ""))

        assert "changed text length" in caplog.text

    def test_sanitize_not_applied_to_patterns(self):
        """Compiled pattern terms are not passed through sanitize."""
        calls = []

        def tracking(value: str) -> str:
            calls.append(value)
            return value

        find_chunks([re.compile("b")], "abc", sanitize=tracking)

        assert calls == ["abc"]


@pytest.mark.unit
class TestCustomFindChunks:
    """Test replacing the default matcher."""

    def test_override_receives_arguments(self):
        """The override is called with search words, text, sanitize and flags."""
        received = {}

        def finder(**kwargs):
            received.update(kwargs)
            return []

        find_chunks(["x"], "text", case_sensitive=True, auto_escape=True, find_chunks=finder)

        assert received["search_words"] == ["x"]
        assert received["text_to_highlight"] == "text"
        assert received["case_sensitive"] is True
        assert received["auto_escape"] is True
        assert received["sanitize"]("abc") == "abc"

    def test_override_output_is_merged_and_filled(self):
        """Spans from the override go through the merge and fill steps."""

        def finder(**kwargs):
            return [(4, 6), MatchSpan(0, 2), Chunk(start=1, end=3, highlight=False)]

        chunks = find_chunks(["ignored"], "abcdefgh", find_chunks=finder)

        assert chunks == [
            Chunk(start=0, end=3, highlight=True),
            Chunk(start=3, end=4, highlight=False),
            Chunk(start=4, end=6, highlight=True),
            Chunk(start=6, end=8, highlight=False),
        ]

    def test_override_spans_are_clamped(self):
        """Out-of-range spans are clamped to the text and empty ones dropped."""

        def finder(**kwargs):
            return [(-5, 2), (8, 20), (30, 40), (3, 3)]

        chunks = find_chunks([], "0123456789", find_chunks=finder)

        assert chunks == [
            Chunk(start=0, end=2, highlight=True),
            Chunk(start=2, end=8, highlight=False),
            Chunk(start=8, end=10, highlight=True),
        ]

    def test_override_skips_default_matching(self):
        """The default regex matcher is not consulted when an override is given."""
        chunks = find_chunks(["(invalid"], "abc", find_chunks=lambda **kwargs: [])

        assert chunks == [Chunk(start=0, end=3, highlight=False)]

    @pytest.mark.parametrize("span", [(3, 1), ("a", 2), (1.0, 2), (1,), None])
    def test_override_malformed_span(self, span):
        """Malformed spans raise InvalidChunkError."""
        with pytest.raises(InvalidChunkError):
            find_chunks([], "abcdef", find_chunks=lambda **kwargs: [span])

    def test_non_callable_override_rejected(self):
        """find_chunks must be callable."""
        with pytest.raises(ValidationError):
            HighlightOptions(find_chunks="not callable")


@pytest.mark.unit
class TestDefaultFindChunks:
    """Test the default per-term matcher."""

    def test_spans_in_term_order(self):
        """Spans are grouped by term, then ordered left to right."""
        spans = default_find_chunks(search_words=["b", "a"], text_to_highlight="abab")

        assert [(s.start, s.end) for s in spans] == [(1, 2), (3, 4), (0, 1), (2, 3)]
        assert all(span.highlight for span in spans)

    def test_no_terms(self):
        """No usable terms produce no spans."""
        assert default_find_chunks(search_words=["", None], text_to_highlight="abc") == []


@pytest.mark.unit
class TestCombineChunks:
    """Test merging of spans."""

    def test_sorts_and_merges(self):
        """Unsorted, overlapping spans are merged."""
        merged = combine_chunks([MatchSpan(5, 8), MatchSpan(0, 2), MatchSpan(1, 4), MatchSpan(6, 7)])

        assert merged == [Chunk(start=0, end=4, highlight=True), Chunk(start=5, end=8, highlight=True)]

    def test_adjacent_spans_merge(self):
        """Spans where the next start equals the current end merge."""
        assert combine_chunks([MatchSpan(0, 2), MatchSpan(2, 3)]) == [Chunk(start=0, end=3, highlight=True)]

    def test_contained_span(self):
        """A span inside another does not shrink the merged interval."""
        assert combine_chunks([MatchSpan(0, 10), MatchSpan(2, 3)]) == [Chunk(start=0, end=10, highlight=True)]

    def test_empty(self):
        """No spans merge to nothing."""
        assert combine_chunks([]) == []


@pytest.mark.unit
class TestFillInChunks:
    """Test gap filling."""

    def test_fills_gaps(self):
        """Gaps before, between and after highlighted chunks are filled."""
        filled = fill_in_chunks([Chunk(2, 4, True), Chunk(6, 7, True)], 10)

        assert filled == [
            Chunk(0, 2, False),
            Chunk(2, 4, True),
            Chunk(4, 6, False),
            Chunk(6, 7, True),
            Chunk(7, 10, False),
        ]

    def test_no_highlights(self):
        """Without highlights the whole text is one chunk."""
        assert fill_in_chunks([], 4) == [Chunk(0, 4, False)]

    def test_no_highlights_empty_text(self):
        """Without highlights and text the result is empty."""
        assert fill_in_chunks([], 0) == []
