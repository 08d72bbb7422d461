"""Property-based tests for chunk finding.

Uses Hypothesis to generate texts and search terms and checks the
structural guarantees of the chunk list:
- Chunks cover the text exactly once, in order
- Adjacent chunks alternate between highlighted and unhighlighted
- Slicing by chunk reconstructs the text
- Every occurrence of a literal term lies inside a highlighted chunk
- Results are deterministic
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from highlightwords.chunks import combine_chunks, find_chunks
from highlightwords.types import Chunk, MatchSpan

texts = st.text(alphabet="abcAB .x-", max_size=60)
terms = st.lists(st.text(alphabet="abAB.x", max_size=4), max_size=5)


def _assert_partition(chunks, text):
    if not text:
        assert chunks == []
        return
    assert chunks[0].start == 0
    assert chunks[-1].end == len(text)
    for chunk in chunks:
        assert chunk.end > chunk.start
    for previous, current in zip(chunks, chunks[1:]):
        assert previous.end == current.start
        assert previous.highlight != current.highlight


@pytest.mark.unit
@pytest.mark.fuzzing
class TestChunkProperties:
    """Property-based tests for find_chunks."""

    @given(texts, terms, st.booleans(), st.booleans())
    def test_chunks_partition_text(self, text, words, case_sensitive, auto_escape):
        """Property: chunks are contiguous, ordered, non-empty and alternating."""
        chunks = find_chunks(words, text, case_sensitive=case_sensitive, auto_escape=auto_escape)

        _assert_partition(chunks, text)

    @given(texts, terms, st.booleans())
    def test_slices_reconstruct_text(self, text, words, case_sensitive):
        """Property: concatenating chunk slices yields the original text."""
        chunks = find_chunks(words, text, case_sensitive=case_sensitive, auto_escape=True)

        assert "".join(chunk.text_of(text) for chunk in chunks) == text

    @given(texts, terms)
    def test_literal_occurrences_are_highlighted(self, text, words):
        """Property: each non-overlapping occurrence of a term is covered by a highlight."""
        chunks = find_chunks(words, text, auto_escape=True)
        covered = set()
        for chunk in chunks:
            if chunk.highlight:
                covered.update(range(chunk.start, chunk.end))

        lowered = text.lower()
        for word in words:
            if not word:
                continue
            start = lowered.find(word.lower())
            while start != -1:
                assert set(range(start, start + len(word))) <= covered
                start = lowered.find(word.lower(), start + len(word))

    @given(texts, terms, st.booleans())
    def test_deterministic(self, text, words, case_sensitive):
        """Property: identical inputs give identical chunk lists."""
        first = find_chunks(words, text, case_sensitive=case_sensitive, auto_escape=True)
        second = find_chunks(words, text, case_sensitive=case_sensitive, auto_escape=True)

        assert first == second

    @given(texts)
    def test_no_terms_single_chunk(self, text):
        """Property: without terms the text is a single unhighlighted chunk."""
        expected = [Chunk(start=0, end=len(text), highlight=False)] if text else []

        assert find_chunks([], text) == expected

    @given(st.lists(st.tuples(st.integers(0, 50), st.integers(0, 10)), max_size=20))
    def test_combined_spans_are_disjoint(self, raw):
        """Property: merged spans are sorted and separated by gaps."""
        spans = [MatchSpan(start, start + length) for start, length in raw if length]
        merged = combine_chunks(spans)

        for previous, current in zip(merged, merged[1:]):
            assert previous.end < current.start
        covered = {i for span in spans for i in range(span.start, span.end)}
        assert covered == {i for chunk in merged for i in range(chunk.start, chunk.end)}
