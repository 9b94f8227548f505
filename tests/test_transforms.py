"""
Tests for transforms/chunking.py.

Tests core text functionality:
- TextSplitter strategies
- TextChunker packing and oversize policies
- chunk_documents batch error handling
"""

import logging
from unittest.mock import patch

import pytest

from transforms import TextChunker, TextSplitter, chunk_documents, chunk_text
from utils.config import Config
from utils.errors import ElementTooLarge, ErrorTracker


class TestTextSplitter:
    """Tests for splitting strategies."""

    def test_paragraphs(self):
        """nltk-paragraphs splits on blank lines."""
        text = "First paragraph.\n\nSecond one.\n\n\nThird."
        assert TextSplitter.split(text, 'nltk-paragraphs') == ["First paragraph.", "Second one.", "Third."]

    def test_sentences(self):
        """nltk-sentence delegates to nltk.sent_tokenize."""
        with patch('transforms.chunking.nltk.sent_tokenize', return_value=["One.", " Two. "]) as tokenize:
            fragments = TextSplitter.split("One. Two.", 'nltk-sentence')

        tokenize.assert_called_once_with("One. Two.")
        assert fragments == ["One.", "Two."]

    def test_lines(self):
        """lines drops empty lines when stripping."""
        assert TextSplitter.split("a\n\n b \nc", 'lines') == ["a", "b", "c"]

    def test_words(self):
        """words splits on whitespace."""
        assert TextSplitter.split("Hello  There\nBest", 'words') == ["Hello", "There", "Best"]

    def test_one_chunk(self):
        """1-chunk keeps the whole text as one fragment."""
        assert TextSplitter.split("  whole text ", '1-chunk', strip=False) == ["  whole text "]

    def test_empty_text(self):
        """Empty text has no fragments."""
        assert TextSplitter.split("", 'words') == []
        assert TextSplitter.split("   ", '1-chunk') == []

    def test_unknown_strategy_falls_back(self):
        """Unknown strategies fall back to paragraphs."""
        assert TextSplitter.split("a\n\nb", 'semantic') == ["a", "b"]


class TestTextChunker:
    """Tests for packing fragments into byte-budgeted chunks."""

    def test_word_chunks(self):
        """Words pack greedily within the byte budget."""
        chunker = TextChunker(Config(max_chunk_bytes=10, splitting_strategy='words'))
        assert chunker.chunk("Hello There Best Worl D A") == [["Hello", "There"], ["Best", "Worl", "D", "A"]]

    def test_multibyte_fragments(self):
        """Fragments are sized in UTF-8 bytes."""
        chunker = TextChunker(Config(max_chunk_bytes=12, splitting_strategy='words'))
        chunks = chunker.chunk("ラウ トは 難し いで す！")
        assert [len(c) for c in chunks] == [2, 2, 1]

    def test_skip_policy_drops_and_warns(self):
        """Oversized fragments are dropped and recorded as a warning."""
        chunker = TextChunker(Config(max_chunk_bytes=3, splitting_strategy='words', oversize_policy='skip'))

        assert chunker.chunk("Hello There") == []
        assert len(chunker.errors.warnings) == 1
        assert "Dropped 2 fragment(s)" in chunker.errors.warnings[0]

    def test_skip_policy_logs_drop_once(self, caplog):
        """Dropped fragments produce a single log line."""
        chunker = TextChunker(Config(max_chunk_bytes=3, splitting_strategy='words', oversize_policy='skip'))

        with caplog.at_level(logging.WARNING):
            chunker.chunk("ab Hello There")

        dropped = [r for r in caplog.records if "Dropped" in r.getMessage()]
        assert len(dropped) == 1
        assert "dropped=2" in dropped[0].getMessage()

    def test_error_policy_raises(self):
        """With the error policy an oversized fragment raises."""
        chunker = TextChunker(Config(max_chunk_bytes=3, splitting_strategy='words', oversize_policy='error'))
        with pytest.raises(ElementTooLarge):
            chunker.chunk("Hello There")

    def test_pack_prepared_fragments(self):
        """pack() accepts fragments that were split elsewhere."""
        chunker = TextChunker(Config(max_chunk_bytes=4))
        assert chunker.pack(["ab", "cd", "e"]) == [["ab", "cd"], ["e"]]

    def test_empty_text(self):
        """Empty text has no chunks."""
        assert TextChunker().chunk("") == []

    def test_chunk_text_helper(self):
        """chunk_text uses default config when none is given."""
        assert chunk_text("one\n\ntwo") == [["one", "two"]]


class TestChunkDocuments:
    """Tests for batch chunking."""

    def test_one_result_per_document(self):
        """Each text gets its own list of chunks."""
        config = Config(max_chunk_bytes=5, splitting_strategy='words')
        results = chunk_documents(["ab cd ef", "", "abcde"], config)
        assert results == [[["ab", "cd"], ["ef"]], [], [["abcde"]]]

    def test_continue_mode_records_failures(self):
        """In continue mode a failing document gets no chunks."""
        config = Config(max_chunk_bytes=3, splitting_strategy='words', oversize_policy='error')
        tracker = ErrorTracker(error_mode='continue', max_errors=5)

        results = chunk_documents(["ab", "toolong", "cd"], config, tracker)

        assert results == [[["ab"]], [], [["cd"]]]
        assert len(tracker.errors) == 1
        assert "Document 1" in tracker.errors[0]

    def test_stop_mode_reraises(self):
        """In stop mode the first failure propagates."""
        config = Config(max_chunk_bytes=3, splitting_strategy='words', oversize_policy='error', error_mode='stop')

        with pytest.raises(ElementTooLarge):
            chunk_documents(["ab", "toolong", "cd"], config)

    def test_max_errors_reraises(self):
        """Reaching max_errors stops the batch."""
        config = Config(max_chunk_bytes=3, splitting_strategy='words', oversize_policy='error', max_errors=2)
        tracker = ErrorTracker(max_errors=2)

        with pytest.raises(ElementTooLarge):
            chunk_documents(["long1", "ok", "long2", "long3"], config, tracker)
        assert len(tracker.errors) == 2
