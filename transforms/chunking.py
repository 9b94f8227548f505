"""
Text chunking transforms.

Text is split into atomic fragments (sentences, paragraphs, lines, words)
and the fragments are packed into byte-budgeted chunks.
"""

from typing import List, Optional, Sequence
import nltk

from chunkers import chunks_of, safe_chunks_of
from utils.config import Config
from utils.errors import ElementTooLarge, ErrorTracker
from utils.logging_utils import ChunkLogger

logger = ChunkLogger("text-chunker")


class TextSplitter:
    """Split text into fragments with support for multiple strategies."""

    @staticmethod
    def split(text: str, strategy: str = 'nltk-paragraphs', strip: bool = True) -> List[str]:
        """
        Split text into fragments based on strategy.

        Args:
            text: Input text to split
            strategy: Splitting strategy ('nltk-sentence', 'nltk-paragraphs', 'lines', 'words', '1-chunk')
            strip: Strip surrounding whitespace from each fragment and drop empty ones

        Returns:
            List of text fragments
        """
        if not text:
            return []

        if strategy == 'nltk-sentence':
            fragments = TextSplitter._split_sentences(text)
        elif strategy == 'nltk-paragraphs':
            fragments = TextSplitter._split_paragraphs(text)
        elif strategy == 'lines':
            fragments = text.splitlines()
        elif strategy == 'words':
            fragments = text.split()
        elif strategy == '1-chunk':
            fragments = [text]
        else:
            logger.warning(f"Unknown strategy: {strategy}, using nltk-paragraphs")
            fragments = TextSplitter._split_paragraphs(text)

        if strip:
            fragments = [f.strip() for f in fragments]
            fragments = [f for f in fragments if f]
        return fragments

    @staticmethod
    def _split_sentences(text: str) -> List[str]:
        """Split by sentence boundaries using NLTK."""
        return nltk.sent_tokenize(text)

    @staticmethod
    def _split_paragraphs(text: str) -> List[str]:
        """Split by blank lines using NLTK."""
        return nltk.tokenize.blankline_tokenize(text)


class TextChunker:
    """
    Pack text fragments into chunks of at most `max_chunk_bytes` UTF-8 bytes.

    Example:
        chunker = TextChunker(Config(max_chunk_bytes=10, splitting_strategy='words'))
        chunker.chunk("Hello There Best Worl D A")
        # [['Hello', 'There'], ['Best', 'Worl', 'D', 'A']]
    """

    def __init__(self, config: Optional[Config] = None, errors: Optional[ErrorTracker] = None):
        self.config = config or Config()
        if errors is None:
            errors = ErrorTracker(error_mode=self.config.error_mode, max_errors=self.config.max_errors)
        self.errors = errors

    def split(self, text: str) -> List[str]:
        return TextSplitter.split(text, self.config.splitting_strategy, strip=self.config.strip_fragments)

    def chunk(self, text: str) -> List[List[str]]:
        """
        Split text and pack the fragments.

        With oversize_policy 'skip', fragments larger than the budget are
        dropped and recorded as a warning. With 'error', the first such
        fragment raises ElementTooLarge.

        Returns:
            Chunks as lists of fragments, in text order
        """
        fragments = self.split(text)
        return self.pack(fragments)

    def pack(self, fragments: Sequence[str]) -> List[List[str]]:
        """Pack already split fragments."""
        budget = self.config.max_chunk_bytes
        logger.info(
            "Chunking",
            strategy=self.config.splitting_strategy,
            max_chunk_bytes=budget,
            policy=self.config.oversize_policy,
            fragments=len(fragments),
        )

        if self.config.oversize_policy == 'skip':
            iterator = safe_chunks_of(fragments, budget)
            dropped = len(fragments) - len(iterator.remaining)
            if dropped:
                self.errors.add_warning(
                    f"Dropped {dropped} fragment(s) larger than {budget} bytes", stage="chunking"
                )
        else:
            iterator = chunks_of(fragments, budget)

        chunks = [chunk.to_list() for chunk in iterator]
        logger.info("Chunking complete", chunks=len(chunks), bytes=iterator.emitted_bytes)
        return chunks


def chunk_text(text: str, config: Optional[Config] = None) -> List[List[str]]:
    """Chunk a single text with the given configuration."""
    return TextChunker(config).chunk(text)


def chunk_documents(
    texts: Sequence[str], config: Optional[Config] = None, errors: Optional[ErrorTracker] = None
) -> List[List[List[str]]]:
    """
    Chunk several texts, one result per text.

    A text that fails with ElementTooLarge is recorded on the tracker and
    gets no chunks. The error is re-raised when the tracker says to stop
    (error_mode 'stop', or max_errors reached).

    Args:
        texts: Input texts
        config: Chunking configuration
        errors: Tracker to record errors and warnings on

    Returns:
        For each text, its chunks as lists of fragments
    """
    chunker = TextChunker(config, errors)
    results: List[List[List[str]]] = []

    for doc_index, text in enumerate(texts):
        try:
            results.append(chunker.chunk(text))
        except ElementTooLarge as e:
            if not chunker.errors.add_error(f"Document {doc_index}: {e}", stage="chunking"):
                raise
            results.append([])

    logger.info("Batch chunking complete", documents=len(texts), summary=chunker.errors.get_summary())
    return results

