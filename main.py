"""
Main entry point for byte-budgeted text chunking.
Provides a simple keyword API over the text transform.

Example:
    >>> from main import chunk_text, chunk_texts
    >>>
    >>> # Pack words into chunks of at most 10 UTF-8 bytes
    >>> chunk_text("Hello There Best Worl D A", max_chunk_bytes=10, splitting_strategy='words')
    [['Hello', 'There'], ['Best', 'Worl', 'D', 'A']]
    >>>
    >>> # Several documents at once
    >>> results = chunk_texts([doc_a, doc_b], max_chunk_bytes=1024)
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from transforms import TextChunker, chunk_documents
from utils.config import Config
from utils.errors import ErrorTracker

# Setup module logger
logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)s | %(message)s', datefmt='%Y-%m-%d %H:%M:%S')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def build_config(config: Optional[Dict[str, Any]] = None) -> Config:
    """
    Build and validate a Config from a dict, ignoring unknown keys.

    Raises:
        ValueError: If the configuration is invalid
    """
    cfg = Config.from_dict(config or {})
    cfg.validate()
    return cfg


def chunk_text(text: str, **config) -> List[List[str]]:
    """
    Split text into fragments and pack them into byte-budgeted chunks.

    Args:
        text: Text to chunk
        **config: Configuration options:
            - max_chunk_bytes (int): Maximum UTF-8 bytes per chunk (default: 300)
            - splitting_strategy (str): 'nltk-sentence', 'nltk-paragraphs', 'lines',
              'words' or '1-chunk' (default: 'nltk-paragraphs')
            - oversize_policy (str): 'skip' drops fragments larger than the budget,
              'error' raises ElementTooLarge (default: 'skip')
            - strip_fragments (bool): Strip whitespace around fragments (default: True)

    Returns:
        Chunks as lists of fragments

    Example:
        >>> chunk_text(text, max_chunk_bytes=512, splitting_strategy='nltk-sentence')
    """
    cfg = build_config(config)
    chunks = TextChunker(cfg).chunk(text)
    logger.info(f"Chunked text: {len(text)} characters, {len(chunks)} chunks")
    return chunks


def chunk_texts(texts: Sequence[str], **config) -> Dict[str, Any]:
    """
    Chunk multiple texts in batch.

    Documents that fail are recorded instead of aborting the batch, unless
    error_mode is 'stop' or max_errors is reached.

    Args:
        texts: Texts to chunk
        **config: Same options as chunk_text, plus:
            - error_mode (str): 'stop' or 'continue' (default: 'continue')
            - max_errors (int): Failures tolerated in 'continue' mode (default: 10)

    Returns:
        Dictionary with 'chunks' (one list of chunks per text), 'errors' and 'warnings'

    Example:
        >>> result = chunk_texts(docs, max_chunk_bytes=1024, oversize_policy='error')
        >>> for i, chunks in enumerate(result['chunks']):
        ...     print(f"{i}: {len(chunks)} chunks")
    """
    cfg = build_config(config)
    tracker = ErrorTracker(error_mode=cfg.error_mode, max_errors=cfg.max_errors)

    logger.info(f"Starting batch chunking: {len(texts)} texts")
    results = chunk_documents(texts, cfg, tracker)

    total_chunks = sum(len(chunks) for chunks in results)
    logger.info(f"Batch chunking complete: {len(results)} texts, {total_chunks} chunks | {tracker.get_summary()}")

    return {
        'chunks': results,
        'errors': list(tracker.errors),
        'warnings': list(tracker.warnings),
    }


if __name__ == '__main__':
    print("=== Byte Chunker ===\n")

    sample = "ラウトは難しいです！\n\nHello There\n\nBest Worl D A"
    for chunk in chunk_text(sample, max_chunk_bytes=16, splitting_strategy='words'):
        print(chunk)
