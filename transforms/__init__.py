"""
Text transforms: split text into fragments and pack them into byte-budgeted chunks.
"""

from .chunking import TextSplitter, TextChunker, chunk_text, chunk_documents

__all__ = [
    'TextSplitter',
    'TextChunker',
    'chunk_text',
    'chunk_documents',
]
