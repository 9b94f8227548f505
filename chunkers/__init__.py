"""
Chunkers package for packing ordered elements into byte-budgeted chunks.
Elements are never split or reordered; each chunk is a view over the source.
"""

from .sizing import SizeInBytes, byte_size, measure, register_sizer, get_sizer, get_supported_types
from .views import SequenceView
from .byte_chunker import ByteChunks, ChunkResult, ChunkStatus, ChunkerState
from .adapters import chunks_of, safe_chunks_of, safe_chunks_of_mut, drop_oversized

__all__ = [
    # Sizing
    'SizeInBytes',
    'byte_size',
    'measure',
    'register_sizer',
    'get_sizer',
    'get_supported_types',
    # Views
    'SequenceView',
    # Iterator
    'ByteChunks',
    'ChunkResult',
    'ChunkStatus',
    'ChunkerState',
    # Adapters
    'chunks_of',
    'safe_chunks_of',
    'safe_chunks_of_mut',
    'drop_oversized',
]
