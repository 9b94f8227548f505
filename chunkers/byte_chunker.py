"""
Greedy byte-budget chunker.

ByteChunks walks a sequence left to right and hands out the longest prefix
of the remaining elements whose total byte size fits the budget. Elements
are never split or reordered.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

from utils.errors import ElementTooLarge, validate_budget
from .sizing import byte_size, measure
from .views import SequenceView

logger = logging.getLogger('byte-chunker')


class ChunkerState(Enum):
    """Iterator states. EXHAUSTED is terminal."""

    ACTIVE = "active"
    EXHAUSTED = "exhausted"


class ChunkStatus(Enum):
    """Outcome of a single advance."""

    CHUNK = "chunk"
    END = "end"
    ELEMENT_TOO_LARGE = "element_too_large"


@dataclass(frozen=True)
class ChunkResult:
    """Result of `ByteChunks.advance()`."""

    status: ChunkStatus
    chunk: Optional[SequenceView] = None
    error: Optional[ElementTooLarge] = None

    @property
    def is_chunk(self) -> bool:
        return self.status is ChunkStatus.CHUNK

    @property
    def is_end(self) -> bool:
        return self.status is ChunkStatus.END

    @property
    def is_error(self) -> bool:
        return self.status is ChunkStatus.ELEMENT_TOO_LARGE


class ByteChunks:
    """
    Lazy, finite iterator of contiguous chunks within a byte budget.

    Each chunk is a SequenceView over the source, so the source must not be
    mutated while the iterator or any chunk it produced is in use.

    Example:
        >>> chunks = ByteChunks(["Hello", "There", "Best", "Worl", "D", "A"], 10)
        >>> [list(c) for c in chunks]
        [['Hello', 'There'], ['Best', 'Worl', 'D', 'A']]

    Iterating raises ElementTooLarge when the next element alone exceeds the
    budget. Use `advance()` to get the fault back as a ChunkResult instead.
    """

    def __init__(self, sequence: Sequence, budget: int, sizer: Callable[[Any], int] = byte_size):
        """
        Args:
            sequence: Ordered sequence of elements with a byte size
            budget: Maximum total byte size of a chunk
            sizer: Function returning the byte size of one element

        Raises:
            InvalidBudget: If budget is not a positive integer
        """
        self.budget = validate_budget(budget)
        self.sizer = sizer
        self._remaining = sequence if isinstance(sequence, SequenceView) else SequenceView(sequence)
        self._state = ChunkerState.ACTIVE if len(self._remaining) else ChunkerState.EXHAUSTED
        self._chunk_count = 0
        self._emitted_bytes = 0
        self._emitted_elements = 0

    @property
    def state(self) -> ChunkerState:
        return self._state

    @property
    def remaining(self) -> SequenceView:
        """Elements not yet emitted."""
        return self._remaining

    @property
    def chunk_count(self) -> int:
        return self._chunk_count

    @property
    def emitted_bytes(self) -> int:
        return self._emitted_bytes

    def next_split_index(self) -> int:
        """
        Number of leading remaining elements that fit in the next chunk.

        Does not advance the iterator.

        Raises:
            ElementTooLarge: If an element met while the running total is
                still zero exceeds the budget on its own
        """
        return self._scan()[0]

    def _scan(self):
        byte_count = 0
        index = 0
        for element in self._remaining:
            size = measure(element, self.sizer)
            if byte_count == 0 and size > self.budget:
                raise ElementTooLarge(index=self._emitted_elements + index, size=size, budget=self.budget)
            if byte_count + size > self.budget:
                break
            byte_count += size
            index += 1
        return index, byte_count

    def advance(self) -> ChunkResult:
        """
        Produce the next chunk, the end of sequence, or the oversized fault.

        After a fault the remaining view is left as it was, so later calls
        report the same fault again. Zero-byte elements ahead of the
        oversized one are not emitted on their own.
        """
        if self._state is ChunkerState.EXHAUSTED or not self._remaining:
            self._state = ChunkerState.EXHAUSTED
            return ChunkResult(ChunkStatus.END)

        try:
            split_index, chunk_bytes = self._scan()
        except ElementTooLarge as e:
            logger.error(
                f"Element too large | chunk_index={self._chunk_count} "
                f"size={e.size} budget={self.budget}"
            )
            return ChunkResult(ChunkStatus.ELEMENT_TOO_LARGE, error=e)

        chunk, self._remaining = self._remaining.split_at(split_index)
        self._chunk_count += 1
        self._emitted_bytes += chunk_bytes
        self._emitted_elements += len(chunk)
        if not self._remaining:
            self._state = ChunkerState.EXHAUSTED

        logger.debug(
            f"Chunk emitted | chunk_index={self._chunk_count - 1} "
            f"elements={len(chunk)} bytes={chunk_bytes} remaining={len(self._remaining)}"
        )
        return ChunkResult(ChunkStatus.CHUNK, chunk=chunk)

    def __iter__(self) -> 'ByteChunks':
        return self

    def __next__(self) -> SequenceView:
        result = self.advance()
        if result.is_error:
            raise result.error
        if result.is_end:
            raise StopIteration
        return result.chunk

    def __repr__(self) -> str:
        return (
            f"ByteChunks(budget={self.budget}, state={self._state.value}, "
            f"remaining={len(self._remaining)}, chunks={self._chunk_count})"
        )
