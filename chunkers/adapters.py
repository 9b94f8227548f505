"""
Entry points that build a ByteChunks iterator over a container.

- chunks_of: no filtering, may raise ElementTooLarge while iterating
- safe_chunks_of: iterates a filtered copy, the container is untouched
- safe_chunks_of_mut: filters the container in place, then iterates it
"""

import logging
from typing import Any, Callable, List, MutableSequence, Sequence

from utils.errors import validate_budget
from .byte_chunker import ByteChunks
from .sizing import byte_size, measure

logger = logging.getLogger('byte-chunker')


def chunks_of(container: Sequence, budget: int, sizer: Callable[[Any], int] = byte_size) -> ByteChunks:
    """
    Chunk a container without modifying it.

    Args:
        container: Ordered sequence of elements
        budget: Maximum total byte size of a chunk
        sizer: Function returning the byte size of one element

    Returns:
        ByteChunks iterator borrowing the container

    Raises:
        InvalidBudget: If budget is not a positive integer

    Iterating the result raises ElementTooLarge if it reaches an element
    whose size alone exceeds the budget.
    """
    return ByteChunks(container, budget, sizer=sizer)


def drop_oversized(container: Sequence, budget: int, sizer: Callable[[Any], int] = byte_size) -> List[Any]:
    """
    Return the elements that fit the budget on their own, in order.

    Args:
        container: Ordered sequence of elements
        budget: Maximum total byte size of a chunk
        sizer: Function returning the byte size of one element

    Returns:
        New list of surviving elements
    """
    budget = validate_budget(budget)
    kept = [element for element in container if measure(element, sizer) <= budget]

    dropped = len(container) - len(kept)
    if dropped:
        logger.warning(f"Dropped oversized elements | dropped={dropped} kept={len(kept)} budget={budget}")
    return kept


def safe_chunks_of(container: Sequence, budget: int, sizer: Callable[[Any], int] = byte_size) -> ByteChunks:
    """
    Chunk only the elements that can fit a chunk, leaving the container as is.

    The iterator runs over a filtered copy, so it never raises
    ElementTooLarge.

    Raises:
        InvalidBudget: If budget is not a positive integer
    """
    return ByteChunks(drop_oversized(container, budget, sizer=sizer), budget, sizer=sizer)


def safe_chunks_of_mut(
    container: MutableSequence, budget: int, sizer: Callable[[Any], int] = byte_size
) -> ByteChunks:
    """
    Remove oversized elements from the container in place, then chunk it.

    Side effect: every element whose size alone exceeds the budget is
    deleted from `container`. Surviving elements keep their relative order.
    The returned iterator borrows the filtered container and never raises
    ElementTooLarge.

    Raises:
        InvalidBudget: If budget is not a positive integer
    """
    container[:] = drop_oversized(container, budget, sizer=sizer)
    return ByteChunks(container, budget, sizer=sizer)
