"""
Chunking errors and simple error tracking.

ElementTooLarge and InvalidBudget are the two ways a chunking call can fail.
ErrorTracker collects errors and warnings across a batch of documents and
decides whether processing should go on.
"""
from dataclasses import dataclass, field
from typing import List
import logging

logger = logging.getLogger(__name__)


class ChunkingError(Exception):
    """Base exception for chunking errors."""

    pass


class ElementTooLarge(ChunkingError):
    """
    A single element is larger than the byte budget.

    Such an element can never be placed in any chunk, so the current
    iteration cannot go on past it.

    Attributes:
        index: Position of the element in the sequence being chunked.
        size: Size of the element in bytes.
        budget: Byte budget of the chunking call.
    """

    def __init__(self, index: int, size: int, budget: int):
        self.index = index
        self.size = size
        self.budget = budget
        super().__init__(
            f"Element at index {index} is {size} bytes, larger than the {budget} byte budget"
        )


class InvalidBudget(ChunkingError, ValueError):
    """Budget is not a positive integer."""

    def __init__(self, budget):
        self.budget = budget
        super().__init__(f"Budget must be a positive integer number of bytes, got {budget!r}")


def validate_budget(budget) -> int:
    """
    Check a byte budget and return it.

    Raises:
        InvalidBudget: If budget is not an int, is a bool, or is not positive.
    """
    if isinstance(budget, bool) or not isinstance(budget, int) or budget <= 0:
        raise InvalidBudget(budget)
    return budget


@dataclass
class ErrorTracker:
    """
    Simple error and warning tracker for batch chunking.

    Tracks errors and warnings as simple strings, and provides
    basic decision logic for whether to continue processing.

    Example:
        tracker = ErrorTracker(error_mode='continue', max_errors=5)

        # Log an error and check if we should continue
        if not tracker.add_error("Fragment too large", "chunking"):
            raise error

        # Record a warning (never stops processing)
        tracker.add_warning("Dropped 2 oversized fragments", "chunking")

        print(tracker.get_summary())  # "Errors: 1, Warnings: 1"
    """

    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    max_errors: int = 10
    error_mode: str = 'continue'

    def add_error(self, message: str, stage: str = "") -> bool:
        """
        Add an error and return whether to continue processing.

        Args:
            message: Error description.
            stage: Optional processing stage (e.g., "splitting", "chunking").

        Returns:
            True if processing should continue, False if it should stop.
        """
        error_msg = f"[{stage}] {message}" if stage else message
        self.errors.append(error_msg)
        logger.error(error_msg)

        if self.error_mode == 'stop':
            return False
        return len(self.errors) < self.max_errors

    def add_warning(self, message: str, stage: str = "") -> None:
        """
        Record a warning (doesn't affect processing continuation).

        Warnings are not logged here; the code that detects the condition
        logs it.

        Args:
            message: Warning description.
            stage: Optional processing stage.
        """
        warning_msg = f"[{stage}] {message}" if stage else message
        self.warnings.append(warning_msg)

    def get_summary(self) -> str:
        """
        Get a simple summary string for logging.

        Returns:
            Summary like "Errors: 2, Warnings: 3"
        """
        return f"Errors: {len(self.errors)}, Warnings: {len(self.warnings)}"
