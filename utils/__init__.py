"""
Utilities package for shared functionality.
Configuration, errors and logging used by chunkers and transforms.
"""

from .config import Config
from .errors import ChunkingError, ElementTooLarge, InvalidBudget, ErrorTracker, validate_budget
from .logging_utils import ChunkLogger

__all__ = [
    'Config',
    'ChunkingError',
    'ElementTooLarge',
    'InvalidBudget',
    'ErrorTracker',
    'validate_budget',
    'ChunkLogger',
]
