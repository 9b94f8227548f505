"""
Basic logging utilities.
"""

import logging


class ChunkLogger:
    """Logger that appends keyword context to every message."""

    def __init__(self, name: str, level: int = logging.INFO):
        """
        Initialize a named logger.

        Args:
            name: Logger name
            level: Level used when this logger sets up its own handler
        """
        self.name = name
        self.logger = logging.getLogger(name)

        # Set up basic logging if not already configured
        if not self.logger.handlers:
            self._setup_logging(level)

    def _setup_logging(self, level: int):
        """Set up basic logging configuration."""
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        self.logger.addHandler(handler)
        self.logger.setLevel(level)

    def info(self, message: str, **kwargs):
        """Log info message with context."""
        self.logger.info(f"{message} {self._format_context(**kwargs)}".rstrip())

    def warning(self, message: str, **kwargs):
        """Log warning message with context."""
        self.logger.warning(f"{message} {self._format_context(**kwargs)}".rstrip())

    @staticmethod
    def _format_context(**kwargs) -> str:
        """Format context information."""
        if not kwargs:
            return ""

        context_parts = []
        for key, value in kwargs.items():
            context_parts.append(f"{key}={value}")

        return f"| {' '.join(context_parts)}"
