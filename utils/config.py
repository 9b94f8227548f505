"""
Simple configuration with validation.

One flat dataclass holds every chunking setting. Use `from_dict()` to build
it from keyword arguments and `validate()` before chunking.
"""
from dataclasses import dataclass, asdict
from typing import Literal, List


SPLITTING_STRATEGIES = ('nltk-sentence', 'nltk-paragraphs', 'lines', 'words', '1-chunk')
OVERSIZE_POLICIES = ('error', 'skip')


@dataclass
class Config:
    """
    Single configuration class with all chunking settings.

    Example:
        config = Config(
            max_chunk_bytes=512,
            splitting_strategy='nltk-sentence',
            oversize_policy='error'
        )
        config.validate()
    """

    # Error handling
    error_mode: Literal['stop', 'continue'] = 'continue'
    max_errors: int = 10

    # Splitting settings
    splitting_strategy: Literal['nltk-sentence', 'nltk-paragraphs', 'lines', 'words', '1-chunk'] = 'nltk-paragraphs'
    strip_fragments: bool = True

    # Packing settings
    max_chunk_bytes: int = 300
    oversize_policy: Literal['error', 'skip'] = 'skip'

    def validate(self) -> None:
        """
        Validate configuration values.

        Raises:
            ValueError: If any configuration values are invalid.

        Example:
            config = Config(max_chunk_bytes=0)
            config.validate()  # Raises ValueError
        """
        errors: List[str] = []

        if isinstance(self.max_chunk_bytes, bool) or not isinstance(self.max_chunk_bytes, int):
            errors.append(f"max_chunk_bytes must be an integer, got {self.max_chunk_bytes!r}")
        elif self.max_chunk_bytes <= 0:
            errors.append(f"max_chunk_bytes must be positive, got {self.max_chunk_bytes}")

        if self.splitting_strategy not in SPLITTING_STRATEGIES:
            errors.append(
                f"splitting_strategy must be one of {', '.join(SPLITTING_STRATEGIES)}, "
                f"got {self.splitting_strategy!r}"
            )

        if self.oversize_policy not in OVERSIZE_POLICIES:
            errors.append(f"oversize_policy must be 'error' or 'skip', got {self.oversize_policy!r}")

        if self.error_mode not in ('stop', 'continue'):
            errors.append(f"error_mode must be 'stop' or 'continue', got {self.error_mode!r}")

        if self.max_errors <= 0:
            errors.append(f"max_errors must be positive, got {self.max_errors}")

        if errors:
            raise ValueError("Configuration errors:\n  - " + "\n  - ".join(errors))

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'Config':
        """
        Create Config from dictionary, ignoring unknown keys.

        Example:
            config = Config.from_dict({
                'max_chunk_bytes': 1024,
                'unknown_key': 'ignored'  # Will be ignored
            })
        """
        valid_keys = set(cls.__dataclass_fields__.keys())
        filtered = {k: v for k, v in config_dict.items() if k in valid_keys}
        return cls(**filtered)

    def to_dict(self) -> dict:
        """Convert Config to dictionary."""
        return asdict(self)
