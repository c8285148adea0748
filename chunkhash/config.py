"""Configuration management for chunkhash."""

import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from chunkhash.models import Algorithm, RunConfig

DEFAULT_CHUNK_SIZE = 131072
MAX_SEED = 2**64 - 1

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class Config:
    """Defaults and logging settings loaded from environment variables."""

    def __init__(self):
        """Load and validate configuration from environment."""
        load_dotenv(find_dotenv(usecwd=True))

        self.chunk_size = self.validate_chunk_size(
            self._get_int('CHUNKHASH_SIZE', str(DEFAULT_CHUNK_SIZE))
        )
        self.algorithm = self.parse_algorithm(os.getenv('CHUNKHASH_ALGORITHM', Algorithm.XX128.value))
        self.seed = self.validate_seed(self._get_int('CHUNKHASH_SEED', '0'))

        self.log_level = os.getenv('LOG_LEVEL', 'WARNING').strip().upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got: '{self.log_level}'")

        self.log_file = os.getenv('LOG_FILE') or None
        self.log_max_files = self._get_int('LOG_MAX_FILES', '5')
        if self.log_max_files < 0:
            raise ValueError(f"LOG_MAX_FILES must be >= 0, got: {self.log_max_files}")

    @staticmethod
    def _get_int(key: str, default: str) -> int:
        """Get an integer environment variable or raise error."""
        raw = os.getenv(key, default)
        try:
            return int(raw.strip())
        except ValueError:
            raise ValueError(f"{key} must be an integer, got: '{raw}'")

    @staticmethod
    def parse_algorithm(raw: str) -> Algorithm:
        """Parse an algorithm name such as ``xx64`` (case insensitive)."""
        name = raw.strip().lower()
        try:
            return Algorithm(name)
        except ValueError:
            choices = ', '.join(a.value for a in Algorithm)
            raise ValueError(f"Invalid algorithm '{raw}' (expected one of {choices})")

    @staticmethod
    def validate_chunk_size(size: int) -> int:
        if size <= 0:
            raise ValueError(f"Chunk size must be > 0, got: {size}")
        return size

    @staticmethod
    def validate_seed(seed: int) -> int:
        if not 0 <= seed <= MAX_SEED:
            raise ValueError(f"Seed must be an unsigned 64-bit integer, got: {seed}")
        return seed

    def build_run_config(
        self,
        filename: str,
        size: Optional[int] = None,
        algorithm: Optional[Algorithm] = None,
        seed: Optional[int] = None,
        secret: str = '',
        generate_secret: bool = False,
        verbose: bool = False,
    ) -> RunConfig:
        """
        Merge command line values over the environment defaults.

        Args:
            filename: File to hash
            size: Chunk size in bytes, or None for the configured default
            algorithm: xxHash variant, or None for the configured default
            seed: Seed, or None for the configured default (0 = unset)
            secret: Literal secret string
            generate_secret: Derive the secret from the resolved seed
            verbose: Print progress lines

        Returns:
            Validated RunConfig
        """
        return RunConfig(
            file_path=filename,
            chunk_size=self.validate_chunk_size(self.chunk_size if size is None else size),
            algorithm=self.algorithm if algorithm is None else algorithm,
            seed=self.validate_seed(self.seed if seed is None else seed),
            secret=secret,
            generate_secret=generate_secret,
            verbose=verbose,
        )

    def __str__(self) -> str:
        """Return string representation of config."""
        return (
            f"Config(\n"
            f"  chunk_size={self.chunk_size}\n"
            f"  algorithm={self.algorithm.value}\n"
            f"  seed={self.seed}\n"
            f"  log_level={self.log_level}\n"
            f"  log_file={self.log_file or 'none'}\n"
            f"  log_max_files={self.log_max_files}\n"
            f")"
        )
