"""Chunked streaming hash over a single file."""

import logging
from typing import Iterator, Optional

from chunkhash.file_session import FileSession
from chunkhash.models import ChunkResult, KeyMaterial, RunConfig, RunSummary
from chunkhash.reporter import Reporter
from chunkhash.utils.hash_utils import effective_mode, select_digest


class ChunkedHasher:
    """Hash a file in fixed-size windows, one digest per window."""

    def __init__(self, config: RunConfig, keys: KeyMaterial, reporter: Optional[Reporter] = None):
        """
        Initialize the hasher.

        Args:
            config: Run parameters; ``chunk_size`` must be positive
            keys: Resolved keying material
            reporter: Sink for progress lines (silent if None)
        """
        if config.chunk_size <= 0:
            raise ValueError(f"Chunk size must be > 0, got: {config.chunk_size}")

        self.logger = logging.getLogger(__name__)
        self.config = config
        self.keys = keys
        self.reporter = reporter or Reporter(verbose=False)
        self.digest = select_digest(config.algorithm, keys)

    def iter_chunks(self, session: FileSession) -> Iterator[ChunkResult]:
        """
        Yield a ChunkResult for each window of ``session``.

        The loop runs while the start offset is <= the file length, so a file
        whose length is a multiple of the chunk size ends with an empty chunk.
        Ranges always advance by ``chunk_size`` and are never clamped.

        Raises:
            SeekError: If positioning at a chunk start fails
            ReadError: If reading a chunk fails
        """
        chunk_size = self.config.chunk_size
        start = 0
        # Inclusive bound kept for output compatibility with earlier releases
        while start <= session.length:
            data = session.read_at(start, chunk_size)
            yield ChunkResult(
                start=start,
                end=start + chunk_size,
                bytes_read=len(data),
                digest=self.digest(data),
            )
            start += chunk_size

    def run(self, session: FileSession) -> RunSummary:
        """
        Hash every chunk of ``session`` and report it.

        Chunks already reported stay reported if a later chunk fails.

        Returns:
            RunSummary for the completed run
        """
        summary = RunSummary(file_path=str(session.path), file_size=session.length)
        self.logger.info(
            f"Hashing {session.path} with {self.config.algorithm.value} "
            f"({effective_mode(self.config.algorithm, self.keys).value} keying, {self.config.chunk_size}-byte chunks)"
        )

        for result in self.iter_chunks(session):
            summary.chunks += 1
            summary.bytes_hashed += result.bytes_read
            self.reporter.chunk(result, self.config.chunk_size)

        self.logger.info(f"Hashed {summary.chunks} chunks ({summary.bytes_hashed} bytes)")
        return summary
