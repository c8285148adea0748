"""Console output for verbose runs."""

from typing import IO, Optional

import typer

from chunkhash.models import ChunkResult, KeyMaterial, RunSummary


class Reporter:
    """Write progress lines to stdout when verbose output is enabled."""

    def __init__(self, verbose: bool, file: Optional[IO[str]] = None):
        self.verbose = verbose
        self.file = file

    def _emit(self, line: str) -> None:
        if self.verbose:
            typer.echo(line, file=self.file)

    def file_info(self, path: str, size: int) -> None:
        self._emit(f"Hash on file : {path}")
        self._emit(f"File size : {size}")

    def keying(self, keys: KeyMaterial) -> None:
        self._emit(f"Default seed : {keys.default_seed}")
        self._emit(f"Input seed : {keys.seed}")
        self._emit(f"Input secret : {keys.input_secret}")
        self._emit(f"Calculated secret : {keys.secret.decode('utf-8')}")

    def chunk(self, result: ChunkResult, chunk_size: int) -> None:
        """Report one hashed chunk with its declared range."""
        self._emit(f"Reading from {result.start}-{chunk_size},[read: {result.bytes_read}]")
        self._emit(f"{result.start} - {result.end}: {result.digest}")

    def summary(self, summary: RunSummary) -> None:
        self._emit(f"Hashed {summary.chunks} chunks ({summary.bytes_hashed} bytes)")
