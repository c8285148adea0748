"""Helper utilities for command line tests."""

import re
from typing import List, Tuple

CHUNK_LINE = re.compile(r'^(\d+) - (\d+): (\d+)$')
READ_LINE = re.compile(r'^Reading from (\d+)-(\d+),\[read: (\d+)\]$')


def parse_chunk_lines(output: str) -> List[Tuple[int, int, int]]:
    """
    Extract ``(start, end, digest)`` tuples from verbose output.

    Args:
        output: Captured stdout of a run

    Returns:
        One tuple per chunk line, in output order
    """
    chunks = []
    for line in output.splitlines():
        match = CHUNK_LINE.match(line.strip())
        if match:
            chunks.append(tuple(int(g) for g in match.groups()))
    return chunks


def parse_read_sizes(output: str) -> List[int]:
    """Extract the ``[read: N]`` byte counts from verbose output."""
    sizes = []
    for line in output.splitlines():
        match = READ_LINE.match(line.strip())
        if match:
            sizes.append(int(match.group(3)))
    return sizes


def digests(output: str) -> List[int]:
    return [digest for _, _, digest in parse_chunk_lines(output)]
