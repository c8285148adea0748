"""Data models for chunkhash."""

from dataclasses import dataclass
from enum import Enum


class Algorithm(str, Enum):
    """xxHash variants that can be applied to a chunk."""
    XX128 = 'xx128'
    XX64 = 'xx64'
    XX32 = 'xx32'

    @property
    def supports_secret(self) -> bool:
        return self is not Algorithm.XX32


class KeyingMode(Enum):
    """Secondary input applied to the hash of each chunk."""
    SECRET = 'secret'
    SEED = 'seed'
    NONE = 'none'


@dataclass(frozen=True)
class RunConfig:
    """Parameters for one hashing run."""
    file_path: str
    chunk_size: int
    algorithm: Algorithm = Algorithm.XX128
    seed: int = 0  # 0 = unset
    secret: str = ''
    generate_secret: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class KeyMaterial:
    """Resolved keying inputs for a run."""
    default_seed: int
    seed: int
    input_secret: str
    secret: bytes

    @property
    def mode(self) -> KeyingMode:
        """Secret beats seed, seed beats nothing."""
        if self.secret:
            return KeyingMode.SECRET
        if self.seed != 0:
            return KeyingMode.SEED
        return KeyingMode.NONE


@dataclass(frozen=True)
class ChunkResult:
    """Digest of a single chunk."""
    start: int
    end: int  # start + chunk_size, not clamped to the file length
    bytes_read: int
    digest: int


@dataclass
class RunSummary:
    """Statistics from a completed run."""
    file_path: str
    file_size: int
    chunks: int = 0
    bytes_hashed: int = 0
