"""Resolution of the file path and keying material for a run."""

import logging
from pathlib import Path

from chunkhash.errors import PathResolutionError, SecretGenerationError
from chunkhash.models import KeyMaterial, RunConfig

logger = logging.getLogger(__name__)

DEFAULT_SEED = 345456657563

U64_MASK = 0xFFFFFFFFFFFFFFFF

# XXH3 default secret (kSecret), 192 bytes
XXH3_DEFAULT_SECRET = bytes([
    0xb8, 0xfe, 0x6c, 0x39, 0x23, 0xa4, 0x4b, 0xbe, 0x7c, 0x01, 0x81, 0x2c, 0xf7, 0x21, 0xad, 0x1c,
    0xde, 0xd4, 0x6d, 0xe9, 0x83, 0x90, 0x97, 0xdb, 0x72, 0x40, 0xa4, 0xa4, 0xb7, 0xb3, 0x67, 0x1f,
    0xcb, 0x79, 0xe6, 0x4e, 0xcc, 0xc0, 0xe5, 0x78, 0x82, 0x5a, 0xd0, 0x7d, 0xcc, 0xff, 0x72, 0x21,
    0xb8, 0x08, 0x46, 0x74, 0xf7, 0x43, 0x24, 0x8e, 0xe0, 0x35, 0x90, 0xe6, 0x81, 0x3a, 0x26, 0x4c,
    0x3c, 0x28, 0x52, 0xbb, 0x91, 0xc3, 0x00, 0xcb, 0x88, 0xd0, 0x65, 0x8b, 0x1b, 0x53, 0x2e, 0xa3,
    0x71, 0x64, 0x48, 0x97, 0xa2, 0x0d, 0xf9, 0x4e, 0x38, 0x19, 0xef, 0x46, 0xa9, 0xde, 0xac, 0xd8,
    0xa8, 0xfa, 0x76, 0x3f, 0xe3, 0x9c, 0x34, 0x3f, 0xf9, 0xdc, 0xbb, 0xc7, 0xc7, 0x0b, 0x4f, 0x1d,
    0x8a, 0x51, 0xe0, 0x4b, 0xcd, 0xb4, 0x59, 0x31, 0xc8, 0x9f, 0x7e, 0xc9, 0xd9, 0x78, 0x73, 0x64,
    0xea, 0xc5, 0xac, 0x83, 0x34, 0xd3, 0xeb, 0xc3, 0xc5, 0x81, 0xa0, 0xff, 0xfa, 0x13, 0x63, 0xeb,
    0x17, 0x0d, 0xdd, 0x51, 0xb7, 0xf0, 0xda, 0x49, 0xd3, 0x16, 0x55, 0x26, 0x29, 0xd4, 0x68, 0x9e,
    0x2b, 0x16, 0xbe, 0x58, 0x7d, 0x47, 0xa1, 0xfc, 0x8f, 0xf8, 0xb8, 0xd1, 0x7a, 0xd0, 0x31, 0xce,
    0x45, 0xcb, 0x3a, 0x8f, 0x95, 0x16, 0x04, 0x28, 0xaf, 0xd7, 0xfb, 0xca, 0xbb, 0x4b, 0x40, 0x7e,
])


def resolve_path(filename: str) -> Path:
    """
    Canonicalize a file name to an absolute, symlink-free path.

    Args:
        filename: File name as given on the command line

    Returns:
        Resolved path

    Raises:
        PathResolutionError: If the path does not exist or cannot be resolved
    """
    name = filename.strip()
    try:
        return Path(name).resolve(strict=True)
    except OSError as e:
        raise PathResolutionError(name, e) from e


def derive_secret(seed: int) -> bytes:
    """
    Expand a seed into a 192-byte XXH3 custom secret.

    Each 16-byte block of the default secret is read as two little-endian
    u64 words; the seed is added to the first and subtracted from the
    second, wrapping at 64 bits. Seed 0 returns the default secret.
    """
    if seed == 0:
        return XXH3_DEFAULT_SECRET

    out = bytearray()
    for pos in range(0, len(XXH3_DEFAULT_SECRET), 16):
        lo = int.from_bytes(XXH3_DEFAULT_SECRET[pos:pos + 8], 'little')
        hi = int.from_bytes(XXH3_DEFAULT_SECRET[pos + 8:pos + 16], 'little')
        out += ((lo + seed) & U64_MASK).to_bytes(8, 'little')
        out += ((hi - seed) & U64_MASK).to_bytes(8, 'little')
    return bytes(out)


def generate_secret_text(seed: int) -> str:
    """
    Derive a secret from ``seed`` and decode it as UTF-8 text.

    Raises:
        SecretGenerationError: If the derived bytes are not valid UTF-8
    """
    try:
        return derive_secret(seed).decode('utf-8')
    except UnicodeDecodeError as e:
        raise SecretGenerationError(seed, e) from e


def resolve_keying(config: RunConfig) -> KeyMaterial:
    """
    Resolve the seed and secret used for a run.

    An explicit non-zero seed replaces DEFAULT_SEED. With
    ``generate_secret`` set, the secret is derived from that seed instead
    of taken from the command line.
    """
    default_seed = config.seed if config.seed != 0 else DEFAULT_SEED
    secret = config.secret

    if config.generate_secret:
        logger.debug(f"Deriving secret from seed {default_seed}")
        secret = generate_secret_text(default_seed)

    return KeyMaterial(
        default_seed=default_seed,
        seed=config.seed,
        input_secret=config.secret,
        secret=secret.encode('utf-8'),
    )
