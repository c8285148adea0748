"""Chunk digest functions using xxHash.

Secret keying is not native XXH3 with-secret hashing: the secret is folded
into a 64-bit seed (see ``secret_to_seed``), so secret-keyed digests do not
match ``XXH3_64bits_withSecret`` or ``XXH3_128bits_withSecret`` output.
"""

from typing import Callable

import xxhash

from chunkhash.models import Algorithm, KeyingMode, KeyMaterial

DigestFunc = Callable[[bytes], int]

XXH32_SEED_MASK = 0xFFFFFFFF


def secret_to_seed(secret: bytes) -> int:
    """
    Fold secret bytes into a 64-bit XXH3 seed.

    The xxhash bindings only key XXH3 with a numeric seed, so the secret is
    reduced with XXH64 first. The same secret always gives the same seed.
    """
    return xxhash.xxh64_intdigest(secret)


def xxh128_digest(data: bytes, seed: int = 0) -> int:
    return xxhash.xxh3_128_intdigest(data, seed=seed)


def xxh64_digest(data: bytes, seed: int = 0) -> int:
    return xxhash.xxh3_64_intdigest(data, seed=seed)


def xxh32_digest(data: bytes, seed: int = 0) -> int:
    return xxhash.xxh32_intdigest(data, seed=seed & XXH32_SEED_MASK)


_XXH3_FUNCS = {
    Algorithm.XX128: xxh128_digest,
    Algorithm.XX64: xxh64_digest,
}


def effective_mode(algorithm: Algorithm, keys: KeyMaterial) -> KeyingMode:
    """Keying mode actually applied; XXH32 is always seeded."""
    if not algorithm.supports_secret:
        return KeyingMode.SEED
    return keys.mode


def select_digest(algorithm: Algorithm, keys: KeyMaterial) -> DigestFunc:
    """
    Pick the digest function used for every chunk of a run.

    Args:
        algorithm: xxHash variant
        keys: Resolved keying material

    Returns:
        Function mapping chunk bytes to an unsigned integer digest
    """
    if algorithm is Algorithm.XX32:
        seed32 = keys.default_seed
        return lambda data: xxh32_digest(data, seed32)

    func = _XXH3_FUNCS[algorithm]
    mode = effective_mode(algorithm, keys)
    if mode is KeyingMode.SECRET:
        secret_seed = secret_to_seed(keys.secret)
        return lambda data: func(data, secret_seed)
    if mode is KeyingMode.SEED:
        seed = keys.seed
        return lambda data: func(data, seed)
    return func
