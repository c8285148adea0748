"""Fatal errors raised while hashing a file."""


class ChunkHashError(Exception):
    """Base class for errors that abort a run."""


class PathResolutionError(ChunkHashError):
    """The file name does not resolve to an existing path."""

    def __init__(self, path: str, reason: OSError):
        self.path = path
        super().__init__(f"Error while canonicalizing {path!r}: {reason}")


class FileOpenError(ChunkHashError):
    """The path exists but cannot be opened for reading."""

    def __init__(self, path: str, reason: OSError):
        self.path = path
        super().__init__(f"Error while opening the file {path!r}: {reason}")


class SeekError(ChunkHashError):
    """The file cannot be repositioned."""

    def __init__(self, offset: int | None, reason: OSError):
        self.offset = offset
        where = 'end of file' if offset is None else f"pos {offset}"
        super().__init__(f"Error while seeking at {where}: {reason}")


class ReadError(ChunkHashError):
    """A read at the given offset failed."""

    def __init__(self, offset: int, reason: OSError):
        self.offset = offset
        super().__init__(f"Error {reason} while reading at offset {offset}")


class SecretGenerationError(ChunkHashError):
    """Derived secret bytes are not valid text."""

    def __init__(self, seed: int, reason: UnicodeDecodeError):
        self.seed = seed
        super().__init__(f"Error while generating secret from seed {seed}: {reason}")
