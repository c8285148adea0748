"""Shared pytest fixtures."""

import logging

import pytest

from chunkhash.keying import resolve_keying
from chunkhash.models import Algorithm, RunConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and any .env file."""
    for key in ('CHUNKHASH_SIZE', 'CHUNKHASH_ALGORITHM', 'CHUNKHASH_SEED',
                'LOG_LEVEL', 'LOG_FILE', 'LOG_MAX_FILES'):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def make_file(tmp_path):
    """Return a factory that writes ``content`` to a file and returns its path."""
    def _make(content: bytes, name: str = 'data.bin'):
        path = tmp_path / name
        path.write_bytes(content)
        return path
    return _make


@pytest.fixture
def ten_byte_file(make_file):
    return make_file(b'0123456789')


@pytest.fixture
def make_run():
    """Return a factory building a RunConfig and its resolved keys."""
    def _make(path, chunk_size=4, algorithm=Algorithm.XX64, seed=0, secret='', generate_secret=False):
        config = RunConfig(
            file_path=str(path),
            chunk_size=chunk_size,
            algorithm=algorithm,
            seed=seed,
            secret=secret,
            generate_secret=generate_secret,
        )
        return config, resolve_keying(config)
    return _make


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logger()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
