"""Unit tests for Config class."""

import pytest

from chunkhash.config import DEFAULT_CHUNK_SIZE, MAX_SEED, Config
from chunkhash.models import Algorithm


class TestConfigDefaults:

    def test_defaults(self):
        config = Config()
        assert config.chunk_size == DEFAULT_CHUNK_SIZE == 131072
        assert config.algorithm is Algorithm.XX128
        assert config.seed == 0
        assert config.log_level == 'WARNING'
        assert config.log_file is None
        assert config.log_max_files == 5

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv('CHUNKHASH_SIZE', '4096')
        monkeypatch.setenv('CHUNKHASH_ALGORITHM', 'XX32')
        monkeypatch.setenv('CHUNKHASH_SEED', '99')
        monkeypatch.setenv('LOG_LEVEL', 'debug')
        monkeypatch.setenv('LOG_FILE', '/tmp/chunkhash.log')
        monkeypatch.setenv('LOG_MAX_FILES', '0')

        config = Config()
        assert config.chunk_size == 4096
        assert config.algorithm is Algorithm.XX32
        assert config.seed == 99
        assert config.log_level == 'DEBUG'
        assert config.log_file == '/tmp/chunkhash.log'
        assert config.log_max_files == 0

    def test_dotenv_file_loaded(self, tmp_path):
        """Test that a .env file in the working directory is read."""
        (tmp_path / '.env').write_text('CHUNKHASH_SIZE=512\nCHUNKHASH_ALGORITHM=xx64\n')
        config = Config()
        assert config.chunk_size == 512
        assert config.algorithm is Algorithm.XX64

    def test_str(self):
        text = str(Config())
        assert 'chunk_size=131072' in text
        assert 'algorithm=xx128' in text
        assert 'log_file=none' in text


class TestConfigValidation:
    """Test Config validation and error handling."""

    def test_size_not_integer(self, monkeypatch):
        monkeypatch.setenv('CHUNKHASH_SIZE', 'big')
        with pytest.raises(ValueError, match="CHUNKHASH_SIZE must be an integer"):
            Config()

    def test_size_zero(self, monkeypatch):
        monkeypatch.setenv('CHUNKHASH_SIZE', '0')
        with pytest.raises(ValueError, match="Chunk size must be > 0"):
            Config()

    def test_invalid_algorithm(self, monkeypatch):
        monkeypatch.setenv('CHUNKHASH_ALGORITHM', 'md5')
        with pytest.raises(ValueError, match="Invalid algorithm 'md5'"):
            Config()

    def test_seed_out_of_range(self, monkeypatch):
        monkeypatch.setenv('CHUNKHASH_SEED', str(MAX_SEED + 1))
        with pytest.raises(ValueError, match="unsigned 64-bit"):
            Config()

    def test_negative_seed(self, monkeypatch):
        monkeypatch.setenv('CHUNKHASH_SEED', '-1')
        with pytest.raises(ValueError, match="unsigned 64-bit"):
            Config()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv('LOG_LEVEL', 'LOUD')
        with pytest.raises(ValueError, match="LOG_LEVEL must be one of"):
            Config()

    def test_negative_log_max_files(self, monkeypatch):
        monkeypatch.setenv('LOG_MAX_FILES', '-1')
        with pytest.raises(ValueError, match="LOG_MAX_FILES must be >= 0"):
            Config()


class TestBuildRunConfig:

    def test_env_defaults_used(self, monkeypatch):
        monkeypatch.setenv('CHUNKHASH_SIZE', '64')
        monkeypatch.setenv('CHUNKHASH_SEED', '8')
        run = Config().build_run_config('file.bin')
        assert run.file_path == 'file.bin'
        assert run.chunk_size == 64
        assert run.seed == 8
        assert run.algorithm is Algorithm.XX128
        assert run.secret == ''
        assert not run.generate_secret
        assert not run.verbose

    def test_cli_values_override_env(self, monkeypatch):
        monkeypatch.setenv('CHUNKHASH_SIZE', '64')
        monkeypatch.setenv('CHUNKHASH_SEED', '8')
        run = Config().build_run_config(
            'file.bin', size=16, algorithm=Algorithm.XX64, seed=0,
            secret='s', generate_secret=True, verbose=True,
        )
        assert run.chunk_size == 16
        assert run.algorithm is Algorithm.XX64
        assert run.seed == 0
        assert run.secret == 's'
        assert run.generate_secret
        assert run.verbose

    def test_rejects_bad_values(self):
        config = Config()
        with pytest.raises(ValueError, match="Chunk size must be > 0"):
            config.build_run_config('file.bin', size=-4)
        with pytest.raises(ValueError, match="unsigned 64-bit"):
            config.build_run_config('file.bin', seed=2**64)
