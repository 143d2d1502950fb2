"""Tests for configuration and the ambient source."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from klaw_sampling import (
    NumpySource,
    SamplingConfig,
    SourceKind,
    StdlibSource,
    default_source,
    get_config,
    init,
)
from klaw_sampling._config import _detect_seed, _detect_source_kind
from structlog.testing import capture_logs

pytestmark = pytest.mark.usefixtures('reset_config')


class TestSourceKindEnum:
    """Tests for the SourceKind enum."""

    def test_values(self) -> None:
        assert SourceKind.STDLIB.value == 'stdlib'
        assert SourceKind.NUMPY.value == 'numpy'

    def test_invalid_raises(self) -> None:
        with pytest.raises(ValueError):
            SourceKind('invalid')


class TestSamplingConfig:
    """Tests for the SamplingConfig dataclass."""

    def test_default_values(self) -> None:
        config = SamplingConfig()
        assert config.source == SourceKind.STDLIB
        assert config.seed is None
        assert config.log_level is None

    def test_config_is_frozen(self) -> None:
        config = SamplingConfig()
        with pytest.raises(AttributeError):
            config.seed = 3  # type: ignore[misc]


class TestDetectSourceKind:
    """Tests for _detect_source_kind()."""

    def test_env_numpy(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SOURCE': 'numpy'}):
            assert _detect_source_kind() == SourceKind.NUMPY

    def test_env_case_insensitive(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SOURCE': 'STDLIB'}):
            assert _detect_source_kind() == SourceKind.STDLIB

    def test_env_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_source_kind() == SourceKind.STDLIB

    def test_env_unknown_warns_and_defaults(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SOURCE': 'quantum'}):
            assert _detect_source_kind() == SourceKind.STDLIB
        assert 'quantum' in caplog.text


class TestDetectSeed:
    """Tests for _detect_seed()."""

    def test_env_seed(self) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SEED': ' 1234 '}):
            assert _detect_seed() == 1234

    def test_env_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_seed() is None

    def test_env_invalid_warns_and_ignores(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.dict(os.environ, {'KLAW_SAMPLING_SEED': 'abc'}):
            assert _detect_seed() is None
        assert 'abc' in caplog.text


class TestInit:
    """Tests for init(), get_config() and default_source()."""

    def test_get_config_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError):
            get_config()

    def test_explicit_arguments(self) -> None:
        config = init(source='numpy', seed=5)
        assert config == SamplingConfig(source=SourceKind.NUMPY, seed=5)
        assert get_config() is config
        assert isinstance(default_source(), NumpySource)
        assert default_source().seed == 5

    def test_enum_argument(self) -> None:
        init(source=SourceKind.STDLIB, seed=1)
        assert isinstance(default_source(), StdlibSource)

    def test_environment_used_when_arguments_missing(self) -> None:
        env = {'KLAW_SAMPLING_SOURCE': 'numpy', 'KLAW_SAMPLING_SEED': '77'}
        with patch.dict(os.environ, env):
            config = init()
        assert config.source == SourceKind.NUMPY
        assert config.seed == 77

    def test_arguments_override_environment(self) -> None:
        env = {'KLAW_SAMPLING_SOURCE': 'numpy', 'KLAW_SAMPLING_SEED': '77'}
        with patch.dict(os.environ, env):
            config = init(source='stdlib', seed=3)
        assert config.source == SourceKind.STDLIB
        assert config.seed == 3

    def test_seeded_ambient_source_is_reproducible(self) -> None:
        init(seed=9)
        first = default_source().next_uint64()
        init(seed=9)
        assert default_source().next_uint64() == first

    def test_default_source_initializes_lazily(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            source = default_source()
        assert isinstance(source, StdlibSource)
        assert get_config() == SamplingConfig()
        assert default_source() is source

    def test_invalid_source_string_raises(self) -> None:
        with pytest.raises(ValueError):
            init(source='bogus')

    def test_log_level_configures_logging(self, reset_logging) -> None:
        with patch('klaw_sampling._config.configure_logging') as configure:
            init(seed=1, log_level='DEBUG')
        configure.assert_called_once_with('DEBUG')

    def test_init_logs_event(self) -> None:
        with capture_logs() as logs:
            init(source='numpy', seed=1)
        assert logs == [
            {'event': 'sampling.initialized', 'seed': 1, 'source': SourceKind.NUMPY, 'log_level': 'info'}
        ]

    def test_no_log_level_leaves_logging_alone(self) -> None:
        with patch('klaw_sampling._config.configure_logging') as configure:
            init(seed=1)
        configure.assert_not_called()
