"""Pytest configuration and shared fixtures for klaw-sampling tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

    from klaw_sampling import UniformSource

SEED = 20240611


@pytest.fixture
def source() -> UniformSource:
    """Deterministic stdlib source."""
    from klaw_sampling import StdlibSource

    return StdlibSource(seed=SEED)


@pytest.fixture(params=['stdlib', 'numpy'])
def any_source(request: pytest.FixtureRequest) -> UniformSource:
    """Deterministic source of each built-in kind."""
    from klaw_sampling import make_source

    return make_source(request.param, seed=SEED)


@pytest.fixture
def reset_config() -> Generator[None]:
    """Restore the global configuration and ambient source after a test."""
    from klaw_sampling import _config

    saved = (_config._config, _config._source)
    _config._config = None
    _config._source = None
    yield
    _config._config, _config._source = saved


@pytest.fixture
def reset_logging() -> Generator[None]:
    """Undo structlog configuration and restore the package logger after a test."""
    import logging

    import structlog
    from klaw_sampling._logging import LOGGER_NAME

    package_logger = logging.getLogger(LOGGER_NAME)
    saved = (package_logger.handlers[:], package_logger.level, package_logger.propagate)
    yield
    structlog.reset_defaults()
    package_logger.handlers[:], level, package_logger.propagate = saved
    package_logger.setLevel(level)
