"""Sampling configuration: SamplingConfig, initialization and the ambient source."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from klaw_sampling._logging import configure_logging, get_logger
from klaw_sampling.source import SourceKind, UniformSource, make_source

__all__ = [
    'SamplingConfig',
    'default_source',
    'get_config',
    'init',
]


@dataclass(frozen=True)
class SamplingConfig:
    """Configuration for klaw-sampling.

    Attributes:
        source: Which built-in source backs the ambient default.
        seed: Seed for the ambient source. None = OS entropy.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    source: SourceKind = SourceKind.STDLIB
    seed: int | None = None
    log_level: str | None = None


# Global configuration and ambient source (set by init())
_config: SamplingConfig | None = None
_source: UniformSource | None = None


def _detect_source_kind() -> SourceKind:
    """Detect the source kind from KLAW_SAMPLING_SOURCE, defaulting to stdlib."""
    env_source = os.environ.get('KLAW_SAMPLING_SOURCE', '').lower()
    if not env_source:
        return SourceKind.STDLIB
    try:
        return SourceKind(env_source)
    except ValueError:
        logging.warning("Unknown KLAW_SAMPLING_SOURCE value '%s', defaulting to stdlib", env_source)
        return SourceKind.STDLIB


def _detect_seed() -> int | None:
    """Detect a seed from KLAW_SAMPLING_SEED, ignoring values that are not integers."""
    env_seed = os.environ.get('KLAW_SAMPLING_SEED', '').strip()
    if not env_seed:
        return None
    try:
        return int(env_seed)
    except ValueError:
        logging.warning("Invalid KLAW_SAMPLING_SEED value '%s', ignoring", env_seed)
        return None


def init(
    source: SourceKind | str | None = None,
    seed: int | None = None,
    log_level: str | None = None,
) -> SamplingConfig:
    """Initialize klaw-sampling and build the ambient default source.

    Explicit arguments win over the environment (``KLAW_SAMPLING_SOURCE``,
    ``KLAW_SAMPLING_SEED``). Calling ``init`` again replaces the ambient
    source with a fresh one.

    Args:
        source: Source kind. Auto-detected if None.
            Can be SourceKind enum or string ("stdlib", "numpy").
        seed: Seed for the ambient source. Auto-detected if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The SamplingConfig that was set.

    Example:
        ```python
        from klaw_sampling import init, Sampler

        init(source='numpy', seed=1234, log_level='DEBUG')
        Sampler().next_int(10)
        ```
    """
    global _config, _source  # noqa: PLW0603

    if source is None:
        resolved_source = _detect_source_kind()
    elif isinstance(source, str):
        resolved_source = SourceKind(source.lower())
    else:
        resolved_source = source

    resolved_seed = _detect_seed() if seed is None else seed

    _config = SamplingConfig(
        source=resolved_source,
        seed=resolved_seed,
        log_level=log_level,
    )
    _source = make_source(resolved_source, resolved_seed)

    if log_level is not None:
        configure_logging(log_level)

    get_logger(source=_source).info('sampling.initialized', seed=resolved_seed)
    return _config


def get_config() -> SamplingConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-sampling not initialized. Call init() first.'
        raise RuntimeError(msg)
    return _config


def default_source() -> UniformSource:
    """Get the ambient source, calling ``init()`` with defaults on first use."""
    if _source is None:
        init()
    assert _source is not None
    return _source
