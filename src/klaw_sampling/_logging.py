"""Structured logging for klaw-sampling.

The package emits very few events: ``sampling.initialized``, ``source.reseeded``
and ``selection.count_exceeds_population``. Each one is tagged with the kind of
source that produced it. Nothing is printed until ``configure_logging`` runs
(directly or through ``init(log_level=...)``). It installs a handler on the
``klaw_sampling`` logger only, so the host application's root logging is left
alone.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any, TextIO

import structlog

if TYPE_CHECKING:
    from structlog.typing import EventDict, Processor, WrappedLogger

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'klaw_sampling'


def _enum_values(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Render enum members (``SourceKind.NUMPY``) as their plain values (``'numpy'``)."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def _pre_chain() -> list[Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso', utc=True),
        _enum_values,
    ]


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Route klaw-sampling events to a stream.

    Records from structlog and from plain ``logging.getLogger('klaw_sampling...')``
    calls share one formatter, so both render identically.

    Args:
        level: Minimum level name. Unknown names fall back to INFO.
        json_output: One JSON object per line if True, otherwise console output.
        stream: Destination. Defaults to ``sys.stderr`` at call time.

    Example:
        ```python
        from klaw_sampling import StdlibSource, configure_logging

        configure_logging('DEBUG', json_output=False)
        StdlibSource(1).reseed(2)  # source.reseeded source=stdlib seed=2
        ```
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_pre_chain(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    out = stream if stream is not None else sys.stderr
    if json_output:
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=out.isatty())

    handler = logging.StreamHandler(out)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_pre_chain(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False


def get_logger(source: Any = None, **context: Any) -> Any:
    """Get the package logger, optionally bound to a source.

    Args:
        source: A uniform source. Its ``kind`` (or type name for custom
            sources) is bound as the ``source`` field.
        **context: Extra key/value pairs bound to every event.

    Returns:
        A structlog logger over the stdlib ``klaw_sampling`` logger.
    """
    if source is not None:
        context['source'] = getattr(source, 'kind', None) or type(source).__name__
    logger = structlog.wrap_logger(logging.getLogger(LOGGER_NAME))
    return logger.bind(**context) if context else logger
