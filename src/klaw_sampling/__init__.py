"""klaw-sampling: Random sampling toolkit for the Klaw ecosystem.

Derives uniformly distributed integers, floats, durations, angles and 2-D
vectors from a single uniform source, shuffles containers in place and draws
fixed-size samples with or without repeats.

Flat imports (preferred):
    from klaw_sampling import StdlibSource, next_int, shuffle, get_items
    from klaw_sampling import Sampler

Submodule imports (for organization):
    from klaw_sampling.ranges import next_float, next_int
    from klaw_sampling.shuffle import Span, shuffle
    from klaw_sampling.selection import get_items
"""

# Configuration
from klaw_sampling._config import SamplingConfig, default_source, get_config, init

# Logging
from klaw_sampling._logging import configure_logging, get_logger

# Errors
from klaw_sampling.errors import (
    InvalidCount,
    InvalidCountError,
    InvalidRange,
    InvalidRangeError,
    UnsupportedContainer,
    UnsupportedContainerError,
)

# Value types
from klaw_sampling.geometry import TAU, Angle, Vector2

# Range samplers
from klaw_sampling.ranges import (
    next_angle,
    next_byte,
    next_bytes,
    next_duration,
    next_float,
    next_int,
    prob,
    uniform_float,
)

# Facade
from klaw_sampling.sampler import Sampler

# Selection
from klaw_sampling.selection import get_items

# Shuffling
from klaw_sampling.shuffle import (
    ArrayView,
    SequenceView,
    Span,
    Swappable,
    as_swappable,
    shuffle,
    shuffle_tail,
)

# Sources
from klaw_sampling.source import (
    NumpySource,
    SourceKind,
    StdlibSource,
    UniformSource,
    make_source,
)

# Vectors
from klaw_sampling.vectors import (
    next_vector2,
    next_vector2_box,
    next_vector2_symmetric_box,
)

__all__ = [
    'TAU',
    'Angle',
    'ArrayView',
    'InvalidCount',
    'InvalidCountError',
    'InvalidRange',
    'InvalidRangeError',
    'NumpySource',
    'Sampler',
    'SamplingConfig',
    'SequenceView',
    'SourceKind',
    'Span',
    'StdlibSource',
    'Swappable',
    'UniformSource',
    'UnsupportedContainer',
    'UnsupportedContainerError',
    'Vector2',
    'as_swappable',
    'configure_logging',
    'default_source',
    'get_config',
    'get_items',
    'get_logger',
    'init',
    'make_source',
    'next_angle',
    'next_byte',
    'next_bytes',
    'next_duration',
    'next_float',
    'next_int',
    'next_vector2',
    'next_vector2_box',
    'next_vector2_symmetric_box',
    'prob',
    'shuffle',
    'shuffle_tail',
    'uniform_float',
]
