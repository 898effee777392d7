"""
neatio - NEAT genome interchange and experiment persistence

Writes evolved genomes in the plain-text and YAML interchange formats, and
aggregates, reports and persists experiments made of repeated evolutionary
trials.
"""

__version__ = "0.1.0"

# Expose common submodules for convenience
from .core import *  # noqa: F401,F403
from .experiments import *  # noqa: F401,F403
from .genetics import *  # noqa: F401,F403
from .utils import *  # noqa: F401,F403

from .config import PRESET_COMPACT, PRESET_STANDARD  # noqa: F401
