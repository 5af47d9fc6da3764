"""Reading and writing scorebook files."""

from . import roster
from . import scales

__all__ = ["roster", "scales"]
