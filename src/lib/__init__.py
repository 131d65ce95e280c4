"""
wsconvert - WordStar to Unicode text converter

Converts legacy WordStar documents into plain UTF-8 text, rendering emphasis
with Unicode styled characters or Markdown.
"""

__version__ = "1.0.0"

from .filters import Converter
from .files import ConversionError, process, directory_process, sources_glob
from .log import LOG, state_connectToLogger

__all__ = [
    "Converter",
    "ConversionError",
    "process",
    "directory_process",
    "sources_glob",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
