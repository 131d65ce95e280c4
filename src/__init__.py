"""
wsconvert - WordStar to Unicode text converter

Converts legacy WordStar documents into plain UTF-8 text, rendering emphasis
with Unicode styled characters or Markdown.
"""

__version__ = "1.0.0"

from .lib import Converter, ConversionError, LOG, state_connectToLogger

__all__ = ["Converter", "ConversionError", "LOG", "state_connectToLogger", "__version__"]
