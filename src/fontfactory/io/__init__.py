"""Font I/O layer for fontfactory.

This module handles parsing font files using fonttools and exposes the
platform font environment the registry falls back to.

Key classes:
- TypefaceReader: Parse TTF/OTF files into Typeface resources
- FontEnvironment: Protocol for the platform font environment
- SystemFontEnvironment: Platform fonts discovered through matplotlib
"""

from fontfactory.io.environment import FontEnvironment, SystemFontEnvironment
from fontfactory.io.reader import TypefaceReader, read_typeface

__all__ = [
    "FontEnvironment",
    "SystemFontEnvironment",
    "TypefaceReader",
    "read_typeface",
]
