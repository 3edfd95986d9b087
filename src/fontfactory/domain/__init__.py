"""Domain models for fontfactory.

Key classes:
- FontStyle: Plain, bold, italic or bold-italic
- Typeface: A font file parsed into memory
- Font: A typeface at a specific style and point size
"""

from fontfactory.domain.font import Font, Typeface
from fontfactory.domain.style import FontStyle

__all__: list[str] = [
    "Font",
    "FontStyle",
    "Typeface",
]
