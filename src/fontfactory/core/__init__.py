"""Core font registry for fontfactory.

Key classes:
- FontRegistry: Logical-name font registry with system font fallback
"""

from fontfactory.core.registry import FontRegistry

__all__ = [
    "FontRegistry",
]
