"""Reader for Java-style ``.properties`` files.

The font configuration is a properties file mapping logical font names to
font file paths:

    # Fonts used by the report renderer
    heading = fonts/Header.ttf
    body: fonts/Body.ttf

Supported syntax: ``#`` and ``!`` comment lines, ``=``/``:``/whitespace
separators, backslash line continuation and the ``\\t \\n \\r \\f \\uXXXX``
escapes. Files are decoded as ISO-8859-1.
"""

import re
import string
from collections.abc import Iterator
from pathlib import Path

from fontfactory.exceptions import ConfigUnreadableError, PropertiesSyntaxError

PROPERTIES_ENCODING = "iso-8859-1"

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def load_properties(path: Path) -> dict[str, str]:
    """Read and parse a properties file.

    Args:
        path: Properties file location

    Returns:
        Mapping of keys to values in file order

    Raises:
        ConfigUnreadableError: If the file is missing or cannot be read
        PropertiesSyntaxError: If the file contains a malformed escape
    """
    try:
        text = path.read_text(encoding=PROPERTIES_ENCODING)
    except OSError as e:
        raise ConfigUnreadableError(str(path), e.strerror or str(e)) from e

    return parse_properties(text)


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dictionary.

    Later duplicates of a key replace earlier ones.

    Raises:
        PropertiesSyntaxError: If the text contains a malformed escape
    """
    entries: dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        key, value = _split_entry(line)
        entries[_unescape(key, line_number)] = _unescape(value, line_number)
    return entries


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (starting line number, logical line) pairs.

    Comment and blank lines are dropped, continuation lines are joined and
    the leading whitespace of every natural line is stripped.
    """
    pending: str | None = None
    start = 0

    for number, raw in enumerate(_LINE_BREAK.split(text), start=1):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in _COMMENT_MARKERS:
                continue
            start = number

        if _continues(line):
            pending = (pending or "") + line[:-1]
            continue

        yield start, (pending or "") + line
        pending = None

    if pending is not None:
        yield start, pending


def _continues(line: str) -> bool:
    """A line continues when it ends with an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def _unescape(text: str, line_number: int) -> str:
    if "\\" not in text:
        return text

    chars: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\":
            chars.append(char)
            i += 1
            continue

        i += 1
        if i >= len(text):
            break
        char = text[i]
        if char == "u":
            digits = text[i + 1 : i + 5]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise PropertiesSyntaxError(line_number, "Malformed \\uxxxx encoding")
            chars.append(chr(int(digits, 16)))
            i += 5
            continue
        chars.append(_ESCAPES.get(char, char))
        i += 1

    # \uXXXX pairs may encode a surrogate pair
    try:
        return "".join(chars).encode("utf-16", "surrogatepass").decode("utf-16")
    except UnicodeDecodeError as e:
        raise PropertiesSyntaxError(line_number, "Unpaired surrogate in \\uxxxx encoding") from e
