"""Properties file loader.

Purpose
-------
Convert a located ``key=value`` properties file into a flat mapping of
strings. The parser follows the conventional properties syntax: logical lines
joined by trailing backslashes, ``#``/``!`` comments, ``=``/``:``/whitespace
separators, and backslash escapes including ``\\uXXXX``.

Contents
--------
* :func:`parse_properties` – pure text parser raising ``InvalidFormat``.
* :class:`PropertiesFileLoader` – reads plain files and zip archive members
  and wraps every failure in ``PropertiesLoadError``.
* Helpers (`_logical_lines`, `_split_entry`, `_unescape`) that narrate each
  parsing step.

System Role
-----------
Invoked once per resolver construction by
:class:`lib_properties_resolver.core.PropertiesResolver`.
"""

from __future__ import annotations

import re
import zipfile
from pathlib import Path
from typing import Iterator, Mapping

from ...domain.errors import InvalidFormat, PropertiesLoadError
from ...domain.location import FileLocation
from ...observability import log_debug, log_error

_NATURAL_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}


def parse_properties(text: str, *, source: str = "<string>") -> dict[str, str]:
    """Parse properties *text* into a dictionary; later duplicates win.

    Parameters
    ----------
    text:
        Decoded file contents.
    source:
        Name used in error messages.

    Raises
    ------
    InvalidFormat
        When a ``\\u`` escape is not followed by four hexadecimal digits.

    Examples
    --------
    >>> parse_properties("# comment\\nname = server1\\nlocators:host[10334]")
    {'name': 'server1', 'locators': 'host[10334]'}
    >>> parse_properties("path=a\\\\\\n    b\\nkey\\\\ with\\\\=sep value")
    {'path': 'ab', 'key with=sep': 'value'}
    >>> parse_properties("bad=\\\\u12")
    Traceback (most recent call last):
    ...
    lib_properties_resolver.domain.errors.InvalidFormat: Malformed \\uxxxx escape on line 1 of <string>
    """

    result: dict[str, str] = {}
    for line_number, logical in _logical_lines(text):
        raw_key, raw_value = _split_entry(logical)
        key = _unescape(raw_key, line_number=line_number, source=source)
        result[key] = _unescape(raw_value, line_number=line_number, source=source)
    return result


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, logical_line)`` pairs with comments and blanks removed.

    A natural line ending in an odd number of backslashes continues onto the
    next one, whose leading whitespace is discarded. Comment markers only count
    at the start of a logical line.
    """

    parts: list[str] = []
    start = 0
    for number, natural in enumerate(_NATURAL_LINE_BREAK.split(text), start=1):
        stripped = natural.lstrip(_WHITESPACE)
        if not parts:
            if not stripped or stripped[0] in _COMMENT_MARKERS:
                continue
            start = number
        trailing = len(stripped) - len(stripped.rstrip("\\"))
        if trailing % 2 == 1:
            parts.append(stripped[:-1])
            continue
        parts.append(stripped)
        yield start, "".join(parts)
        parts = []
    if parts:
        yield start, "".join(parts)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical *line* into raw (still escaped) key and value.

    Examples
    --------
    >>> _split_entry("key value")
    ('key', 'value')
    >>> _split_entry("key  =  value")
    ('key', 'value')
    >>> _split_entry("a\\\\=b=c")
    ('a\\\\=b', 'c')
    >>> _split_entry("lonely")
    ('lonely', '')
    """

    length = len(line)
    key_end = length
    value_start = length
    has_separator = False
    index = 0
    while index < length:
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in _SEPARATORS:
            key_end, value_start, has_separator = index, index + 1, True
            break
        if char in _WHITESPACE:
            key_end, value_start = index, index + 1
            break
        index += 1
    key_end = min(key_end, length)
    while value_start < length:
        char = line[value_start]
        if char in _WHITESPACE:
            value_start += 1
        elif not has_separator and char in _SEPARATORS:
            has_separator = True
            value_start += 1
        else:
            break
    return line[:key_end], line[value_start:]


def _unescape(raw: str, *, line_number: int, source: str) -> str:
    """Resolve backslash escapes in *raw*."""

    if "\\" not in raw:
        return raw
    out: list[str] = []
    index = 0
    length = len(raw)
    while index < length:
        char = raw[index]
        index += 1
        if char != "\\":
            out.append(char)
            continue
        if index >= length:
            break
        escaped = raw[index]
        index += 1
        if escaped == "u":
            digits = raw[index : index + 4]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise InvalidFormat(f"Malformed \\uxxxx escape on line {line_number} of {source}")
            out.append(chr(int(digits, 16)))
            index += 4
        else:
            out.append(_ESCAPES.get(escaped, escaped))
    return "".join(out)


class PropertiesFileLoader:
    """Load a properties file from disk or from a zip archive member."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def load(self, location: FileLocation) -> Mapping[str, str]:
        """Return the pairs stored at *location*.

        Raises
        ------
        PropertiesLoadError
            When the location cannot be opened, read, decoded, or parsed. The
            original exception is chained as ``__cause__``.

        Examples
        --------
        >>> from tempfile import TemporaryDirectory
        >>> tmp = TemporaryDirectory()
        >>> target = Path(tmp.name) / "geode.properties"
        >>> _ = target.write_text("name=server1\\n", encoding="utf-8")
        >>> PropertiesFileLoader().load(FileLocation(target))["name"]
        'server1'
        >>> tmp.cleanup()
        """

        uri = location.uri
        try:
            payload = self._read(location)
            text = payload.decode(self.encoding)
            data = parse_properties(text, source=uri)
        except UnicodeDecodeError as exc:
            log_error("properties_file_invalid", layer="file", path=uri, error=str(exc))
            raise PropertiesLoadError(f"Failed reading {uri}: not valid {self.encoding} text", location=uri) from exc
        except InvalidFormat as exc:
            log_error("properties_file_invalid", layer="file", path=uri, error=str(exc))
            raise PropertiesLoadError(f"Failed reading {uri}: {exc}", location=uri) from exc
        except (OSError, KeyError, zipfile.BadZipFile) as exc:
            log_error("properties_file_unreadable", layer="file", path=uri, error=str(exc))
            raise PropertiesLoadError(f"Failed reading {uri}: {exc}", location=uri) from exc
        log_debug("properties_file_loaded", layer="file", path=uri, keys=len(data))
        return data

    @staticmethod
    def _read(location: FileLocation) -> bytes:
        """Return the raw bytes at *location*."""

        if location.member is None:
            payload = Path(location.path).read_bytes()
        else:
            with zipfile.ZipFile(location.path) as bundle:
                payload = bundle.read(location.member)
        log_debug("properties_file_read", layer="file", path=location.uri, size=len(payload))
        return payload
