"""Value object describing where a properties file was found.

Purpose
-------
Give the locator a single immutable result type that covers both plain files
and members of zip archives found on the resource search path, and give the
loader a single input type regardless of where the bytes live.

Contents
--------
* :class:`FileLocation` – absolute path plus optional archive member.
* :func:`FileLocation.parse` – coerce a path, ``file:`` URI or ``zip:`` URI.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

from .errors import InvalidFormat

_ZIP_SCHEME = "zip:"
_MEMBER_SEPARATOR = "!/"


@dataclass(frozen=True, slots=True)
class FileLocation:
    """Resolved location of a properties file.

    Attributes
    ----------
    path:
        Absolute filesystem path. When :attr:`member` is set this is the zip
        archive containing the file.
    member:
        Archive member name (``/``-separated) or ``None`` for plain files.

    Examples
    --------
    >>> FileLocation(Path('/etc/geode.properties')).uri
    'file:///etc/geode.properties'
    >>> FileLocation(Path('/opt/app.zip'), member='conf/geode.properties').uri
    'zip:file:///opt/app.zip!/conf/geode.properties'
    """

    path: Path
    member: str | None = None

    @property
    def uri(self) -> str:
        """Return the location as a URI string (``file:`` or ``zip:file:``)."""

        base = Path(self.path).absolute().as_uri()
        if self.member is None:
            return base
        return f"{_ZIP_SCHEME}{base}{_MEMBER_SEPARATOR}{self.member}"

    @property
    def is_archive_member(self) -> bool:
        return self.member is not None

    def __str__(self) -> str:
        return self.uri

    @classmethod
    def parse(cls, value: FileLocation | str | os.PathLike[str]) -> FileLocation:
        """Coerce *value* into a :class:`FileLocation`.

        Accepts an existing instance, a filesystem path, a ``file:`` URI, or a
        ``zip:file:<archive>!/<member>`` URI. Any other string without a
        ``scheme://`` authority is a filesystem path, so names such as
        ``conf:dev.properties`` stay paths. Relative paths are made absolute
        against the current working directory.

        Raises
        ------
        InvalidFormat
            For empty values, unsupported URI schemes, or ``zip:`` URIs without
            a member.

        Examples
        --------
        >>> FileLocation.parse('file:///tmp/a%20b.properties').path.as_posix()
        '/tmp/a b.properties'
        >>> FileLocation.parse('zip:file:///tmp/x.zip!/geode.properties').member
        'geode.properties'
        >>> FileLocation.parse('/tmp/conf:dev.properties').path.name
        'conf:dev.properties'
        >>> FileLocation.parse('http://example.com/geode.properties')
        Traceback (most recent call last):
        ...
        lib_properties_resolver.domain.errors.InvalidFormat: Unsupported location scheme 'http' in http://example.com/geode.properties
        """

        if isinstance(value, FileLocation):
            return value
        if isinstance(value, os.PathLike):
            return cls(Path(value).absolute())
        text = str(value).strip()
        if not text:
            raise InvalidFormat("Empty properties location")
        if text.startswith(_ZIP_SCHEME):
            archive, separator, member = text[len(_ZIP_SCHEME) :].partition(_MEMBER_SEPARATOR)
            if not separator or not member:
                raise InvalidFormat(f"Archive location without member: {text}")
            return cls(_path_from_file_uri(archive, original=text), member=member)
        if text.startswith("file:"):
            return cls(_path_from_file_uri(text, original=text))
        parsed = urlparse(text)
        if parsed.scheme and parsed.netloc:
            raise InvalidFormat(f"Unsupported location scheme {parsed.scheme!r} in {text}")
        return cls(Path(text).absolute())


def _path_from_file_uri(uri: str, *, original: str) -> Path:
    """Translate a ``file:`` URI into an absolute :class:`Path`."""

    parsed = urlparse(uri)
    if parsed.scheme != "file":
        raise InvalidFormat(f"Unsupported location scheme {parsed.scheme!r} in {original}")
    if parsed.netloc not in ("", "localhost"):
        raise InvalidFormat(f"Remote file locations are not supported: {original}")
    return Path(url2pathname(parsed.path)).absolute()
