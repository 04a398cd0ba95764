"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by adapters, the composition root, and
consuming applications. The hierarchy lives in the domain layer so adapters
depend on it and never the other way round.

Contents
--------
* :class:`ConfigError` – umbrella base class for all library failures.
* :class:`InvalidFormat` – malformed properties text (bad escapes, bad bytes).
* :class:`NotFound` – an optional file or resource is absent.
* :class:`PropertiesLoadError` – a located file could not be loaded.

System Role
-----------
Absence during the file search is never an error: the locator converts
:class:`NotFound` into ``None``. A located file that cannot be read or parsed
is fatal and surfaces as :class:`PropertiesLoadError` with the original
exception chained as ``__cause__``.
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base type for all exceptions emitted by ``lib_properties_resolver``."""


class InvalidFormat(ConfigError):
    """Raised when properties text cannot be parsed.

    Typical Sources
    ---------------
    Malformed ``\\uXXXX`` escapes and files that are not valid UTF-8.
    """


class NotFound(ConfigError):
    """Represents missing-but-optional resources (files, archive members, packages).

    Why
    ----
    Resource loaders may signal absence by raising instead of returning
    ``None``; the locator treats both the same way and keeps searching.
    """


class PropertiesLoadError(ConfigError):
    """Raised when a resolved properties location cannot be opened, read, or parsed.

    Why
    ----
    A located file that fails to load must never degrade into an empty store.
    Callers catch this type to distinguish "broken file" from "no file".

    What
    -----
    Carries the offending location for diagnostics; the underlying exception is
    always attached via ``raise ... from``.
    """

    def __init__(self, message: str, *, location: str | None = None) -> None:
        super().__init__(message)
        self.location = location
