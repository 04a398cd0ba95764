"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the composition root depends on so the
precedence logic never touches ``os.environ``, the filesystem, or
``importlib`` directly.

Contents
--------
* :class:`OverrideSource` – process-wide key/value space consulted first.
* :class:`ResourceLoader` – resource search path lookup (search location 3).
* :class:`FileLocator` – candidate-name search producing one location.
* :class:`PropertiesLoader` – parses a located file into a mapping.

System Role
-----------
These protocols enforce Dependency Inversion. Tests substitute plain mappings
and fake loaders; production wiring uses the adapters under
``lib_properties_resolver.adapters``.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from ..domain.location import FileLocation


@runtime_checkable
class OverrideSource(Protocol):
    """Read-only view of the process-wide override space.

    Why
    ----
    The resolver must not read ambient global state; the override space is
    injected so tests can run in parallel without save/restore tricks.
    """

    def get(self, key: str) -> Optional[str]:
        """Return the value stored under *key* or ``None``."""


@runtime_checkable
class ResourceLoader(Protocol):
    """Look up a file by name on a resource search path."""

    def resolve_resource(self, name: str) -> FileLocation | None:
        """Return the location of resource *name* or ``None`` when absent."""


@runtime_checkable
class FileLocator(Protocol):
    """Find the single properties file a process should load."""

    def locate(self, *names: str | None) -> FileLocation | None:
        """Search candidate *names* in order; ``None`` entries are skipped."""


@runtime_checkable
class PropertiesLoader(Protocol):
    """Parse the properties file at a location into raw key/value pairs."""

    def load(self, location: FileLocation) -> Mapping[str, str]:
        """Read *location* or raise ``PropertiesLoadError``."""
