"""Resource search path adapters (search location 3).

Purpose
-------
Implement the :class:`lib_properties_resolver.application.ports.ResourceLoader`
protocol. The locator asks for a bare file name; these adapters answer with a
:class:`FileLocation` or ``None`` and never raise for plain absence.

Contents
--------
* :class:`SearchPathResourceLoader` – ordered directories and zip archives,
  defaulting to :data:`sys.path`.
* :class:`PackageResourceLoader` – data files shipped inside an importable
  package via :mod:`importlib.resources`.
* :class:`ChainedResourceLoader` – first loader that yields a location wins.
* :class:`NullResourceLoader` – disables resource lookup entirely.
"""

from __future__ import annotations

import os
import sys
import zipfile
from importlib import resources
from pathlib import Path
from typing import Iterable, Sequence

from ...application.ports import ResourceLoader
from ...domain.errors import NotFound
from ...domain.location import FileLocation
from ...observability import log_debug
from ..filesystem import canonicalize, is_directory, is_regular_file


class SearchPathResourceLoader:
    """Search an ordered list of directories and zip archives for a resource.

    Why
    ----
    The interpreter's import path is the closest analogue of a classpath:
    configuration shipped next to code (in a source tree, a wheel unpacked on
    disk, or a zip application) can be found without knowing its location.
    """

    def __init__(self, roots: Iterable[str | os.PathLike[str]] | None = None) -> None:
        """Store the search roots.

        Parameters
        ----------
        roots:
            Directories and/or zip archives searched in order. ``None`` means
            "read :data:`sys.path` at lookup time". An empty entry stands for
            the current working directory, as it does on ``sys.path``.
        """

        self._roots: tuple[str, ...] | None = None if roots is None else tuple(os.fspath(root) for root in roots)

    @property
    def roots(self) -> tuple[str, ...]:
        return self._roots if self._roots is not None else tuple(sys.path)

    def resolve_resource(self, name: str) -> FileLocation | None:
        """Return the first match for *name* across the configured roots.

        Examples
        --------
        >>> from tempfile import TemporaryDirectory
        >>> tmp = TemporaryDirectory()
        >>> _ = (Path(tmp.name) / "geode.properties").write_text("name=a", encoding="utf-8")
        >>> loader = SearchPathResourceLoader([tmp.name])
        >>> loader.resolve_resource("geode.properties").path.name
        'geode.properties'
        >>> loader.resolve_resource("missing.properties") is None
        True
        >>> tmp.cleanup()
        """

        if not name or Path(name).is_absolute():
            return None
        member = name.replace("\\", "/")
        for root in self.roots:
            root_path = Path(root) if root else Path.cwd()
            if is_directory(root_path):
                location = _from_directory(root_path, name)
            elif is_regular_file(root_path):
                location = _from_archive(root_path, member)
            else:
                continue
            if location is not None:
                log_debug("resource_resolved", layer="resource", path=location.uri, root=root)
                return location
        return None


class PackageResourceLoader:
    """Resolve resources relative to an importable package."""

    def __init__(self, package: str) -> None:
        self.package = package

    def resolve_resource(self, name: str) -> FileLocation | None:
        """Return the location of *name* inside :attr:`package`.

        Raises
        ------
        NotFound
            When the package cannot be imported or is a plain module. The
            locator treats this like an absent resource.
        """

        try:
            root = resources.files(self.package)
        except (ModuleNotFoundError, TypeError) as exc:
            raise NotFound(f"Resource package {self.package!r} is not an importable package") from exc
        resource = root
        for part in name.replace("\\", "/").split("/"):
            if part:
                resource = resource.joinpath(part)
        if isinstance(resource, Path):
            if not is_regular_file(resource):
                return None
            location = FileLocation(canonicalize(resource))
        elif isinstance(resource, zipfile.Path):
            if not resource.is_file():
                return None
            archive = Path(resource.root.filename or "")
            location = FileLocation(canonicalize(archive), member=resource.at)
        else:
            log_debug("resource_unsupported", layer="resource", path=None, package=self.package, kind=type(resource).__name__)
            return None
        log_debug("resource_resolved", layer="resource", path=location.uri, package=self.package)
        return location


class ChainedResourceLoader:
    """Consult several resource loaders in order."""

    def __init__(self, loaders: Sequence[ResourceLoader]) -> None:
        self._loaders = tuple(loaders)

    def resolve_resource(self, name: str) -> FileLocation | None:
        for loader in self._loaders:
            try:
                location = loader.resolve_resource(name)
            except NotFound:
                continue
            if location is not None:
                return location
        return None


class NullResourceLoader:
    """Resource loader that never finds anything."""

    def resolve_resource(self, name: str) -> FileLocation | None:
        return None


def _from_directory(root: Path, name: str) -> FileLocation | None:
    """Return the regular file *name* below directory *root*, if any."""

    candidate = root / name
    if is_regular_file(candidate):
        return FileLocation(canonicalize(candidate))
    return None


def _from_archive(archive: Path, member: str) -> FileLocation | None:
    """Return *member* of zip *archive* when it exists and is not a directory."""

    if not zipfile.is_zipfile(archive):
        return None
    try:
        with zipfile.ZipFile(archive) as bundle:
            info = bundle.getinfo(member)
    except KeyError:
        return None
    except (zipfile.BadZipFile, OSError) as exc:
        log_debug("resource_archive_unreadable", layer="resource", path=str(archive), error=str(exc))
        return None
    if info.is_dir():
        return None
    return FileLocation(canonicalize(archive), member=member)
