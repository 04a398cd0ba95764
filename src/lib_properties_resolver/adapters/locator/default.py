"""Properties file search across working directory, home, and resources.

Purpose
-------
Implement the :class:`lib_properties_resolver.application.ports.FileLocator`
protocol. This adapter is the only component that knows where a properties
file may live; it performs existence checks only and never opens files.

Contents
--------
* :class:`DefaultFileLocator` – ordered search over candidate names.

System Role
-----------
Called by :func:`lib_properties_resolver.core.find_properties_file` with the
candidate names derived from the override source. The first regular file
found anywhere ends the search; finding nothing returns ``None``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

from ...application.ports import ResourceLoader
from ...domain.errors import NotFound
from ...domain.location import FileLocation
from ...observability import log_debug, log_info, make_event
from ..filesystem import canonicalize, is_regular_file
from ..resources.default import SearchPathResourceLoader


class DefaultFileLocator:
    """Search candidate file names in three fixed locations each.

    Why
    ----
    Keep the search order (working directory, home directory, resource search
    path) in one place and make every location injectable for tests.
    """

    def __init__(
        self,
        *,
        cwd: Path | None = None,
        home: Path | None = None,
        resources: ResourceLoader | None = None,
    ) -> None:
        """Store the search context.

        Parameters
        ----------
        cwd:
            Directory used for relative names. Defaults to the process working
            directory at lookup time.
        home:
            User home directory. Defaults to :meth:`Path.home` at lookup time.
        resources:
            Resource loader consulted last. Defaults to a
            :class:`SearchPathResourceLoader` over :data:`sys.path`.
        """

        self.cwd = cwd
        self.home = home
        self.resources: ResourceLoader = resources if resources is not None else SearchPathResourceLoader()

    def locate(self, *names: str | None) -> FileLocation | None:
        """Return the first existing location for the candidate *names*.

        ``None`` and empty entries are skipped, so callers may pass
        ``explicit_current, explicit_legacy, default_current, default_legacy``
        as-is.

        Examples
        --------
        >>> from tempfile import TemporaryDirectory
        >>> from lib_properties_resolver.adapters.resources.default import NullResourceLoader
        >>> tmp = TemporaryDirectory()
        >>> root = Path(tmp.name)
        >>> _ = (root / "gemfire.properties").write_text("name=a", encoding="utf-8")
        >>> locator = DefaultFileLocator(cwd=root, home=root / "home", resources=NullResourceLoader())
        >>> locator.locate(None, None, "geode.properties", "gemfire.properties").path.name
        'gemfire.properties'
        >>> locator.locate("missing.properties") is None
        True
        >>> tmp.cleanup()
        """

        candidates = [name for name in names if name]
        log_debug("properties_candidates", layer="search", path=None, names=candidates)
        for name in candidates:
            location = self._locate_name(name)
            if location is not None:
                log_info("properties_file_located", **make_event("search", location.uri, {"name": name}))
                return location
        log_info("properties_file_not_found", layer="search", path=None, names=candidates)
        return None

    def _locate_name(self, name: str) -> FileLocation | None:
        """Check the three search locations for a single *name*."""

        for layer, base in self._directories():
            directory = base()
            if directory is None:
                continue
            candidate = directory / name
            if is_regular_file(candidate):
                log_debug("properties_file_match", layer=layer, path=str(candidate))
                return FileLocation(canonicalize(candidate))
        try:
            return self.resources.resolve_resource(name)
        except NotFound as exc:
            log_debug("resource_not_found", layer="resource", path=None, name=name, error=str(exc))
            return None

    def _directories(self) -> Iterable[tuple[str, Callable[[], Path | None]]]:
        """Yield the filesystem search locations in precedence order."""

        yield "cwd", self._working_directory
        yield "home", self._home_directory

    def _working_directory(self) -> Path:
        return self.cwd if self.cwd is not None else Path.cwd()

    def _home_directory(self) -> Path | None:
        if self.home is not None:
            return self.home
        try:
            return Path.home()
        except RuntimeError:
            return None
