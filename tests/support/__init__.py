"""Sandbox helpers shared by the locator, resolver, and CLI suites.

A sandbox is a temporary tree with separate working, home, and resource
directories so every search location can be populated independently without
touching the real home directory or changing the process working directory.
"""

from __future__ import annotations

import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from lib_properties_resolver import DefaultFileLocator, FileLocation, SearchPathResourceLoader, find_properties_file

LOCATIONS = ("cwd", "home", "resources", "elsewhere")


@dataclass(slots=True)
class PropertiesSandbox:
    """Temporary search roots for one test."""

    root: Path
    roots: dict[str, Path] = field(default_factory=dict)

    @property
    def cwd(self) -> Path:
        return self.roots["cwd"]

    @property
    def home(self) -> Path:
        return self.roots["home"]

    @property
    def resources(self) -> Path:
        return self.roots["resources"]

    def write(self, location: str, name: str, content: str = "") -> Path:
        """Create *name* under the root for *location* and return its path."""

        target = self.roots[location] / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    def write_properties(self, location: str, name: str, values: Mapping[str, str]) -> Path:
        """Write *values* as ``key=value`` lines under *location*."""

        return self.write(location, name, properties_text(values))

    def write_archive(self, archive: str, members: Mapping[str, str]) -> Path:
        """Create a zip archive in the resources root holding *members*."""

        target = self.root / "archives" / archive
        target.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(target, "w") as bundle:
            for member, content in members.items():
                bundle.writestr(member, content)
        return target

    def locator(self, *search_path: Path) -> DefaultFileLocator:
        """Return a locator bound to this sandbox.

        Without arguments only the sandbox resources directory is searched.
        """

        roots = list(search_path) if search_path else [self.resources]
        return DefaultFileLocator(cwd=self.cwd, home=self.home, resources=SearchPathResourceLoader(roots))

    def locate(self, overrides: Mapping[str, str] | None = None, *search_path: Path) -> FileLocation | None:
        return find_properties_file(overrides=dict(overrides or {}), locator=self.locator(*search_path))


def create_sandbox(tmp_path: Path) -> PropertiesSandbox:
    """Create the sandbox directories beneath *tmp_path*."""

    sandbox = PropertiesSandbox(root=tmp_path)
    for location in LOCATIONS:
        directory = tmp_path / location
        directory.mkdir(parents=True, exist_ok=True)
        sandbox.roots[location] = directory
    return sandbox


def properties_text(values: Mapping[str, str]) -> str:
    """Render *values* as simple properties lines (no escaping)."""

    return "".join(f"{key}={value}\n" for key, value in values.items())


__all__ = ["PropertiesSandbox", "create_sandbox", "properties_text", "LOCATIONS"]
