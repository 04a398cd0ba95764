"""Adapter contract tests for the default ports implementation.

Verify the default adapters keep satisfying the protocols declared in
``lib_properties_resolver.application.ports`` so the composition root can
depend on abstractions only.
"""

from __future__ import annotations

from pathlib import Path

from lib_properties_resolver.adapters.file_loaders.properties import PropertiesFileLoader
from lib_properties_resolver.adapters.locator.default import DefaultFileLocator
from lib_properties_resolver.adapters.overrides.environ import EnvironOverrideSource
from lib_properties_resolver.adapters.resources.default import (
    ChainedResourceLoader,
    NullResourceLoader,
    PackageResourceLoader,
    SearchPathResourceLoader,
)
from lib_properties_resolver.application import ports
from lib_properties_resolver.domain.location import FileLocation


def test_override_source_contract() -> None:
    assert isinstance(EnvironOverrideSource(environ={}), ports.OverrideSource)
    assert isinstance({"geode.name": "x"}, ports.OverrideSource)


def test_resource_loader_contract(tmp_path: Path) -> None:
    for loader in (
        SearchPathResourceLoader([tmp_path]),
        PackageResourceLoader("lib_properties_resolver"),
        ChainedResourceLoader([NullResourceLoader()]),
        NullResourceLoader(),
    ):
        assert isinstance(loader, ports.ResourceLoader)


def test_file_locator_contract(tmp_path: Path) -> None:
    locator = DefaultFileLocator(cwd=tmp_path, home=tmp_path, resources=NullResourceLoader())
    assert isinstance(locator, ports.FileLocator)
    assert locator.locate() is None


def test_properties_loader_contract(tmp_path: Path) -> None:
    loader = PropertiesFileLoader()
    assert isinstance(loader, ports.PropertiesLoader)
    target = tmp_path / "geode.properties"
    target.write_text("name=contract\n", encoding="utf-8")
    assert loader.load(FileLocation(target)) == {"name": "contract"}
