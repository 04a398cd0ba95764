"""File search tests: candidate order, location order, and exhaustive misses.

Each scenario lays out files in a sandbox with separate working, home, and
resource directories, then asks the locator which file wins.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from lib_properties_resolver import DefaultFileLocator, FileLocation, NotFound, NullResourceLoader
from tests.support import PropertiesSandbox, create_sandbox


@pytest.fixture()
def sandbox(tmp_path: Path) -> PropertiesSandbox:
    return create_sandbox(tmp_path)


def test_explicit_current_absolute_path(sandbox: PropertiesSandbox) -> None:
    custom = sandbox.write("elsewhere", "geodeCustom.properties")
    location = sandbox.locate({"geodePropertyFile": str(custom)})
    assert location == FileLocation(custom.resolve())


def test_explicit_current_in_working_directory(sandbox: PropertiesSandbox) -> None:
    custom = sandbox.write("cwd", "geodeCustomFileInCurrentDir.properties")
    location = sandbox.locate({"geodePropertyFile": custom.name})
    assert location == FileLocation(custom.resolve())


def test_explicit_current_in_home_directory(sandbox: PropertiesSandbox) -> None:
    custom = sandbox.write("home", "geodeCustomFileInHomeDir.properties")
    location = sandbox.locate({"geodePropertyFile": custom.name})
    assert location == FileLocation(custom.resolve())


def test_explicit_legacy_absolute_path(sandbox: PropertiesSandbox) -> None:
    custom = sandbox.write("elsewhere", "gemfireCustom.properties")
    assert sandbox.locate({"gemfirePropertyFile": str(custom)}) == FileLocation(custom.resolve())


def test_explicit_legacy_in_home_directory(sandbox: PropertiesSandbox) -> None:
    custom = sandbox.write("home", "gemfireCustomFileInHomeDir.properties")
    assert sandbox.locate({"gemfirePropertyFile": custom.name}) == FileLocation(custom.resolve())


def test_explicit_current_beats_everything(sandbox: PropertiesSandbox) -> None:
    geode_custom = sandbox.write("elsewhere", "geodeCustom.properties")
    gemfire_custom = sandbox.write("elsewhere", "gemfireCustom.properties")
    sandbox.write("cwd", "geode.properties")
    sandbox.write("cwd", "gemfire.properties")
    overrides = {"geodePropertyFile": str(geode_custom), "gemfirePropertyFile": str(gemfire_custom)}
    assert sandbox.locate(overrides) == FileLocation(geode_custom.resolve())


def test_explicit_legacy_second(sandbox: PropertiesSandbox) -> None:
    gemfire_custom = sandbox.write("elsewhere", "gemfireCustom.properties")
    sandbox.write("cwd", "geode.properties")
    sandbox.write("cwd", "gemfire.properties")
    assert sandbox.locate({"gemfirePropertyFile": str(gemfire_custom)}) == FileLocation(gemfire_custom.resolve())


def test_default_current_third(sandbox: PropertiesSandbox) -> None:
    geode_default = sandbox.write("cwd", "geode.properties")
    sandbox.write("cwd", "gemfire.properties")
    assert sandbox.locate() == FileLocation(geode_default.resolve())


def test_default_legacy_fourth(sandbox: PropertiesSandbox) -> None:
    gemfire_default = sandbox.write("cwd", "gemfire.properties")
    assert sandbox.locate() == FileLocation(gemfire_default.resolve())


def test_missing_explicit_name_falls_through_to_defaults(sandbox: PropertiesSandbox) -> None:
    geode_default = sandbox.write("home", "geode.properties")
    assert sandbox.locate({"geodePropertyFile": "nowhere.properties"}) == FileLocation(geode_default.resolve())


def test_searches_working_directory_first(sandbox: PropertiesSandbox) -> None:
    in_cwd = sandbox.write("cwd", "geode.properties")
    sandbox.write("home", "geode.properties")
    sandbox.write("resources", "geode.properties")
    assert sandbox.locate() == FileLocation(in_cwd.resolve())


def test_searches_home_directory_second(sandbox: PropertiesSandbox) -> None:
    in_home = sandbox.write("home", "geode.properties")
    sandbox.write("resources", "geode.properties")
    assert sandbox.locate() == FileLocation(in_home.resolve())


def test_searches_resource_directory_third(sandbox: PropertiesSandbox) -> None:
    in_resources = sandbox.write("resources", "geodeInDir.properties")
    location = sandbox.locate({"geodePropertyFile": "geodeInDir.properties"})
    assert location == FileLocation(in_resources.resolve())


def test_searches_resource_archive_third(sandbox: PropertiesSandbox) -> None:
    archive = sandbox.write_archive("ourJar.zip", {"geodeInJar.properties": "name=zipped\n"})
    location = sandbox.locate({"geodePropertyFile": "geodeInJar.properties"}, archive)
    assert location == FileLocation(archive.resolve(), member="geodeInJar.properties")


def test_exhaustive_miss_returns_none(sandbox: PropertiesSandbox) -> None:
    assert sandbox.locate() is None


def test_directory_is_not_a_match(sandbox: PropertiesSandbox) -> None:
    (sandbox.cwd / "geode.properties").mkdir()
    in_home = sandbox.write("home", "geode.properties")
    assert sandbox.locate() == FileLocation(in_home.resolve())


def test_directory_only_everywhere_is_a_miss(sandbox: PropertiesSandbox) -> None:
    for location in ("cwd", "home", "resources"):
        (sandbox.roots[location] / "geode.properties").mkdir()
    assert sandbox.locate() is None


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
def test_symlink_is_canonicalised(sandbox: PropertiesSandbox) -> None:
    target = sandbox.write("elsewhere", "real.properties")
    link = sandbox.cwd / "geode.properties"
    try:
        link.symlink_to(target)
    except OSError:
        pytest.skip("symlink creation not permitted")
    assert sandbox.locate() == FileLocation(target.resolve())


def test_canonicalisation_failure_falls_back_to_absolute(sandbox: PropertiesSandbox, monkeypatch) -> None:
    in_cwd = sandbox.write("cwd", "geode.properties")

    def _broken_resolve(self, strict=False):
        raise OSError("cannot canonicalise")

    monkeypatch.setattr(Path, "resolve", _broken_resolve)
    assert sandbox.locate() == FileLocation(in_cwd.absolute())


def test_resource_loader_not_found_is_tolerated(sandbox: PropertiesSandbox) -> None:
    class _RaisingLoader:
        def resolve_resource(self, name: str) -> FileLocation | None:
            raise NotFound(name)

    locator = DefaultFileLocator(cwd=sandbox.cwd, home=sandbox.home, resources=_RaisingLoader())
    assert locator.locate("geode.properties", "gemfire.properties") is None


def test_locate_skips_absent_and_empty_names(sandbox: PropertiesSandbox) -> None:
    in_cwd = sandbox.write("cwd", "gemfire.properties")
    locator = DefaultFileLocator(cwd=sandbox.cwd, home=sandbox.home, resources=NullResourceLoader())
    assert locator.locate(None, "", "geode.properties", "gemfire.properties") == FileLocation(in_cwd.resolve())


def test_locate_defaults_to_process_working_directory(sandbox: PropertiesSandbox, monkeypatch) -> None:
    in_cwd = sandbox.write("cwd", "geode.properties")
    monkeypatch.chdir(sandbox.cwd)
    locator = DefaultFileLocator(home=sandbox.home, resources=NullResourceLoader())
    assert locator.locate("geode.properties") == FileLocation(in_cwd.resolve())


def test_over_long_explicit_name_falls_through_to_defaults(sandbox: PropertiesSandbox) -> None:
    geode_default = sandbox.write("cwd", "geode.properties")
    location = sandbox.locate({"geodePropertyFile": "x" * 300})
    assert location == FileLocation(geode_default.resolve())


def test_over_long_name_everywhere_is_a_miss(sandbox: PropertiesSandbox) -> None:
    assert sandbox.locator().locate("y" * 300) is None


def test_stat_failure_is_not_a_match(sandbox: PropertiesSandbox, monkeypatch) -> None:
    in_home = sandbox.write("home", "geode.properties")
    original_is_file = Path.is_file

    def _denied_in_cwd(self):
        if self.parent == sandbox.cwd:
            raise PermissionError("permission denied")
        return original_is_file(self)

    monkeypatch.setattr(Path, "is_file", _denied_in_cwd)
    assert sandbox.locate() == FileLocation(in_home.resolve())
