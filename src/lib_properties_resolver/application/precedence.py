"""First-match precedence policy.

Purpose
-------
Express the "first non-null source wins, never merge" rule once, and derive
the ordered override keys and candidate file names from the namespace tuple.
The module performs no I/O; it only reads from the injected override source.

Contents
    - ``first_present``: lazily return the first non-``None`` value.
    - ``override_keys``: namespace-qualified keys for a bare property key.
    - ``explicit_file_names``: per-namespace file overrides, ``None`` when unset.
    - ``candidate_file_names``: explicit names followed by default names.
    - ``specified_file_name``: explicit name or the built-in default.
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence, TypeVar

from ..domain.namespaces import DEFAULT_PROPERTIES_FILE_NAME, Namespace
from .ports import OverrideSource

T = TypeVar("T")


def first_present(thunks: Iterable[Callable[[], T | None]]) -> T | None:
    """Evaluate *thunks* in order and return the first non-``None`` result.

    Later thunks are never called once a value is found.

    Examples
    --------
    >>> first_present([lambda: None, lambda: "b", lambda: 1 / 0])
    'b'
    >>> first_present([]) is None
    True
    """

    for thunk in thunks:
        value = thunk()
        if value is not None:
            return value
    return None


def override_keys(key: str, namespaces: Sequence[Namespace]) -> list[str]:
    """Return *key* qualified by each namespace prefix in precedence order.

    Examples
    --------
    >>> from lib_properties_resolver.domain.namespaces import DEFAULT_NAMESPACES
    >>> override_keys("name", DEFAULT_NAMESPACES)
    ['geode.name', 'gemfire.name']
    """

    return [namespace.key(key) for namespace in namespaces]


def explicit_file_names(overrides: OverrideSource, namespaces: Sequence[Namespace]) -> list[str | None]:
    """Return the explicitly requested file name for each namespace (``None`` if unset)."""

    return [overrides.get(namespace.file_key) for namespace in namespaces]


def candidate_file_names(overrides: OverrideSource, namespaces: Sequence[Namespace]) -> list[str | None]:
    """Return ``[explicit..., default...]`` in the fixed search order.

    Examples
    --------
    >>> from lib_properties_resolver.domain.namespaces import DEFAULT_NAMESPACES
    >>> candidate_file_names({"gemfirePropertyFile": "custom.properties"}, DEFAULT_NAMESPACES)
    [None, 'custom.properties', 'geode.properties', 'gemfire.properties']
    """

    defaults: list[str | None] = [namespace.default_file_name for namespace in namespaces]
    return explicit_file_names(overrides, namespaces) + defaults


def specified_file_name(overrides: OverrideSource, namespaces: Sequence[Namespace]) -> str:
    """Return the file name the locator should search for.

    Explicit overrides are consulted namespace by namespace; the current
    namespace's default file name is the fallback.

    Examples
    --------
    >>> from lib_properties_resolver.domain.namespaces import DEFAULT_NAMESPACES
    >>> specified_file_name({}, DEFAULT_NAMESPACES)
    'geode.properties'
    >>> specified_file_name({"gemfirePropertyFile": "old.properties"}, DEFAULT_NAMESPACES)
    'old.properties'
    """

    for name in explicit_file_names(overrides, namespaces):
        if name is not None:
            return name
    return namespaces[0].default_file_name if namespaces else DEFAULT_PROPERTIES_FILE_NAME
