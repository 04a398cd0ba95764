"""Current and legacy naming schemes for override keys and properties files.

Purpose
-------
The product was renamed; both the new (``geode``) and the old (``gemfire``)
names stay valid. Each scheme is one :class:`Namespace` entry and the ordered
tuple :data:`DEFAULT_NAMESPACES` drives every precedence walk, so adding or
retiring a scheme touches a single line.

Contents
--------
* :class:`Namespace` – prefix, file-override key, and default file name.
* :data:`CURRENT_NAMESPACE` / :data:`LEGACY_NAMESPACE` – the two schemes.
* :data:`DEFAULT_NAMESPACES` – ordered ``(current, legacy)`` tuple.
* :data:`DEFAULT_PROPERTIES_FILE_NAME` – built-in file name fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Namespace:
    """One naming scheme understood by the resolver.

    Attributes
    ----------
    name:
        Short label used in logs and provenance.
    prefix:
        Prepended to bare keys in the override source (``geode.`` + ``name``).
    file_key:
        Override key whose value names an explicit properties file.
    default_file_name:
        File name searched for when no explicit file was requested.

    Examples
    --------
    >>> CURRENT_NAMESPACE.key("log-level")
    'geode.log-level'
    """

    name: str
    prefix: str
    file_key: str
    default_file_name: str

    def key(self, key: str) -> str:
        """Return *key* qualified with this namespace's prefix."""

        return f"{self.prefix}{key}"


CURRENT_NAMESPACE: Final[Namespace] = Namespace(
    name="geode",
    prefix="geode.",
    file_key="geodePropertyFile",
    default_file_name="geode.properties",
)

LEGACY_NAMESPACE: Final[Namespace] = Namespace(
    name="gemfire",
    prefix="gemfire.",
    file_key="gemfirePropertyFile",
    default_file_name="gemfire.properties",
)

DEFAULT_NAMESPACES: Final[tuple[Namespace, ...]] = (CURRENT_NAMESPACE, LEGACY_NAMESPACE)
"""Namespaces in precedence order; the first entry wins."""

DEFAULT_PROPERTIES_FILE_NAME: Final[str] = CURRENT_NAMESPACE.default_file_name
