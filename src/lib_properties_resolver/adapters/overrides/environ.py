"""Process environment adapter for the override source port.

Purpose
-------
Expose the process environment (or any injected mapping) as the read-only
override space consulted before the properties file. Keys are matched
verbatim, so ``geode.name`` and ``gemfire.name`` are looked up exactly as
written.

Key behaviours
--------------
* ``environ`` defaults to :data:`os.environ` and is read at lookup time, so
  changes made by a host application between two lookups are visible.
* An explicitly injected empty mapping stays empty; it never falls back to the
  real environment.
* The adapter never writes to the mapping it wraps.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from ...observability import log_debug


class EnvironOverrideSource:
    """Read override values from a process-wide string mapping."""

    def __init__(self, *, environ: Mapping[str, str] | None = None) -> None:
        """Initialise the source with a specific ``environ`` mapping for testability.

        Parameters
        ----------
        environ:
            Mapping to read from. Defaults to :data:`os.environ`.
        """

        self._environ: Mapping[str, str] = environ if environ is not None else os.environ

    def get(self, key: str) -> Optional[str]:
        """Return the override stored under *key* or ``None``.

        Examples
        --------
        >>> source = EnvironOverrideSource(environ={"geode.name": "server1"})
        >>> source.get("geode.name")
        'server1'
        >>> source.get("gemfire.name") is None
        True
        """

        value = self._environ.get(key)
        if value is not None:
            log_debug("override_present", layer="override", path=None, key=key)
        return value
