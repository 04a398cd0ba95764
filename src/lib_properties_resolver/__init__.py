"""Public package surface for the layered properties resolver.

Exports the composition-root operations (:func:`find_properties_file`,
:class:`PropertiesResolver`), the domain types they return, the default
adapters, and the logging hooks so ``import lib_properties_resolver`` is
enough for most callers.
"""

from __future__ import annotations

from .adapters.file_loaders.properties import PropertiesFileLoader, parse_properties
from .adapters.locator.default import DefaultFileLocator
from .adapters.overrides.environ import EnvironOverrideSource
from .adapters.resources.default import (
    ChainedResourceLoader,
    NullResourceLoader,
    PackageResourceLoader,
    SearchPathResourceLoader,
)
from .core import PropertiesResolver, find_properties_file, specified_properties_file_name
from .domain.errors import ConfigError, InvalidFormat, NotFound, PropertiesLoadError
from .domain.location import FileLocation
from .domain.namespaces import (
    CURRENT_NAMESPACE,
    DEFAULT_NAMESPACES,
    DEFAULT_PROPERTIES_FILE_NAME,
    LEGACY_NAMESPACE,
    Namespace,
)
from .domain.store import EMPTY_STORE, PropertyStore, ResolvedProperty
from .observability import bind_trace_id, get_logger

__all__ = [
    "CURRENT_NAMESPACE",
    "ChainedResourceLoader",
    "ConfigError",
    "DEFAULT_NAMESPACES",
    "DEFAULT_PROPERTIES_FILE_NAME",
    "DefaultFileLocator",
    "EMPTY_STORE",
    "EnvironOverrideSource",
    "FileLocation",
    "InvalidFormat",
    "LEGACY_NAMESPACE",
    "Namespace",
    "NotFound",
    "NullResourceLoader",
    "PackageResourceLoader",
    "PropertiesFileLoader",
    "PropertiesLoadError",
    "PropertiesResolver",
    "PropertyStore",
    "ResolvedProperty",
    "SearchPathResourceLoader",
    "bind_trace_id",
    "find_properties_file",
    "get_logger",
    "parse_properties",
    "specified_properties_file_name",
]
