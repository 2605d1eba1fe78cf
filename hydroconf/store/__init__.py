"""
Layered key/value configuration store.

``ConfigStore`` keeps defaults, merged sources and overrides as separate
layers and exposes a flattened view addressed by key paths.
"""

from hydroconf.store.config import ConfigStore
from hydroconf.store.merge import deep_merge
from hydroconf.store.sources import (
    EnvironmentSource,
    FileSource,
    Source,
    StringSource,
    detect_format,
)

__all__ = [
    "ConfigStore",
    "Source",
    "FileSource",
    "StringSource",
    "EnvironmentSource",
    "detect_format",
    "deep_merge",
]
