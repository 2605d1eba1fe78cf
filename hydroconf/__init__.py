"""
hydroconf package initialization.

Re-exports the façade, its settings and the error types callers catch.
"""
import logging

from hydroconf.hydro import Hydroconf
from hydroconf.config import HydroSettings, config_locations, current_executable_path
from hydroconf.store import (
    ConfigStore,
    EnvironmentSource,
    FileSource,
    StringSource,
)
from hydroconf.utils.exceptions import (
    HydroconfError,
    ConfigIOError,
    ParseError,
    UnsupportedFormatError,
    KeyNotFoundError,
    InvalidKeyPathError,
    TypeMismatchError,
    DeserializationError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Hydroconf",
    "HydroSettings",
    "config_locations",
    "current_executable_path",
    "ConfigStore",
    "FileSource",
    "StringSource",
    "EnvironmentSource",
    "HydroconfError",
    "ConfigIOError",
    "ParseError",
    "UnsupportedFormatError",
    "KeyNotFoundError",
    "InvalidKeyPathError",
    "TypeMismatchError",
    "DeserializationError",
]
