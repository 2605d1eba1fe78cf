"""
Utility functions and classes.

This package provides the exception hierarchy and logging helpers shared
by the rest of hydroconf.
"""

from hydroconf.utils.exceptions import (
    HydroconfError, ConfigIOError, ParseError, UnsupportedFormatError,
    KeyNotFoundError, InvalidKeyPathError, TypeMismatchError,
    DeserializationError
)
from hydroconf.utils.logging import get_logger

__all__ = [
    'HydroconfError',
    'ConfigIOError',
    'ParseError',
    'UnsupportedFormatError',
    'KeyNotFoundError',
    'InvalidKeyPathError',
    'TypeMismatchError',
    'DeserializationError',
    'get_logger',
]
