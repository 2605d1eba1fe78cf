"""
hydroconf.utils.exceptions
==========================

Custom exceptions for configuration loading and typed access.
"""

class HydroconfError(Exception):
    """Base exception for all hydroconf errors."""
    pass

class ConfigIOError(HydroconfError):
    """A configuration source exists (or is required) but cannot be read."""
    pass

class ParseError(HydroconfError):
    """Content of a configuration source does not conform to its format."""
    pass

class UnsupportedFormatError(ParseError):
    """Format of a configuration source cannot be determined or is unknown."""
    pass

class KeyNotFoundError(HydroconfError):
    """Requested key is absent after all layers were applied."""

    def __init__(self, key: str):
        super().__init__(f"configuration property {key!r} not found")
        self.key = key

class InvalidKeyPathError(HydroconfError):
    """Key path expression is malformed."""
    pass

class TypeMismatchError(HydroconfError):
    """Stored value cannot be converted to the requested type."""
    pass

class DeserializationError(HydroconfError):
    """Merged configuration cannot be hydrated into the target structure."""
    pass
