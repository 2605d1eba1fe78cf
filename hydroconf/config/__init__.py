"""
Where configuration lives.

This package contains the settings describing where to look for
configuration files and the resolver that finds them:
- ``HydroSettings``: frozen description of root path, file names and env layer
- ``config_locations``: settings/secrets lookup from a base path upwards
- ``current_executable_path``: default base path
"""

from hydroconf.config.settings import HydroSettings
from hydroconf.config.locations import (
    config_locations,
    current_executable_path,
    search_dirs,
)

__all__ = [
    'HydroSettings',
    'config_locations',
    'current_executable_path',
    'search_dirs',
]
