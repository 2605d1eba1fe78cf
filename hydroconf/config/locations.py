"""Location of configuration files relative to a base path.

Only existence checks happen here; nothing is read.
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from hydroconf.config.defaults import (
    CONFIG_SUBDIR,
    SECRETS_FILE_NAMES,
    SETTINGS_FILE_NAMES,
)
from hydroconf.utils.logging import get_logger

logger = get_logger(__name__)

__all__ = [
    "config_locations",
    "current_executable_path",
    "search_dirs",
]


def current_executable_path() -> Optional[Path]:
    """Path of the running program, or ``None`` when there is none.

    Frozen applications report their executable; scripts report
    ``sys.argv[0]``. Interactive sessions and ``python -c`` have no path.
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve()
    main = sys.argv[0] if sys.argv else ""
    if not main or main == "-c":
        return None
    return Path(main).resolve()


def search_dirs(root: Union[str, Path]) -> Iterator[Path]:
    """Yield *root* (when it is a directory) and then each of its ancestors."""
    start = Path(root).absolute()
    if start.is_dir():
        yield start
    yield from start.parents


def _first_existing(directory: Path, names: Iterable[str]) -> Optional[Path]:
    for base in (directory, directory / CONFIG_SUBDIR):
        for name in names:
            candidate = base / name
            if candidate.is_file():
                return candidate
    return None


def config_locations(
    root: Union[str, Path],
    settings_names: Iterable[str] = SETTINGS_FILE_NAMES,
    secrets_names: Iterable[str] = SECRETS_FILE_NAMES,
) -> Tuple[Optional[Path], Optional[Path]]:
    """Find the settings and secrets files for *root*.

    Args:
        root: Directory or file (e.g. the program path) to start from.
        settings_names: Settings file names, in order of preference.
        secrets_names: Secrets file names, in order of preference.

    Returns:
        ``(settings_path, secrets_path)``; either may be ``None``. Both come
        from the nearest directory holding at least one of them, either
        directly or inside its ``config/`` subdirectory.
    """
    settings_names = tuple(settings_names)
    secrets_names = tuple(secrets_names)
    for directory in search_dirs(root):
        settings = _first_existing(directory, settings_names)
        secrets = _first_existing(directory, secrets_names)
        if settings or secrets:
            logger.debug(
                "Configuration found in %s (settings=%s, secrets=%s)",
                directory, settings, secrets,
            )
            return settings, secrets
    logger.debug("No configuration files found from %s upwards", root)
    return None, None
