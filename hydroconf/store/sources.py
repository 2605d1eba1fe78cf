# hydroconf/store/sources.py
"""
Configuration sources.

A source produces one table (``dict``) every time :py:meth:`Source.collect`
is called. The store calls it once when the source is merged and again on
every refresh, so file sources always reflect what is on disk.

* ``FileSource``         – a TOML / YAML / JSON file, format by extension
* ``StringSource``       – an in-memory document in one of those formats
* ``EnvironmentSource``  – prefixed environment variables (plus ``.env``)
"""

from __future__ import annotations

import datetime
import json
import os
import re
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

import yaml
from dotenv import dotenv_values

from hydroconf.store.value import normalize
from hydroconf.utils.exceptions import (
    ConfigIOError,
    ParseError,
    TypeMismatchError,
    UnsupportedFormatError,
)
from hydroconf.utils.logging import get_logger

logger = get_logger(__name__)


# --------------------------------------------------------------------------- #
# Format parsers                                                              #
# --------------------------------------------------------------------------- #
def _parse_toml(text: str) -> Any:
    return tomllib.loads(text)


def _parse_yaml(text: str) -> Any:
    return yaml.safe_load(text) or {}


def _parse_json(text: str) -> Any:
    return json.loads(text)


# {format: parser}
PARSERS: Dict[str, Callable[[str], Any]] = {
    "toml": _parse_toml,
    "yaml": _parse_yaml,
    "json": _parse_json,
}

# {extension: format}
EXTENSIONS: Dict[str, str] = {
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}

PARSE_ERRORS = (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError)


def _stringify_temporals(data: Any) -> Any:
    """TOML and YAML produce date/time objects; configuration values are strings."""
    if isinstance(data, (datetime.date, datetime.time)):
        return data.isoformat()
    if isinstance(data, dict):
        return {k: _stringify_temporals(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_stringify_temporals(v) for v in data]
    return data


def detect_format(path: Union[str, Path]) -> str:
    """Return the format name for *path* based on its extension."""
    suffix = Path(path).suffix.lower()
    if suffix not in EXTENSIONS:
        raise UnsupportedFormatError(
            f"cannot determine format of {str(path)!r}; "
            f"supported extensions: {', '.join(sorted(EXTENSIONS))}"
        )
    return EXTENSIONS[suffix]


def parse_document(text: str, fmt: str, origin: str = "<string>") -> Dict[str, Any]:
    """Parse *text* as *fmt* and return its top-level table."""
    if fmt not in PARSERS:
        raise UnsupportedFormatError(f"unsupported configuration format {fmt!r}")
    try:
        data = PARSERS[fmt](text)
    except PARSE_ERRORS as exc:
        raise ParseError(f"failed to parse {origin} as {fmt}: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError(
            f"{origin} must contain a table at the top level, got {type(data).__name__}"
        )
    try:
        return normalize(_stringify_temporals(data))
    except TypeMismatchError as exc:
        raise ParseError(f"{origin} holds a value that cannot be configuration: {exc}") from exc


# --------------------------------------------------------------------------- #
# Sources                                                                     #
# --------------------------------------------------------------------------- #
class Source(ABC):
    """Anything that can be merged into a :class:`~hydroconf.store.config.ConfigStore`."""

    @abstractmethod
    def collect(self) -> Dict[str, Any]:
        """Read the source and return its contents as a table."""

    def describe(self) -> str:
        return self.__class__.__name__


class FileSource(Source):
    """
    A configuration file on disk.

    Parameters
    ----------
    path : str | Path
        File to read.
    format : str, optional
        ``"toml"``, ``"yaml"`` or ``"json"``. Detected from the extension
        when omitted.
    required : bool
        A missing required file raises :class:`ConfigIOError`; a missing
        optional one yields an empty table.
    encoding : str
        Text encoding of the file.
    """

    def __init__(
        self,
        path: Union[str, Path],
        format: Optional[str] = None,
        required: bool = True,
        encoding: str = "utf-8",
    ) -> None:
        self.path = Path(path)
        self.format = format or detect_format(self.path)
        if self.format not in PARSERS:
            raise UnsupportedFormatError(f"unsupported configuration format {self.format!r}")
        self.required = required
        self.encoding = encoding

    def collect(self) -> Dict[str, Any]:
        if not self.path.exists():
            if self.required:
                raise ConfigIOError(f"configuration file {str(self.path)!r} not found")
            logger.debug("Optional configuration file %s is missing", self.path)
            return {}
        try:
            text = self.path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as exc:
            raise ParseError(f"{str(self.path)!r} is not valid {self.encoding}: {exc}") from exc
        except OSError as exc:
            raise ConfigIOError(f"failed to read {str(self.path)!r}: {exc}") from exc
        return parse_document(text, self.format, origin=repr(str(self.path)))

    def describe(self) -> str:
        return str(self.path)

    def __repr__(self) -> str:
        return f"FileSource({str(self.path)!r}, format={self.format!r}, required={self.required})"


class StringSource(Source):
    """An in-memory configuration document."""

    def __init__(self, content: str, format: str) -> None:
        if format not in PARSERS:
            raise UnsupportedFormatError(f"unsupported configuration format {format!r}")
        self.content = content
        self.format = format

    def collect(self) -> Dict[str, Any]:
        return parse_document(self.content, self.format)

    def describe(self) -> str:
        return f"<{self.format} string>"


# Literal forms recognized when EnvironmentSource.try_parsing is enabled
# Example: "42" -> 42, "-1.5" -> -1.5, "TRUE" -> True
INT_PATTERN = re.compile(r'^[+-]?\d+$')
FLOAT_PATTERN = re.compile(r'^[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?$')


def _parse_env_value(raw: str) -> Any:
    lowered = raw.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if INT_PATTERN.match(raw.strip()):
        return int(raw)
    if FLOAT_PATTERN.match(raw.strip()):
        return float(raw)
    return raw


class EnvironmentSource(Source):
    """
    Environment variables sharing a prefix.

    ``<PREFIX>_DATABASE__PORT=5433`` becomes ``{"database": {"port": "5433"}}``
    with the default ``"__"`` separator. Keys are lowercased. Values from a
    ``.env`` file (read with python-dotenv, without touching ``os.environ``)
    are used unless the process environment defines the same variable.
    """

    def __init__(
        self,
        prefix: str,
        separator: str = "__",
        dotenv_path: Optional[Union[str, Path]] = None,
        try_parsing: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        if not prefix:
            raise ValueError("environment prefix cannot be empty")
        if not separator:
            raise ValueError("environment separator cannot be empty")
        self.prefix = prefix
        self.separator = separator
        self.dotenv_path = Path(dotenv_path) if dotenv_path else None
        self.try_parsing = try_parsing
        self._environ = environ

    def _variables(self) -> Dict[str, str]:
        variables: Dict[str, str] = {}
        if self.dotenv_path is not None:
            if not self.dotenv_path.exists():
                raise ConfigIOError(f".env file {str(self.dotenv_path)!r} not found")
            try:
                loaded = dotenv_values(self.dotenv_path)
            except OSError as exc:
                raise ConfigIOError(f"failed to read {str(self.dotenv_path)!r}: {exc}") from exc
            variables.update({k: v for k, v in loaded.items() if v is not None})
        variables.update(os.environ if self._environ is None else self._environ)
        return variables

    def collect(self) -> Dict[str, Any]:
        head = f"{self.prefix}_".upper()
        result: Dict[str, Any] = {}
        for name, raw in sorted(self._variables().items()):
            if not name.upper().startswith(head):
                continue
            parts = [p.lower() for p in name[len(head):].split(self.separator)]
            if not all(parts):
                logger.debug("Ignoring environment variable %s with an empty key segment", name)
                continue
            value = _parse_env_value(raw) if self.try_parsing else raw
            # segments are literal table keys, dots included
            node = result
            for part in parts[:-1]:
                child = node.get(part)
                if not isinstance(child, dict):
                    child = {}
                    node[part] = child
                node = child
            node[parts[-1]] = value
        return result

    def describe(self) -> str:
        return f"environment ({self.prefix}_*)"
