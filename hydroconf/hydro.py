"""
hydroconf.hydro
===============

Public façade: finds the settings and secrets files, merges them into a
:class:`~hydroconf.store.ConfigStore` and exposes typed access.

Precedence, lowest to highest:

1. Defaults registered with :py:meth:`Hydroconf.set_default`
2. ``settings.*`` file
3. ``.secrets.*`` file
4. ``<PREFIX>_*`` environment variables (only with ``envvar_prefix``)
5. Values registered with :py:meth:`Hydroconf.set`

Typical use::

    from pydantic import BaseModel
    from hydroconf import Hydroconf, HydroSettings

    class Database(BaseModel):
        host: str
        port: int

    class AppConfig(BaseModel):
        database: Database

    config = Hydroconf(HydroSettings(root_path="/srv/app")).hydrate(AppConfig)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from hydroconf.config.locations import config_locations, current_executable_path
from hydroconf.config.settings import HydroSettings
from hydroconf.store import ConfigStore, EnvironmentSource, FileSource, Source
from hydroconf.store import value as values
from hydroconf.utils.exceptions import DeserializationError, TypeMismatchError
from hydroconf.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Hydroconf:
    """
    Configuration façade.

    A new instance is *unresolved*: nothing is merged until
    :py:meth:`initialize` (or :py:meth:`hydrate`) runs. Mutating methods
    return the instance so calls can be chained.
    """

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    def __init__(
        self,
        settings: HydroSettings | None = None,
        store: ConfigStore | None = None,
        root_resolver: Callable[[], Optional[Path]] = current_executable_path,
    ) -> None:
        self._settings = settings or HydroSettings()
        self._store = store if store is not None else ConfigStore()
        self._root_resolver = root_resolver
        self._initialized = False

    @property
    def settings(self) -> HydroSettings:
        return self._settings

    @property
    def initialized(self) -> bool:
        return self._initialized

    # ------------------------------------------------------------------ #
    # Loading                                                            #
    # ------------------------------------------------------------------ #
    def root_path(self) -> Optional[Path]:
        """Explicit ``root_path`` from the settings, else the resolver's answer."""
        if self._settings.root_path is not None:
            return self._settings.root_path
        return self._root_resolver()

    def initialize(self) -> "Hydroconf":
        """
        Locate and merge the configuration layers.

        All layers found by this call are merged together: if any of them
        cannot be read or parsed, none is kept and the error propagates.
        """
        if self._initialized:
            logger.warning("Hydroconf.initialize() called again; layers will be merged twice")

        sources = self._discover_sources()
        self._store.merge(*sources)
        self._initialized = True
        logger.debug("Initialized with %d layer(s)", len(sources))
        return self

    def hydrate(self, target: Type[T]) -> T:
        """Initialize, then deserialize the merged configuration into *target*."""
        self.initialize()
        return self.try_into(target)

    def try_into(self, target: Type[T]) -> T:
        """
        Deserialize the current configuration into *target*.

        *target* may be a pydantic model, a dataclass, a ``TypedDict`` or
        any other type pydantic can validate.
        """
        try:
            return TypeAdapter(target).validate_python(self._store.as_dict())
        except ValidationError as exc:
            raise DeserializationError(
                f"configuration cannot be hydrated into {getattr(target, '__name__', target)}: {exc}"
            ) from exc

    def refresh(self) -> "Hydroconf":
        """Re-read every merged layer from its source."""
        self._store.refresh()
        return self

    # ------------------------------------------------------------------ #
    # Writing                                                            #
    # ------------------------------------------------------------------ #
    def set_default(self, key: str, value: Any) -> "Hydroconf":
        """Provide *value* for *key* unless a merged layer or ``set`` supplies one."""
        self._store.set_default(key, value)
        return self

    def set(self, key: str, value: Any) -> "Hydroconf":
        """Force *key* to *value*, above every merged layer and default."""
        self._store.set(key, value)
        return self

    # ------------------------------------------------------------------ #
    # Reading                                                            #
    # ------------------------------------------------------------------ #
    def get(self, key: str, type_: Optional[Type[T]] = None) -> Any:
        """
        Return the value at *key*.

        Without *type_* the raw value is returned. With it, the value is
        validated into that type and ``TypeMismatchError`` is raised when
        it does not fit.
        """
        raw = self._store.get(key)
        if type_ is None:
            return raw
        try:
            return TypeAdapter(type_).validate_python(raw)
        except ValidationError as exc:
            raise TypeMismatchError(
                f"value of {key!r} cannot be converted to {getattr(type_, '__name__', type_)}: {exc}"
            ) from exc

    def get_str(self, key: str) -> str:
        return values.into_str(self._store.get(key), key)

    def get_int(self, key: str) -> int:
        return values.into_int(self._store.get(key), key)

    def get_float(self, key: str) -> float:
        return values.into_float(self._store.get(key), key)

    def get_bool(self, key: str) -> bool:
        return values.into_bool(self._store.get(key), key)

    def get_table(self, key: str) -> Dict[str, Any]:
        return values.into_table(self._store.get(key), key)

    def get_array(self, key: str) -> List[Any]:
        return values.into_array(self._store.get(key), key)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def as_dict(self) -> Dict[str, Any]:
        """Return a copy of the whole merged configuration."""
        return self._store.as_dict()

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _discover_sources(self) -> List[Source]:
        sources: List[Source] = []
        root = self.root_path()
        if root is None:
            logger.debug("No root path available; skipping file layers")
        else:
            settings_path, secrets_path = config_locations(
                root,
                settings_names=self._settings.settings_candidates(),
                secrets_names=self._settings.secrets_candidates(),
            )
            for path in (settings_path, secrets_path):
                if path is not None:
                    sources.append(FileSource(path, encoding=self._settings.encoding))

        if self._settings.envvar_prefix:
            sources.append(
                EnvironmentSource(
                    self._settings.envvar_prefix,
                    separator=self._settings.envvar_separator,
                    dotenv_path=self._settings.dotenv_path,
                )
            )
        return sources

    def __repr__(self) -> str:
        state = "resolved" if self._initialized else "unresolved"
        return f"Hydroconf({state}, {self._store!r})"
