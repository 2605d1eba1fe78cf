"""
hydroconf.store.config
======================

Layered configuration store. The effective view is rebuilt, in strict
precedence, from:

1. Defaults registered with :py:meth:`ConfigStore.set_default`
2. Every merged source, in merge order (later sources win)
3. Overrides registered with :py:meth:`ConfigStore.set`

Tables are deep-merged; arrays and scalars are replaced.
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Tuple

from hydroconf.store.merge import deep_merge
from hydroconf.store.path import get_path, has_path, parse_key, set_path
from hydroconf.store.sources import Source
from hydroconf.store.value import normalize
from hydroconf.utils.logging import get_logger

logger = get_logger(__name__)


class ConfigStore:
    """
    Ordered collection of layers plus a flattened, cached view of them.

    Sources are read when merged and again on :py:meth:`refresh`;
    :py:meth:`set` and :py:meth:`set_default` only rebuild the view from the
    cached layer contents.
    """

    # ------------------------------------------------------------------ #
    # Construction                                                       #
    # ------------------------------------------------------------------ #
    def __init__(self) -> None:
        # {key path: value}, applied in insertion order
        self._defaults: Dict[str, Any] = {}
        self._overrides: Dict[str, Any] = {}
        # [(source, last collected table)]
        self._layers: List[Tuple[Source, Dict[str, Any]]] = []
        self._cache: Dict[str, Any] = {}

    # ------------------------------------------------------------------ #
    # Public API                                                         #
    # ------------------------------------------------------------------ #
    @property
    def sources(self) -> Tuple[Source, ...]:
        return tuple(source for source, _ in self._layers)

    def merge(self, *sources: Source) -> "ConfigStore":
        """
        Read *sources* and add them as the highest-precedence file layers.

        Either every source is added or, when one fails to read or parse,
        none is and the error propagates.
        """
        collected = [(source, source.collect()) for source in sources]
        self._commit(layers=self._layers + collected)
        for source, _ in collected:
            logger.debug("Merged configuration layer %s", source.describe())
        return self

    def refresh(self) -> "ConfigStore":
        """
        Re-read every merged source. On failure the previous layers and view
        are kept: read and parse errors propagate as they are, and an
        override that no longer fits the refreshed data raises
        ``InvalidKeyPathError``.
        """
        layers = [(source, source.collect()) for source, _ in self._layers]
        self._commit(layers=layers)
        logger.debug("Refreshed %d configuration layer(s)", len(layers))
        return self

    def set_default(self, key: str, value: Any) -> "ConfigStore":
        parse_key(key)
        defaults = {k: v for k, v in self._defaults.items() if k != key}
        defaults[key] = normalize(value)
        self._commit(defaults=defaults)
        return self

    def set(self, key: str, value: Any) -> "ConfigStore":
        parse_key(key)
        overrides = {k: v for k, v in self._overrides.items() if k != key}
        overrides[key] = normalize(value)
        self._commit(overrides=overrides)
        return self

    def get(self, key: str) -> Any:
        """Return a copy of the value at *key*; raise ``KeyNotFoundError`` if absent."""
        return copy.deepcopy(get_path(self._cache, key))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and has_path(self._cache, key)

    def as_dict(self) -> Dict[str, Any]:
        """Return a copy of the whole effective configuration."""
        return copy.deepcopy(self._cache)

    # ------------------------------------------------------------------ #
    # Internal helpers                                                   #
    # ------------------------------------------------------------------ #
    def _commit(
        self,
        defaults: Optional[Dict[str, Any]] = None,
        layers: Optional[List[Tuple[Source, Dict[str, Any]]]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Build the view from candidate state; store both only if that succeeds."""
        defaults = self._defaults if defaults is None else defaults
        layers = self._layers if layers is None else layers
        overrides = self._overrides if overrides is None else overrides

        view: Dict[str, Any] = {}
        for key, value in defaults.items():
            set_path(view, key, copy.deepcopy(value))
        for _, table in layers:
            view = deep_merge(view, table)
        for key, value in overrides.items():
            set_path(view, key, copy.deepcopy(value))

        self._defaults, self._layers, self._overrides = defaults, layers, overrides
        self._cache = view

    def __repr__(self) -> str:
        return (
            f"ConfigStore(layers={len(self._layers)}, defaults={len(self._defaults)}, "
            f"overrides={len(self._overrides)})"
        )
