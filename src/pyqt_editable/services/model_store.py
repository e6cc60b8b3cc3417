"""
In-process model store.

Reference implementation of the ModelService protocol for applications that
preload content (or receive it over their own transport) and for tests.

Key features:
1. Cache keyed by canonical path
2. Storing a node also makes its descendants resident: ``:items`` children
   are indexed under ``parent/key``, ``:children`` pages under their own path
3. Path-keyed listeners, idempotent per (path, callback) pair
4. get_data() returns an already-completed Future
"""

import logging
from collections.abc import Mapping
from concurrent.futures import Future
from typing import Any, Callable, Dict, List, Optional

from pyqt_editable.components.constants import CONSTANTS
from pyqt_editable.core.path_utils import join_path

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


class ModelStore:
    """Model cache with path-keyed change listeners."""

    def __init__(self, root_path: str = "", root_model: Optional[Mapping] = None):
        self._data: Dict[str, Dict[str, Any]] = {}
        self._listeners: Dict[str, List[Listener]] = {}
        if root_model is not None:
            self.set_data(root_path, root_model, notify=False)

    # ========== MODEL SERVICE PROTOCOL ==========

    def get_cached(self, path: str) -> Optional[Dict[str, Any]]:
        return self._data.get(path)

    def get_data(self, path: str, force_reload: bool = False) -> "Future[Optional[Dict[str, Any]]]":
        """Resolve the stored model; a missing path resolves to None."""
        future: Future = Future()
        data = self._data.get(path)
        if data is None:
            logger.debug(f"No model stored at '{path}'")
        future.set_result(data)
        return future

    def add_listener(self, path: str, callback: Listener) -> None:
        callbacks = self._listeners.setdefault(path, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def remove_listener(self, path: str, callback: Listener) -> None:
        callbacks = self._listeners.get(path)
        if not callbacks or callback not in callbacks:
            return
        callbacks.remove(callback)
        if not callbacks:
            del self._listeners[path]

    # ========== MUTATION ==========

    def set_data(self, path: str, model: Mapping, notify: bool = True) -> List[str]:
        """
        Store ``model`` at ``path`` and index its descendants.

        Args:
            path: Canonical path of the node
            model: Model mapping (wire format)
            notify: Whether to call listeners of every stored path

        Returns:
            Paths whose cached model was replaced, parent first
        """
        stored: List[str] = []
        self._index(path, model, stored)
        logger.debug(f"Stored {len(stored)} model(s) under '{path}'")
        if notify:
            for stored_path in stored:
                self._notify(stored_path)
        return stored

    def remove_data(self, path: str) -> None:
        """Forget the model at ``path`` (descendants stay resident)."""
        self._data.pop(path, None)

    def listener_count(self, path: Optional[str] = None) -> int:
        """Number of registered listeners, for one path or in total."""
        if path is not None:
            return len(self._listeners.get(path, ()))
        return sum(len(callbacks) for callbacks in self._listeners.values())

    def _index(self, path: str, model: Mapping, stored: List[str]) -> None:
        self._data[path] = dict(model)
        stored.append(path)

        items = model.get(CONSTANTS.ITEMS_KEY)
        if isinstance(items, Mapping):
            for key, child in items.items():
                if isinstance(child, Mapping):
                    self._index(join_path(path, key), child, stored)

        children = model.get(CONSTANTS.CHILDREN_KEY)
        if isinstance(children, Mapping):
            for child_path, child in children.items():
                if isinstance(child, Mapping):
                    self._index(child_path, child, stored)

    def _notify(self, path: str) -> None:
        # Copy: listeners may unregister themselves while being notified
        for callback in list(self._listeners.get(path, ())):
            callback()
