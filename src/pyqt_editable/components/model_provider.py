"""
Model provider - binds a content path to live renderer props.

Runs the cache-then-fetch-then-subscribe protocol for a single node:

1. Resolve the canonical path (explicit ``cqPath`` wins, else ``pagePath`` +
   ``itemPath``). No path means nothing to synchronize.
2. Seed props from the node's own input props.
3. Adopt the model resident in the service cache synchronously, so the first
   paint reflects it without a round trip.
4. On a cache miss with ``inject_props_on_init``, issue exactly one fetch.
5. Register one listener so external edits at the path re-run steps 3-4.

Fetch completions are relayed to the provider's thread and checked against a
per-instance generation counter: results arriving after unmount or after the
path changed are dropped.
"""

from __future__ import annotations

import copy
import logging
from concurrent.futures import Future
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from pyqt_editable.core.path_utils import canonical_path
from pyqt_editable.exceptions import ModelServiceUnavailableError
from pyqt_editable.protocols import (
    ModelService,
    Props,
    PropsSettable,
    PyQtWidgetMeta,
    RendererDescriptor,
    Unmountable,
    get_editable_config,
    get_model_service,
    renderer_name,
    unmount_widget,
)

from .constants import CONSTANTS
from .model_utils import is_empty_model, model_to_props, props_to_state

if TYPE_CHECKING:
    from pyqt_editable.services.editor_notifier import EditorNotifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelProviderConfig:
    """
    Configuration of the with_model() wrapper.

    Attributes:
        force_reload: Ask the model service to bypass its cache when fetching
        inject_props_on_init: Fetch the model on mount when it is not resident
    """
    force_reload: bool = False
    inject_props_on_init: bool = True


class SyncStatus(Enum):
    """Synchronization states of a model provider."""
    UNBOUND = "unbound"    # No model adopted yet (or no path at all)
    PENDING = "pending"    # Fetch in flight
    SYNCED = "synced"      # Props reflect a model from the service
    DISPOSED = "disposed"  # Unmounted, listener released


@dataclass
class SyncState:
    """Per-node synchronization state, owned by exactly one ModelProvider."""
    props: Dict[str, Any] = field(default_factory=dict)
    path: str = ""
    registered: bool = False
    registered_path: str = ""              # Path the live listener was registered under
    generation: int = 0                    # Bumped per fetch, path change and unmount
    pending: bool = False
    disposed: bool = False
    last_model: Optional[Dict[str, Any]] = None

    @property
    def status(self) -> SyncStatus:
        if self.disposed:
            return SyncStatus.DISPOSED
        if self.pending:
            return SyncStatus.PENDING
        if self.last_model is not None:
            return SyncStatus.SYNCED
        return SyncStatus.UNBOUND


class _FetchRelay(QObject):
    """Carries future completions to the thread that owns the provider."""

    completed = pyqtSignal(int, object)  # generation, Future


class ModelProvider(QWidget, PropsSettable, Unmountable, metaclass=PyQtWidgetMeta):
    """
    Wraps a renderer and keeps its props synchronized with the model service.

    Usage:
        provider = ModelProvider(TextComponent, {"cqPath": "/content/page/title"},
                                 model_service=store)
        layout.addWidget(provider)

        # Later:
        provider.unmount()  # Releases the listener; late fetches are ignored

    The wrapped widget is updated in place when it implements PropsSettable
    and recreated otherwise.
    """

    props_changed = pyqtSignal(dict)

    def __init__(
        self,
        wrapped: RendererDescriptor,
        props: Optional[Props] = None,
        config: Optional[ModelProviderConfig] = None,
        model_service: Optional[ModelService] = None,
        notifier: Optional["EditorNotifier"] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._wrapped = wrapped
        self._config = config or ModelProviderConfig()
        self._model_service = model_service
        self._notifier = notifier if notifier is not None else get_editable_config().editor_notifier
        self._input_props: Props = dict(props or {})
        self._state = SyncState()
        self._child: Optional[QWidget] = None

        # One callable identity for add_listener/remove_listener
        self._listener = self._on_model_changed

        self._relay = _FetchRelay()
        self._relay.completed.connect(self._on_fetch_completed)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        self._layout = layout

        self._mount()

    # ========== PUBLIC STATE ==========

    @property
    def path(self) -> str:
        """Canonical path this node synchronizes with ('' when unbound)."""
        return self._state.path

    @property
    def status(self) -> SyncStatus:
        return self._state.status

    @property
    def sync_state(self) -> SyncState:
        return self._state

    @property
    def child_props(self) -> Props:
        """Props handed to the wrapped renderer."""
        return dict(self._state.props)

    @property
    def child_widget(self) -> Optional[QWidget]:
        return self._child

    @property
    def force_reload(self) -> bool:
        return self._flag(CONSTANTS.FORCE_RELOAD, self._config.force_reload)

    @property
    def inject_props_on_init(self) -> bool:
        return self._flag(CONSTANTS.INJECT_PROPS_ON_INIT, self._config.inject_props_on_init)

    # ========== LIFECYCLE ==========

    def _mount(self) -> None:
        path = self._resolve_path(self._input_props)
        self._state.path = path
        self._state.props = self._seed_props(self._input_props, path)
        logger.debug(f"Mounting {renderer_name(self._wrapped)} at '{path}'")

        if path:
            # Cache read completes before any fetch is issued for this mount
            self._sync(allow_fetch=self.inject_props_on_init)
            self._register_listener()

        if self._child is None:
            self._refresh_child()

    def set_props(self, props: Props) -> None:
        """
        Accept new input props from the parent.

        A changed canonical path moves the listener to the new path (the old
        binding is removed under the path it was registered with), invalidates
        any in-flight fetch and re-runs the cache/fetch protocol.
        """
        if self._state.disposed:
            return
        self._input_props = dict(props)
        path = self._resolve_path(self._input_props)

        if path != self._state.path:
            logger.debug(f"Path changed '{self._state.path}' -> '{path}'")
            self._release_listener()
            self._state.generation += 1
            self._state.pending = False
            self._state.last_model = None
            self._state.path = path
            self._state.props = self._seed_props(self._input_props, path)
            if path:
                self._sync(allow_fetch=self.inject_props_on_init)
                self._register_listener()
        else:
            model_props = model_to_props(self._state.last_model)
            self._state.props = {**self._seed_props(self._input_props, path), **model_props,
                                 CONSTANTS.CQ_PATH: path}

        self._refresh_child()

    def unmount(self) -> None:
        """Release the listener and ignore any fetch still in flight."""
        if self._state.disposed:
            return
        self._release_listener()
        self._state.disposed = True
        self._state.pending = False
        self._state.generation += 1
        unmount_widget(self._child)
        logger.debug(f"Unmounted provider for '{self._state.path}'")

    def closeEvent(self, event) -> None:
        self.unmount()
        super().closeEvent(event)

    # ========== SYNCHRONIZATION ==========

    def update_data(self) -> None:
        """Re-read the model for the current path (cache first, then fetch)."""
        if self._state.disposed or not self._state.path:
            return
        self._sync(allow_fetch=True)

    def _sync(self, allow_fetch: bool) -> None:
        service = self._get_service()
        path = self._state.path
        if self._adopt(service.get_cached(path)):
            # The cache is newer than any fetch still in flight
            if self._state.pending:
                self._state.generation += 1
                self._state.pending = False
            return
        if allow_fetch:
            self._fetch(service, path)

    def _fetch(self, service: ModelService, path: str) -> None:
        self._state.generation += 1
        token = self._state.generation
        self._state.pending = True
        force_reload = self.force_reload
        logger.debug(f"Fetching model for '{path}' (force_reload={force_reload}, generation={token})")

        future = service.get_data(path, force_reload=force_reload)
        relay = self._relay
        # May run on the service's thread; the relay queues it back to ours
        future.add_done_callback(lambda done, token=token: relay.completed.emit(token, done))

    def _on_fetch_completed(self, token: int, future: Future) -> None:
        if self._state.disposed or token != self._state.generation:
            logger.debug(f"Dropping stale fetch for '{self._state.path}' (generation {token})")
            return
        self._state.pending = False

        if future.cancelled():
            logger.debug(f"Fetch for '{self._state.path}' was cancelled")
            return
        error = future.exception()
        if error is not None:
            # Last-known-good props stay on screen
            logger.warning(f"Model fetch failed for '{self._state.path}': {error}")
            return
        self._adopt(future.result())

    def _on_model_changed(self) -> None:
        logger.debug(f"Model changed at '{self._state.path}'")
        self.update_data()

    def _adopt(self, data: Any) -> bool:
        """
        Adopt ``data`` as the node's props.

        Returns:
            True if ``data`` is a non-empty model (adopted now or already current)
        """
        if is_empty_model(data):
            return False
        if data == self._state.last_model:
            return True

        self._state.last_model = copy.deepcopy(dict(data))
        self._state.props = {**self._state.props, **model_to_props(data),
                             CONSTANTS.CQ_PATH: self._state.path}
        self._refresh_child()
        self.props_changed.emit(self.child_props)

        if self.inject_props_on_init and self._notifier is not None:
            self._notifier.emit_event(get_editable_config().async_content_loaded_event)
        return True

    # ========== LISTENER BINDING ==========

    def _register_listener(self) -> None:
        if self._state.registered:
            return
        path = self._state.path
        self._get_service().add_listener(path, self._listener)
        self._state.registered = True
        self._state.registered_path = path

    def _release_listener(self) -> None:
        if not self._state.registered:
            return
        self._get_service().remove_listener(self._state.registered_path, self._listener)
        self._state.registered = False
        self._state.registered_path = ""

    # ========== RENDERING ==========

    def _refresh_child(self) -> None:
        props = self.child_props
        if isinstance(self._child, PropsSettable):
            self._child.set_props(props)
            return

        widget = self._wrapped(props, self)
        old = self._child
        if old is not None:
            unmount_widget(old)
            self._layout.removeWidget(old)
            old.deleteLater()
        self._child = widget
        self._layout.addWidget(widget)

    # ========== HELPERS ==========

    def _get_service(self) -> ModelService:
        service = self._model_service or get_model_service()
        if service is None:
            raise ModelServiceUnavailableError(
                f"No model service available to synchronize '{self._state.path}'. "
                f"Pass model_service= or call register_model_service()."
            )
        return service

    def _flag(self, prop_name: str, default: bool) -> bool:
        value = self._input_props.get(prop_name)
        return default if value is None else bool(value)

    @staticmethod
    def _resolve_path(props: Props) -> str:
        return canonical_path(
            props.get(CONSTANTS.CQ_PATH),
            props.get(CONSTANTS.PAGE_PATH),
            props.get(CONSTANTS.ITEM_PATH),
        )

    @staticmethod
    def _seed_props(props: Props, path: str) -> Props:
        seeded = model_to_props(props_to_state(props))
        seeded[CONSTANTS.CQ_PATH] = path
        return seeded


def with_model(
    renderer: RendererDescriptor,
    config: Optional[ModelProviderConfig] = None,
    model_service: Optional[ModelService] = None,
    notifier: Optional["EditorNotifier"] = None,
) -> RendererDescriptor:
    """
    Wrap ``renderer`` so each mount runs the model synchronization protocol.

    Args:
        renderer: Callable ``(props, parent=None) -> QWidget``
        config: Fetch behaviour; per-instance ``cqForceReload`` /
            ``injectPropsOnInit`` props override it
        model_service: Explicit service (defaults to the registered one)
        notifier: Explicit content-ready channel (defaults to the configured one)

    Returns:
        Renderer descriptor producing ModelProvider widgets
    """
    config = config or ModelProviderConfig()

    def mount(props: Optional[Props] = None, parent: Optional[QWidget] = None) -> ModelProvider:
        return ModelProvider(renderer, props, config=config, model_service=model_service,
                             notifier=notifier, parent=parent)

    mount.__name__ = f"with_model({renderer_name(renderer)})"
    mount.wrapped_renderer = renderer
    mount.model_config = config
    return mount
