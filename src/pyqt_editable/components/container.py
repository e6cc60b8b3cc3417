"""
Container - resolves an ordered item list into rendered child components.

For each key of ``cqItemsOrder``, in order:

1. Skip keys missing from ``cqItems``
2. Transform the item model into props
3. Skip items without a type discriminant
4. Resolve the renderer through the component mapping; skip unmapped types
5. Compute the item path (``cqPath/key``)
6. Let ``shape_child_props()`` add layout metadata (subclass hook)
7. Emit a ChildBinding

Misses leave a gap at that position; no placeholder, no error. Renderer
exceptions propagate to the caller.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

from PyQt6.QtWidgets import QVBoxLayout, QWidget

from pyqt_editable.core.path_utils import join_path
from pyqt_editable.exceptions import ContainerDepthError
from pyqt_editable.protocols import (
    Props,
    PropsSettable,
    PyQtWidgetMeta,
    RendererDescriptor,
    Unmountable,
    get_editable_config,
    unmount_widget,
)

from .component_mapping import ComponentMapping, get_component_mapping
from .constants import CONSTANTS
from .container_placeholder import ContainerPlaceholder
from .model_utils import model_to_props

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerConfig:
    """
    Configuration for Container resolution.

    Attributes:
        component_mapping: Registry used to resolve item types (None = global mapping)
        model_to_props: Item model -> props transform
        max_depth: Nesting limit (None = EditableConfig.max_container_depth)
    """
    component_mapping: Optional[ComponentMapping] = None
    model_to_props: Callable[[Any], Props] = model_to_props
    max_depth: Optional[int] = None


@dataclass(frozen=True)
class ChildBinding:
    """A resolved child: which renderer to mount, with which props, at which path."""
    key: str
    renderer: RendererDescriptor
    props: Props
    path: str
    editor_mode: bool
    extra_props: Props
    depth: int = 0

    def mount_props(self) -> Props:
        """Props the renderer is mounted with."""
        return {
            **self.props,
            CONSTANTS.CQ_PATH: self.path,
            CONSTANTS.IS_IN_EDITOR: self.editor_mode,
            CONSTANTS.CONTAINER_PROPS: self.extra_props,
            CONSTANTS.CONTAINER_DEPTH: self.depth,
        }


class Container(QWidget, PropsSettable, Unmountable, metaclass=PyQtWidgetMeta):
    """
    Renders the children of a container model.

    Subclasses inject per-child layout metadata by overriding
    shape_child_props(); the resolution order itself is fixed.
    """

    def __init__(
        self,
        props: Optional[Props] = None,
        parent: Optional[QWidget] = None,
        config: Optional[ContainerConfig] = None,
    ):
        super().__init__(parent)
        self._config = config or ContainerConfig()
        self._props: Props = dict(props or {})
        self._child_widgets: List[QWidget] = []
        self._placeholder: Optional[ContainerPlaceholder] = None

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._layout = layout

        self._render_children()

    # ========== PROPS ==========

    @property
    def props(self) -> Props:
        return dict(self._props)

    @property
    def cq_path(self) -> str:
        return self._props.get(CONSTANTS.CQ_PATH) or ""

    @property
    def is_in_editor(self) -> bool:
        return bool(self._props.get(CONSTANTS.IS_IN_EDITOR))

    @property
    def items(self) -> Mapping:
        items = self._props.get(CONSTANTS.CQ_ITEMS)
        return items if isinstance(items, Mapping) else {}

    @property
    def items_order(self) -> List[str]:
        return list(self._props.get(CONSTANTS.CQ_ITEMS_ORDER) or [])

    @property
    def depth(self) -> int:
        return int(self._props.get(CONSTANTS.CONTAINER_DEPTH) or 0)

    @property
    def component_mapping(self) -> ComponentMapping:
        return self._config.component_mapping or get_component_mapping()

    @property
    def child_widgets(self) -> List[QWidget]:
        return list(self._child_widgets)

    @property
    def placeholder(self) -> Optional[ContainerPlaceholder]:
        return self._placeholder

    # ========== RESOLUTION ==========

    def iter_child_bindings(self) -> Iterator[ChildBinding]:
        """Lazily resolve ``cqItemsOrder`` into child bindings, in order."""
        items = self.items
        transform = self._config.model_to_props
        mapping = self.component_mapping
        parent_path = self.cq_path
        editor_mode = self.is_in_editor

        for key in self.items_order:
            if key not in items:
                logger.debug(f"Item '{key}' listed in order but missing from items, skipping")
                continue
            item = items[key]
            props = transform(item)
            type_key = props.get(CONSTANTS.CQ_TYPE)
            if not type_key:
                logger.debug(f"Item '{key}' has no type, skipping")
                continue
            renderer = mapping.resolve(type_key)
            if renderer is None:
                logger.debug(f"No renderer mapped for type '{type_key}' (item '{key}'), skipping")
                continue
            item_path = join_path(parent_path, key)
            yield ChildBinding(
                key=key,
                renderer=renderer,
                props=props,
                path=item_path,
                editor_mode=editor_mode,
                extra_props=self.shape_child_props(item, key, item_path),
                depth=self.depth + 1,
            )

    def shape_child_props(self, item: Any, key: str, item_path: str) -> Props:
        """
        Props handed to a child as ``containerProps``.

        Override to add layout metadata (e.g. column classes). The default is
        the item's transformed props.
        """
        return self._config.model_to_props(item)

    def container_properties(self) -> Dict[str, Any]:
        """Attributes of the container itself; the data path only in editor mode."""
        attrs: Dict[str, Any] = {CONSTANTS.CLASS_ATTR: get_editable_config().container_class_names}
        if self.is_in_editor:
            attrs[CONSTANTS.DATA_PATH_ATTR] = self.cq_path
        return attrs

    # ========== RENDERING ==========

    def set_props(self, props: Props) -> None:
        self._props = dict(props)
        self._render_children()

    def unmount(self) -> None:
        for widget in self._child_widgets:
            unmount_widget(widget)

    def _render_children(self) -> None:
        self._check_depth()
        self._clear_children()

        for name, value in self.container_properties().items():
            self.setProperty(name, value)
        if not self.is_in_editor:
            self.setProperty(CONSTANTS.DATA_PATH_ATTR, None)

        for binding in self.iter_child_bindings():
            widget = binding.renderer(binding.mount_props(), self)
            self._layout.addWidget(widget)
            self._child_widgets.append(widget)

        if self.is_in_editor:
            self._placeholder = ContainerPlaceholder(
                self.cq_path, get_editable_config().new_section_class_names, self
            )
            self._layout.addWidget(self._placeholder)
        logger.debug(f"Rendered {len(self._child_widgets)} child(ren) under '{self.cq_path}'")

    def _clear_children(self) -> None:
        for widget in self._child_widgets:
            unmount_widget(widget)
            self._layout.removeWidget(widget)
            widget.deleteLater()
        self._child_widgets = []
        if self._placeholder is not None:
            self._layout.removeWidget(self._placeholder)
            self._placeholder.deleteLater()
            self._placeholder = None

    def _check_depth(self) -> None:
        max_depth = self._config.max_depth
        if max_depth is None:
            max_depth = get_editable_config().max_container_depth
        if self.depth > max_depth:
            raise ContainerDepthError(
                f"Container at '{self.cq_path}' is nested {self.depth} levels deep "
                f"(limit {max_depth}); check for a cyclic component mapping"
            )
