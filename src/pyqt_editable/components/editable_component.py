"""
Editable component - decorates a rendered component with authoring affordances.

In editor mode the wrapped widget sits inside a wrapper carrying the data path
and resource type the editor overlays need, followed by an empty-state
placeholder when the edit config declares the content empty. Outside the
editor a component flagged ``aemNoDecoration`` is passed through: the wrapper
stays in place but carries no class, attributes or placeholder, so a later
switch into the editor decorates the same widget.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from pyqt_editable.protocols import (
    Props,
    PropsSettable,
    PyQtWidgetMeta,
    RendererDescriptor,
    Unmountable,
    get_editable_config,
    renderer_name,
    unmount_widget,
)

from .constants import CONSTANTS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EditConfig:
    """
    Configuration object of the with_editable() wrapper.

    Attributes:
        empty_label: Label shown on the placeholder when the component is empty
        is_empty: Side-effect-free predicate deciding whether props are empty
        resource_type: Resource type exposed on the wrapper for the editor
    """
    empty_label: Optional[str] = None
    is_empty: Optional[Callable[[Props], bool]] = None
    resource_type: Optional[str] = None


class EmptyPlaceholder(QLabel):
    """Marker shown after an empty component so authors can target it."""

    def __init__(self, empty_label: Optional[str] = None, parent: Optional[QWidget] = None):
        super().__init__(empty_label or "", parent)
        self.setProperty(CONSTANTS.CLASS_ATTR, get_editable_config().placeholder_class_names)
        if empty_label is not None:
            self.setProperty(CONSTANTS.EMPTY_TEXT_ATTR, empty_label)

    @property
    def empty_label(self) -> Optional[str]:
        return self.property(CONSTANTS.EMPTY_TEXT_ATTR)


class EditableComponent(QWidget, PropsSettable, Unmountable, metaclass=PyQtWidgetMeta):
    """
    Wrapper providing a rendered component with editing capabilities.

    Attributes exposed as Qt dynamic properties:
    - ``class``: "<own css classes> <container class>"
    - ``data-cq-data-path`` / ``data-cq-resource-type``: editor mode only

    Outside the editor, ``aemNoDecoration`` props leave the wrapper bare.
    """

    def __init__(
        self,
        wrapped: RendererDescriptor,
        props: Optional[Props] = None,
        edit_config: Optional[EditConfig] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._wrapped = wrapped
        self._edit_config = edit_config or EditConfig()
        self._props: Props = dict(props or {})
        self._placeholder: Optional[EmptyPlaceholder] = None
        self._applied_attrs: List[str] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        self._layout = layout

        self._wrapped_widget = wrapped(dict(self._props), self)
        layout.addWidget(self._wrapped_widget)
        self._apply_decoration()

    @property
    def props(self) -> Props:
        return dict(self._props)

    @property
    def edit_config(self) -> EditConfig:
        return self._edit_config

    @property
    def wrapped_widget(self) -> QWidget:
        return self._wrapped_widget

    @property
    def placeholder(self) -> Optional[EmptyPlaceholder]:
        return self._placeholder

    @property
    def is_in_editor(self) -> bool:
        return bool(self._props.get(CONSTANTS.IS_IN_EDITOR))

    @property
    def is_decorated(self) -> bool:
        return self.is_in_editor or not self._props.get(CONSTANTS.NO_DECORATION)

    def edit_properties(self) -> Dict[str, Any]:
        """Attributes related to the editing of the component ({} outside the editor)."""
        if not self.is_in_editor:
            return {}
        return {
            CONSTANTS.DATA_PATH_ATTR: self._props.get(CONSTANTS.CQ_PATH),
            CONSTANTS.RESOURCE_TYPE_ATTR: self._edit_config.resource_type or "",
        }

    def use_empty_placeholder(self) -> bool:
        """Should an empty placeholder follow the wrapped component."""
        is_empty = self._edit_config.is_empty
        return self.is_in_editor and callable(is_empty) and bool(is_empty(self._props))

    @property
    def class_name(self) -> str:
        """Own css classes then container classes, always space-joined."""
        own = self._props.get(CONSTANTS.CSS_CLASS_NAMES) or ""
        container_props = self._props.get(CONSTANTS.CONTAINER_PROPS)
        container = ""
        if isinstance(container_props, Mapping):
            container = container_props.get(CONSTANTS.CLASS_ATTR) or ""
        return f"{own} {container}"

    def set_props(self, props: Props) -> None:
        self._props = dict(props)
        if isinstance(self._wrapped_widget, PropsSettable):
            self._wrapped_widget.set_props(dict(self._props))
        else:
            widget = self._wrapped(dict(self._props), self)
            old = self._wrapped_widget
            unmount_widget(old)
            self._layout.replaceWidget(old, widget)
            old.deleteLater()
            self._wrapped_widget = widget
        self._apply_decoration()

    def unmount(self) -> None:
        unmount_widget(self._wrapped_widget)

    def _apply_decoration(self) -> None:
        for name in self._applied_attrs:
            self.setProperty(name, None)
        attrs = {name: value for name, value in self.edit_properties().items() if value is not None}
        for name, value in attrs.items():
            self.setProperty(name, value)
        self._applied_attrs = list(attrs)
        self.setProperty(CONSTANTS.CLASS_ATTR, self.class_name if self.is_decorated else None)

        wants_placeholder = self.use_empty_placeholder()
        if wants_placeholder and self._placeholder is None:
            self._placeholder = EmptyPlaceholder(self._edit_config.empty_label, self)
            self._layout.addWidget(self._placeholder)
        elif not wants_placeholder and self._placeholder is not None:
            self._layout.removeWidget(self._placeholder)
            self._placeholder.deleteLater()
            self._placeholder = None


def with_editable(renderer: RendererDescriptor, edit_config: Optional[EditConfig] = None) -> RendererDescriptor:
    """
    Wrap ``renderer`` with editing capabilities.

    Outside the editor, props carrying ``aemNoDecoration`` get a bare
    pass-through wrapper; decoration follows later prop changes.
    """
    config = edit_config or EditConfig(is_empty=lambda props: False)

    def mount(props: Optional[Props] = None, parent: Optional[QWidget] = None) -> QWidget:
        return EditableComponent(renderer, props, config, parent)

    mount.__name__ = f"with_editable({renderer_name(renderer)})"
    mount.wrapped_renderer = renderer
    mount.edit_config = config
    return mount
