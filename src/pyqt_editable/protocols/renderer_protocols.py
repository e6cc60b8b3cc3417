"""
Renderer ABC contracts.

A renderer descriptor is any callable ``(props, parent=None) -> QWidget``;
a QWidget subclass taking ``(props, parent=None)`` qualifies as-is.

The widgets those descriptors produce opt into lifecycle behaviour through
explicit ABCs rather than duck typing:

- PropsSettable: accepts new props in place (otherwise the owner recreates it)
- Unmountable: releases listeners or children before the owner discards it
"""

from abc import ABC, ABCMeta, abstractmethod
from typing import Any, Callable, Dict, Optional

from PyQt6.QtCore import QObject
from PyQt6.QtWidgets import QWidget

Props = Dict[str, Any]
RendererDescriptor = Callable[..., QWidget]

# Qt's metaclass combined with ABCMeta so widgets can inherit the ABCs below
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class PropsSettable(ABC):
    """ABC for rendered widgets that can be updated with new props in place."""

    @abstractmethod
    def set_props(self, props: Props) -> None:
        """
        Replace the widget's props and refresh its presentation.

        Args:
            props: Flat props mapping (already passed through model_to_props)
        """
        pass


class Unmountable(ABC):
    """ABC for rendered widgets that hold resources beyond their Qt children."""

    @abstractmethod
    def unmount(self) -> None:
        """Release listeners and unmount children. Must be idempotent."""
        pass


def unmount_widget(widget: Optional[QWidget]) -> None:
    """Unmount a rendered widget if it implements Unmountable."""
    if isinstance(widget, Unmountable):
        widget.unmount()


def renderer_name(renderer: Any) -> str:
    """Readable name of a renderer descriptor for logs and factory names."""
    return getattr(renderer, "__name__", None) or type(renderer).__name__
