"""Responsive grid - a container placing each child in a layout column."""

from typing import Any, Dict

from pyqt_editable.protocols import Props

from .constants import CONSTANTS
from .container import Container


class ResponsiveGrid(Container):
    """
    Container whose children carry their column classes.

    Reads ``columnClassNames`` (item key -> classes) and ``gridClassNames``
    from its own props.
    """

    def shape_child_props(self, item: Any, key: str, item_path: str) -> Props:
        props = super().shape_child_props(item, key, item_path)
        column_class_names = self._props.get(CONSTANTS.COLUMN_CLASS_NAMES) or {}
        column_class = column_class_names.get(key) if hasattr(column_class_names, "get") else None
        if column_class:
            props[CONSTANTS.CLASS_ATTR] = column_class
        return props

    def container_properties(self) -> Dict[str, Any]:
        attrs = super().container_properties()
        grid_class_names = self._props.get(CONSTANTS.GRID_CLASS_NAMES)
        if grid_class_names:
            attrs[CONSTANTS.CLASS_ATTR] = f"{attrs[CONSTANTS.CLASS_ATTR]} {grid_class_names}"
        return attrs
