"""
Model-driven component resolution and synchronization.

Container resolution, the component mapping registry, the model provider
and the editable wrapper.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .component_mapping import ComponentMapping, get_component_mapping, map_to
    from .constants import CONSTANTS, EditableConstants
    from .container import ChildBinding, Container, ContainerConfig
    from .container_placeholder import ContainerPlaceholder
    from .editable_component import EditableComponent, EditConfig, EmptyPlaceholder, with_editable
    from .model_provider import ModelProvider, ModelProviderConfig, SyncState, SyncStatus, with_model
    from .model_utils import is_empty_model, model_to_props, props_to_state
    from .responsive_grid import ResponsiveGrid

_EXPORTS = {
    "ComponentMapping": ("pyqt_editable.components.component_mapping", "ComponentMapping"),
    "get_component_mapping": ("pyqt_editable.components.component_mapping", "get_component_mapping"),
    "map_to": ("pyqt_editable.components.component_mapping", "map_to"),
    "CONSTANTS": ("pyqt_editable.components.constants", "CONSTANTS"),
    "EditableConstants": ("pyqt_editable.components.constants", "EditableConstants"),
    "ChildBinding": ("pyqt_editable.components.container", "ChildBinding"),
    "Container": ("pyqt_editable.components.container", "Container"),
    "ContainerConfig": ("pyqt_editable.components.container", "ContainerConfig"),
    "ContainerPlaceholder": ("pyqt_editable.components.container_placeholder", "ContainerPlaceholder"),
    "EditableComponent": ("pyqt_editable.components.editable_component", "EditableComponent"),
    "EditConfig": ("pyqt_editable.components.editable_component", "EditConfig"),
    "EmptyPlaceholder": ("pyqt_editable.components.editable_component", "EmptyPlaceholder"),
    "with_editable": ("pyqt_editable.components.editable_component", "with_editable"),
    "ModelProvider": ("pyqt_editable.components.model_provider", "ModelProvider"),
    "ModelProviderConfig": ("pyqt_editable.components.model_provider", "ModelProviderConfig"),
    "SyncState": ("pyqt_editable.components.model_provider", "SyncState"),
    "SyncStatus": ("pyqt_editable.components.model_provider", "SyncStatus"),
    "with_model": ("pyqt_editable.components.model_provider", "with_model"),
    "is_empty_model": ("pyqt_editable.components.model_utils", "is_empty_model"),
    "model_to_props": ("pyqt_editable.components.model_utils", "model_to_props"),
    "props_to_state": ("pyqt_editable.components.model_utils", "props_to_state"),
    "ResponsiveGrid": ("pyqt_editable.components.responsive_grid", "ResponsiveGrid"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
