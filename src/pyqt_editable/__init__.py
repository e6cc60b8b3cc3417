"""
pyqt-editable-components: model-driven, editor-aware component trees for PyQt6.

Renders a tree of widgets from a remotely sourced, hierarchical content model
and keeps it synchronized while the model changes (e.g. live editing sessions).

Architecture:
- Tier 1 (Core): Pure path helpers
- Tier 2 (Protocols): Renderer ABCs, model service protocol, configuration
- Tier 3 (Components): Component mapping, Container, ModelProvider, EditableComponent
- Tier 4 (Services/Widgets): Editor notification channel, in-process model store,
  ready-made renderers

Key Features:
- Type-keyed renderer registry with graceful misses
- Cache-first synchronization: resident content paints without a round trip
- One listener per node, released under the path it was registered with
- Stale fetch completions dropped after unmount or path change
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from .components import (
        ComponentMapping,
        Container,
        ContainerConfig,
        EditableComponent,
        EditConfig,
        ModelProvider,
        ModelProviderConfig,
        ResponsiveGrid,
        get_component_mapping,
        map_to,
        with_editable,
        with_model,
    )
    from .protocols import EditableConfig, get_editable_config, register_model_service, set_editable_config
    from .services import EditorNotifier, ModelStore

_EXPORTS = {
    "ComponentMapping": ("pyqt_editable.components.component_mapping", "ComponentMapping"),
    "get_component_mapping": ("pyqt_editable.components.component_mapping", "get_component_mapping"),
    "map_to": ("pyqt_editable.components.component_mapping", "map_to"),
    "Container": ("pyqt_editable.components.container", "Container"),
    "ContainerConfig": ("pyqt_editable.components.container", "ContainerConfig"),
    "ResponsiveGrid": ("pyqt_editable.components.responsive_grid", "ResponsiveGrid"),
    "EditableComponent": ("pyqt_editable.components.editable_component", "EditableComponent"),
    "EditConfig": ("pyqt_editable.components.editable_component", "EditConfig"),
    "with_editable": ("pyqt_editable.components.editable_component", "with_editable"),
    "ModelProvider": ("pyqt_editable.components.model_provider", "ModelProvider"),
    "ModelProviderConfig": ("pyqt_editable.components.model_provider", "ModelProviderConfig"),
    "with_model": ("pyqt_editable.components.model_provider", "with_model"),
    "EditableConfig": ("pyqt_editable.protocols.editable_config", "EditableConfig"),
    "get_editable_config": ("pyqt_editable.protocols.editable_config", "get_editable_config"),
    "set_editable_config": ("pyqt_editable.protocols.editable_config", "set_editable_config"),
    "register_model_service": ("pyqt_editable.protocols.model_service", "register_model_service"),
    "EditorNotifier": ("pyqt_editable.services.editor_notifier", "EditorNotifier"),
    "ModelStore": ("pyqt_editable.services.model_store", "ModelStore"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", *_EXPORTS.keys()]
