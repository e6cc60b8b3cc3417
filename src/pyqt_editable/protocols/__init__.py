"""
Renderer protocols, model service contract and configuration.

ABC-based widget contracts plus the pluggable collaborators the component
tree depends on.
"""

from .renderer_protocols import (
    Props,
    RendererDescriptor,
    PyQtWidgetMeta,
    PropsSettable,
    Unmountable,
    unmount_widget,
    renderer_name,
)
from .model_service import ModelService, register_model_service, get_model_service
from .editable_config import EditableConfig, set_editable_config, get_editable_config

__all__ = [
    "Props",
    "RendererDescriptor",
    "PyQtWidgetMeta",
    "PropsSettable",
    "Unmountable",
    "unmount_widget",
    "renderer_name",
    "ModelService",
    "register_model_service",
    "get_model_service",
    "EditableConfig",
    "set_editable_config",
    "get_editable_config",
]
