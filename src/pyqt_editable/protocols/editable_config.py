"""Runtime configuration for editable component rendering.

Provides hooks for applications to tell the component tree whether it is
hosted inside an authoring environment and how to style editor affordances.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class EditableConfig:
    """Configuration for editable component rendering.

    Applications can subclass this to provide custom configuration.

    Attributes:
        is_in_editor: Whether content is rendered inside the authoring editor
        max_container_depth: Nesting limit for containers (guards cyclic mappings)
        container_class_names: Class names set on every container
        placeholder_class_names: Class names of the empty-component placeholder
        new_section_class_names: Class names of the container "new section" slot
        async_content_loaded_event: Event name announced once fetched content is shown
        editor_notifier: Default notification channel for model providers
    """

    is_in_editor: bool = False
    max_container_depth: int = 64
    container_class_names: str = "aem-container"
    placeholder_class_names: str = "cq-placeholder"
    new_section_class_names: str = "new section"
    async_content_loaded_event: str = "cq-async-content-loaded"
    editor_notifier: Optional[Any] = None


# Global config instance (set by application)
_editable_config: Optional[EditableConfig] = None


def set_editable_config(config: Optional[EditableConfig]) -> None:
    """Set the global editable configuration.

    Args:
        config: EditableConfig instance (None restores defaults)
    """
    global _editable_config
    _editable_config = config


def get_editable_config() -> EditableConfig:
    """Get the current editable configuration.

    Returns:
        Current EditableConfig or default if not set
    """
    if _editable_config is None:
        return EditableConfig()
    return _editable_config
