"""
Component mapping: content type discriminant -> renderer descriptor.

Design:
- One renderer per type key; re-registering overwrites (last write wins)
  and logs a warning, matching the widget registry's duplicate policy
- resolve() returns None for unmapped types; content authors may reference
  types the application does not implement yet, so a miss is not an error
- map_to() decorator registers a renderer wrapped for model synchronization
  and edit decoration, the composition every mapped component needs
"""

import logging
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Optional, Union

from pyqt_editable.protocols import RendererDescriptor, renderer_name

if TYPE_CHECKING:
    from .editable_component import EditConfig
    from .model_provider import ModelProviderConfig

logger = logging.getLogger(__name__)


class ComponentMapping:
    """Registry mapping a type discriminant to a renderer descriptor."""

    def __init__(self) -> None:
        self._renderers: Dict[str, RendererDescriptor] = {}

    def register(self, type_key: str, renderer: RendererDescriptor) -> None:
        """
        Map ``type_key`` to ``renderer``.

        Args:
            type_key: Content type discriminant (e.g. "myapp/components/text")
            renderer: Callable ``(props, parent=None) -> QWidget``
        """
        existing = self._renderers.get(type_key)
        if existing is not None and existing is not renderer:
            logger.warning(
                f"Type '{type_key}' already mapped to {renderer_name(existing)}. "
                f"Overwriting with {renderer_name(renderer)}."
            )
        self._renderers[type_key] = renderer
        logger.debug(f"Mapped '{type_key}' -> {renderer_name(renderer)}")

    def resolve(self, type_key: object) -> Optional[RendererDescriptor]:
        """
        Get the renderer mapped to ``type_key``.

        Returns:
            The renderer, or None if the type is unmapped or not a string
        """
        if not isinstance(type_key, str) or not type_key:
            return None
        return self._renderers.get(type_key)

    def unregister(self, type_key: str) -> None:
        self._renderers.pop(type_key, None)

    def keys(self) -> List[str]:
        return list(self._renderers.keys())

    def clear(self) -> None:
        self._renderers.clear()

    def __contains__(self, type_key: object) -> bool:
        return self.resolve(type_key) is not None

    def __len__(self) -> int:
        return len(self._renderers)


_COMPONENT_MAPPING = ComponentMapping()


def get_component_mapping() -> ComponentMapping:
    """Get the application-wide component mapping."""
    return _COMPONENT_MAPPING


def map_to(
    type_keys: Union[str, Iterable[str]],
    edit_config: Optional["EditConfig"] = None,
    model_config: Optional["ModelProviderConfig"] = None,
    mapping: Optional[ComponentMapping] = None,
) -> Callable[[RendererDescriptor], RendererDescriptor]:
    """
    Class decorator mapping content types to a renderer.

    The renderer is registered as ``with_model(with_editable(renderer, edit_config), model_config)``
    and returned unchanged, so the decorated class stays usable directly.

    Example:
        @map_to("myapp/components/text", EditConfig(empty_label="Text", is_empty=is_text_empty))
        class Text(QLabel):
            def __init__(self, props, parent=None):
                ...
    """
    from .editable_component import with_editable
    from .model_provider import with_model

    keys = [type_keys] if isinstance(type_keys, str) else list(type_keys)
    target = mapping if mapping is not None else _COMPONENT_MAPPING

    def decorator(renderer: RendererDescriptor) -> RendererDescriptor:
        mounted = with_model(with_editable(renderer, edit_config), model_config)
        for key in keys:
            target.register(key, mounted)
        return renderer

    return decorator
