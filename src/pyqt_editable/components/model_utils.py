"""Model to props conversion.

The model service delivers nodes with ``:``-prefixed structural keys
(``:type``, ``:items``, ``:itemsOrder``, ``:path``). Renderers receive them as
flat camel-case props (``cqType``, ``cqItems``, ``cqItemsOrder``, ``cqPath``).
"""

from collections.abc import Mapping
from typing import Any, Dict, Optional

from .constants import CONSTANTS


def prop_key(model_key: str) -> str:
    """Convert a wire model key to its prop name (``:itemsOrder`` -> ``cqItemsOrder``)."""
    if model_key.startswith(CONSTANTS.WIRE_PREFIX) and len(model_key) > 1:
        remainder = model_key[1:]
        return f"{CONSTANTS.PROP_PREFIX}{remainder[0].upper()}{remainder[1:]}"
    return model_key


def model_to_props(model: Optional[Mapping]) -> Dict[str, Any]:
    """
    Flatten a model into renderer props.

    Args:
        model: Model mapping from the model service (None is treated as empty)

    Returns:
        New dict; the input is not modified. Nested values are shared.
    """
    if not model:
        return {}
    return {prop_key(key) if isinstance(key, str) else key: value for key, value in model.items()}


def props_to_state(props: Optional[Mapping]) -> Dict[str, Any]:
    """Drop model-provider steering props so they never reach the renderer."""
    if not props:
        return {}
    return {key: value for key, value in props.items() if key not in CONSTANTS.PRIVATE_PROPS}


def is_empty_model(data: Any) -> bool:
    """True for None, non-mapping values and empty mappings."""
    return not isinstance(data, Mapping) or len(data) == 0
