"""
Editable component constants for eliminating magic strings.

Centralizes the wire-model keys, prop names and attribute names shared by the
container, model provider and editable wrapper.
"""

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class EditableConstants:
    """
    Centralized constants for editable component implementations.

    Categories:
    - Wire model keys (as delivered by the model service)
    - Prop names (after model_to_props)
    - Attribute names stored as Qt dynamic properties
    """

    # Wire model keys
    TYPE_KEY: str = ":type"
    ITEMS_KEY: str = ":items"
    ITEMS_ORDER_KEY: str = ":itemsOrder"
    PATH_KEY: str = ":path"
    CHILDREN_KEY: str = ":children"
    WIRE_PREFIX: str = ":"
    PROP_PREFIX: str = "cq"

    # Prop names
    CQ_TYPE: str = "cqType"
    CQ_ITEMS: str = "cqItems"
    CQ_ITEMS_ORDER: str = "cqItemsOrder"
    CQ_PATH: str = "cqPath"
    PAGE_PATH: str = "pagePath"
    ITEM_PATH: str = "itemPath"
    IS_IN_EDITOR: str = "isInEditor"
    NO_DECORATION: str = "aemNoDecoration"
    CONTAINER_PROPS: str = "containerProps"
    CSS_CLASS_NAMES: str = "cssClassNames"
    FORCE_RELOAD: str = "cqForceReload"
    INJECT_PROPS_ON_INIT: str = "injectPropsOnInit"
    WRAPPED_COMPONENT: str = "wrappedComponent"
    CONTAINER_DEPTH: str = "containerDepth"
    COLUMN_CLASS_NAMES: str = "columnClassNames"
    GRID_CLASS_NAMES: str = "gridClassNames"

    # Props that steer the model provider and never reach the renderer
    PRIVATE_PROPS: FrozenSet[str] = frozenset({
        "wrappedComponent",
        "cqForceReload",
        "injectPropsOnInit",
    })

    # Attribute names (Qt dynamic properties)
    CLASS_ATTR: str = "class"
    DATA_PATH_ATTR: str = "data-cq-data-path"
    RESOURCE_TYPE_ATTR: str = "data-cq-resource-type"
    EMPTY_TEXT_ATTR: str = "data-emptytext"


CONSTANTS = EditableConstants()
