"""Generic view rendering the content stored at a path."""

import logging
from typing import Optional

from PyQt6.QtWidgets import QVBoxLayout, QWidget

from pyqt_editable.components.constants import CONSTANTS
from pyqt_editable.components.container import Container, ContainerConfig
from pyqt_editable.components.model_provider import ModelProvider, ModelProviderConfig, with_model
from pyqt_editable.protocols import (
    ModelService,
    Props,
    PyQtWidgetMeta,
    Unmountable,
    get_editable_config,
)

logger = logging.getLogger(__name__)

CONTENT_PAGE_CLASS = "cms-content-page"


class ContentView(QWidget, Unmountable, metaclass=PyQtWidgetMeta):
    """
    Renders the container model at ``cq_path`` in an application screen.

    ``cq_path`` should come from content the application already loaded into
    the model service, so the first paint is served from its cache. Edit
    decoration is skipped unless the editor is active, and the view's own
    props are forwarded to the container as ``containerProps``.

    Usage:
        view = ContentView("/content/site/en/home/jcr:content/root", model_service=store)
        layout.addWidget(view)
    """

    def __init__(
        self,
        cq_path: str,
        cq_type: Optional[str] = None,
        is_main_container: bool = True,
        container_config: Optional[ContainerConfig] = None,
        model_config: Optional[ModelProviderConfig] = None,
        model_service: Optional[ModelService] = None,
        notifier=None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.setProperty(CONSTANTS.CLASS_ATTR, CONTENT_PAGE_CLASS)
        self._view_props: Props = {
            CONSTANTS.CQ_PATH: cq_path,
            CONSTANTS.CQ_TYPE: cq_type,
            "isMainContainer": is_main_container,
        }

        def container(props: Props, parent: Optional[QWidget] = None) -> Container:
            return Container(props, parent, container_config)

        mount = with_model(container, model_config, model_service=model_service, notifier=notifier)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._provider: ModelProvider = mount({
            **self._view_props,
            CONSTANTS.IS_IN_EDITOR: get_editable_config().is_in_editor,
            CONSTANTS.NO_DECORATION: True,
            CONSTANTS.CONTAINER_PROPS: dict(self._view_props),
        }, self)
        layout.addWidget(self._provider)
        logger.debug(f"ContentView mounted for '{cq_path}'")

    @property
    def provider(self) -> ModelProvider:
        return self._provider

    @property
    def container(self) -> Optional[Container]:
        child = self._provider.child_widget
        return child if isinstance(child, Container) else None

    def unmount(self) -> None:
        self._provider.unmount()

    def closeEvent(self, event) -> None:
        self.unmount()
        super().closeEvent(event)
