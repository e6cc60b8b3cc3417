"""Insertion slot appended to containers in editor mode."""

from typing import Optional

from PyQt6.QtWidgets import QWidget

from pyqt_editable.core.path_utils import placeholder_data_path

from .constants import CONSTANTS


class ContainerPlaceholder(QWidget):
    """Placeholder of the Container component, targeted by the editor to add children."""

    def __init__(self, cq_path: Optional[str], placeholder_class_names: str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setProperty(CONSTANTS.CLASS_ATTR, placeholder_class_names)
        self.setProperty(CONSTANTS.DATA_PATH_ATTR, placeholder_data_path(cq_path))

    @property
    def data_path(self) -> str:
        return self.property(CONSTANTS.DATA_PATH_ATTR)

    @property
    def class_names(self) -> str:
        return self.property(CONSTANTS.CLASS_ATTR)
