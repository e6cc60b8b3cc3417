"""Text renderer for rich or plain text content."""

from typing import Any, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel, QWidget

from pyqt_editable.components.editable_component import EditConfig
from pyqt_editable.protocols import Props, PropsSettable, PyQtWidgetMeta

TEXT_PROP = "text"
RICH_TEXT_PROP = "richText"


def is_text_empty(props: Props) -> bool:
    """Empty-state predicate for text content."""
    text: Any = props.get(TEXT_PROP)
    return text is None or not str(text).strip()


TEXT_EDIT_CONFIG = EditConfig(empty_label="Text", is_empty=is_text_empty)


class TextComponent(QLabel, PropsSettable, metaclass=PyQtWidgetMeta):
    """
    Displays the ``text`` prop; ``richText`` switches to rich text rendering.

    Usage:
        map_to("myapp/components/text", TEXT_EDIT_CONFIG)(TextComponent)
    """

    def __init__(self, props: Optional[Props] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.setWordWrap(True)
        self._props: Props = {}
        self.set_props(props or {})

    @property
    def props(self) -> Props:
        return dict(self._props)

    def set_props(self, props: Props) -> None:
        """Implement PropsSettable ABC."""
        self._props = dict(props)
        text_format = Qt.TextFormat.RichText if props.get(RICH_TEXT_PROP) else Qt.TextFormat.PlainText
        self.setTextFormat(text_format)
        text = props.get(TEXT_PROP)
        self.setText("" if text is None else str(text))
