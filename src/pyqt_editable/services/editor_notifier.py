"""Explicit notification channel towards the hosting editor.

Model providers announce that fetched content has been painted so the editor
can enable authoring overlays. The channel is handed to providers at
construction instead of being dispatched through a global event target.
"""

import logging
from typing import Any, Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class EditorNotifier(QObject):
    """
    Fire-and-forget event channel consumed by the hosting editor.

    Usage:
        notifier = EditorNotifier()
        notifier.event_emitted.connect(editor.on_event)
        provider = ModelProvider(Text, props, notifier=notifier)
    """

    event_emitted = pyqtSignal(str, dict)  # event name, payload

    def emit_event(self, name: str, payload: Optional[Dict[str, Any]] = None) -> None:
        """Emit ``name`` with a copy of ``payload`` (empty by default)."""
        logger.debug(f"Editor event: {name}")
        self.event_emitted.emit(name, dict(payload or {}))
