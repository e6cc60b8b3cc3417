"""
Service layer.

Collaborators the component tree talks to: the editor notification channel
and an in-process model store.
"""

from .editor_notifier import EditorNotifier
from .model_store import ModelStore

__all__ = [
    "EditorNotifier",
    "ModelStore",
]
