"""
Ready-made renderers and views.
"""

from .text_component import TextComponent, TEXT_EDIT_CONFIG, is_text_empty
from .content_view import ContentView

__all__ = [
    "TextComponent",
    "TEXT_EDIT_CONFIG",
    "is_text_empty",
    "ContentView",
]
