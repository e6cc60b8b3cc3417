"""
Core utilities.

Pure helpers with no Qt or domain dependencies.
"""

from .path_utils import join_path, canonical_path, placeholder_data_path

__all__ = [
    "join_path",
    "canonical_path",
    "placeholder_data_path",
]
