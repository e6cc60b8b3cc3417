"""
Canonical content path helpers.

A path is a ``/``-delimited string locating a node in the content tree.
The empty string means "nothing to synchronize". All functions are pure.
"""

from typing import Optional

PATH_SEPARATOR = "/"
PLACEHOLDER_SUFFIX = "/*"


def join_path(parent: Optional[str], child: str) -> str:
    """
    Join a child key onto a parent path.

    Args:
        parent: Parent path, empty or None at the root
        child: Child key

    Returns:
        ``parent/child``, or ``child`` when there is no parent

    Example:
        >>> join_path("/content/page", "title")
        '/content/page/title'
        >>> join_path("", "title")
        'title'
    """
    if parent:
        return f"{parent}{PATH_SEPARATOR}{child}"
    return child


def canonical_path(
    explicit_path: Optional[str] = None,
    page_path: Optional[str] = None,
    item_path: Optional[str] = None,
) -> str:
    """
    Resolve the path a node synchronizes with.

    Precedence: an explicit path wins; otherwise the page path joined with the
    item path (the page itself when there is no item path); otherwise empty.
    """
    if explicit_path:
        return explicit_path
    if page_path:
        if not item_path:
            return page_path
        return join_path(page_path, item_path)
    return ""


def placeholder_data_path(path: Optional[str]) -> str:
    """Data path of a container's insertion placeholder (``path/*``)."""
    return f"{path or ''}{PLACEHOLDER_SUFFIX}"
