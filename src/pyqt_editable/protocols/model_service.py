"""Model service protocol and global provider registration.

The model service owns the content tree: a synchronous cache keyed by path,
an asynchronous fetch, and path-keyed change listeners. Applications register
their implementation once; widgets may also receive one explicitly.
"""

from concurrent.futures import Future
from typing import Any, Callable, Dict, Optional, Protocol


class ModelService(Protocol):
    """Protocol for the remote content model service."""

    def get_cached(self, path: str) -> Optional[Dict[str, Any]]:
        """Return the model resident in the local cache for ``path``, or None."""
        ...

    def get_data(self, path: str, force_reload: bool = False) -> "Future[Optional[Dict[str, Any]]]":
        """Fetch the model at ``path``. The future may complete on any thread."""
        ...

    def add_listener(self, path: str, callback: Callable[[], None]) -> None:
        """Call ``callback`` whenever the model at ``path`` changes."""
        ...

    def remove_listener(self, path: str, callback: Callable[[], None]) -> None:
        """Stop calling ``callback`` for ``path``. Unknown pairs are ignored."""
        ...


_model_service: Optional[ModelService] = None


def register_model_service(service: Optional[ModelService]) -> None:
    """Register the global model service (None clears it)."""
    global _model_service
    _model_service = service


def get_model_service() -> Optional[ModelService]:
    """Get the registered model service."""
    return _model_service
