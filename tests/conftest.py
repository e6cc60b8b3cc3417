"""pytest configuration and fixtures for pyqt-editable-components tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from concurrent.futures import Future

import pytest
from PyQt6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_global_config():
    """Restore global configuration and service registration after each test."""
    yield
    from pyqt_editable.protocols import register_model_service, set_editable_config
    set_editable_config(None)
    register_model_service(None)


class FakeModelService:
    """Model service double recording every call; fetches resolve on demand."""

    def __init__(self, cache=None):
        self.cache = dict(cache or {})
        self.get_calls = []
        self.futures = {}
        self.listeners = []
        self.removed = []

    def get_cached(self, path):
        return self.cache.get(path)

    def get_data(self, path, force_reload=False):
        self.get_calls.append((path, force_reload))
        future = Future()
        self.futures.setdefault(path, []).append(future)
        return future

    def add_listener(self, path, callback):
        if (path, callback) not in self.listeners:
            self.listeners.append((path, callback))

    def remove_listener(self, path, callback):
        self.removed.append((path, callback))
        if (path, callback) in self.listeners:
            self.listeners.remove((path, callback))

    # ---- test controls ----

    def resolve(self, path, data):
        self.futures[path][-1].set_result(data)

    def fail(self, path, error):
        self.futures[path][-1].set_exception(error)

    def notify(self, path):
        for listener_path, callback in list(self.listeners):
            if listener_path == path:
                callback()


@pytest.fixture
def model_service():
    return FakeModelService()


@pytest.fixture
def mapping():
    from pyqt_editable.components import ComponentMapping
    return ComponentMapping()
