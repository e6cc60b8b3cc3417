"""Tests for the model provider synchronization protocol."""

import logging
import threading

import pytest
from PyQt6.QtWidgets import QWidget

from pyqt_editable.components import ModelProvider, ModelProviderConfig, SyncStatus, with_model
from pyqt_editable.exceptions import ModelServiceUnavailableError
from pyqt_editable.protocols import EditableConfig, register_model_service, set_editable_config
from pyqt_editable.services import EditorNotifier
from pyqt_editable.widgets import TextComponent

PATH = "/content/page/jcr:content/root/title"
LOADED_EVENT = "cq-async-content-loaded"


def recording_renderer(renders):
    def render(props, parent=None):
        renders.append(dict(props))
        return QWidget(parent)
    return render


def _events(notifier):
    received = []
    notifier.event_emitted.connect(lambda name, payload: received.append((name, payload)))
    return received


def test_cache_hit_paints_resident_data_without_fetch(qapp, model_service):
    model_service.cache[PATH] = {":type": "text", "text": "cached"}
    renders = []

    provider = ModelProvider(recording_renderer(renders), {"cqPath": PATH}, model_service=model_service)

    assert model_service.get_calls == []
    assert len(renders) == 1
    assert renders[0]["text"] == "cached"
    assert renders[0]["cqType"] == "text"
    assert provider.status is SyncStatus.SYNCED


def test_cache_miss_issues_one_fetch_with_force_reload(qapp, model_service):
    renders = []
    provider = ModelProvider(
        recording_renderer(renders),
        {"cqPath": PATH},
        config=ModelProviderConfig(force_reload=True),
        model_service=model_service,
    )

    assert model_service.get_calls == [(PATH, True)]
    assert provider.status is SyncStatus.PENDING

    model_service.resolve(PATH, {"text": "fetched"})
    assert provider.status is SyncStatus.SYNCED
    assert provider.child_props["text"] == "fetched"
    assert renders[-1]["text"] == "fetched"
    assert model_service.get_calls == [(PATH, True)]


def test_seeds_props_before_any_model(qapp, model_service):
    renders = []
    ModelProvider(recording_renderer(renders), {"cqPath": PATH, "title": "seed"}, model_service=model_service)
    assert renders == [{"cqPath": PATH, "title": "seed"}]


def test_no_fetch_when_inject_props_on_init_disabled(qapp, model_service):
    provider = ModelProvider(
        recording_renderer([]),
        {"cqPath": PATH},
        config=ModelProviderConfig(inject_props_on_init=False),
        model_service=model_service,
    )
    assert model_service.get_calls == []
    assert provider.status is SyncStatus.UNBOUND
    assert [path for path, _ in model_service.listeners] == [PATH]


def test_instance_props_override_config(qapp, model_service):
    provider = ModelProvider(
        recording_renderer([]),
        {"cqPath": PATH, "cqForceReload": True, "injectPropsOnInit": True, "wrappedComponent": object()},
        config=ModelProviderConfig(force_reload=False, inject_props_on_init=False),
        model_service=model_service,
    )
    assert model_service.get_calls == [(PATH, True)]
    # Steering props never reach the renderer
    assert "cqForceReload" not in provider.child_props
    assert "injectPropsOnInit" not in provider.child_props
    assert "wrappedComponent" not in provider.child_props


def test_no_path_stays_unbound(qapp, model_service):
    renders = []
    provider = ModelProvider(recording_renderer(renders), {"title": "static"}, model_service=model_service)
    assert provider.path == ""
    assert provider.status is SyncStatus.UNBOUND
    assert model_service.get_calls == []
    assert model_service.listeners == []
    assert renders[0]["title"] == "static"


def test_no_path_needs_no_model_service(qapp):
    provider = ModelProvider(recording_renderer([]), {})
    assert provider.status is SyncStatus.UNBOUND


def test_path_without_service_fails_loud(qapp):
    with pytest.raises(ModelServiceUnavailableError):
        ModelProvider(recording_renderer([]), {"cqPath": PATH})


def test_uses_registered_model_service(qapp, model_service):
    register_model_service(model_service)
    ModelProvider(recording_renderer([]), {"cqPath": PATH})
    assert model_service.get_calls == [(PATH, False)]


def test_page_and_item_path(qapp, model_service):
    provider = ModelProvider(
        recording_renderer([]),
        {"pagePath": "/content/page", "itemPath": "jcr:content/root"},
        model_service=model_service,
    )
    assert provider.path == "/content/page/jcr:content/root"
    assert provider.child_props["cqPath"] == "/content/page/jcr:content/root"
    assert model_service.get_calls == [("/content/page/jcr:content/root", False)]


def test_registers_single_listener_and_unmount_removes_it(qapp, model_service):
    provider = ModelProvider(recording_renderer([]), {"cqPath": PATH}, model_service=model_service)
    assert len(model_service.listeners) == 1
    assert model_service.listeners[0][0] == PATH

    provider.unmount()
    assert model_service.listeners == []
    assert len(model_service.removed) == 1
    assert provider.status is SyncStatus.DISPOSED

    provider.unmount()
    assert len(model_service.removed) == 1


def test_identical_data_adopted_once(qapp, model_service):
    notifier = EditorNotifier()
    events = _events(notifier)
    renders = []
    provider = ModelProvider(recording_renderer(renders), {"cqPath": PATH},
                             model_service=model_service, notifier=notifier)

    model_service.resolve(PATH, {"text": "a"})
    model_service.cache[PATH] = {"text": "a"}
    model_service.notify(PATH)
    model_service.notify(PATH)

    assert len(model_service.listeners) == 1
    assert events == [(LOADED_EVENT, {})]
    assert len(renders) == 2
    assert provider.status is SyncStatus.SYNCED


def test_listener_update_adopts_changed_model(qapp, model_service):
    notifier = EditorNotifier()
    events = _events(notifier)
    model_service.cache[PATH] = {"text": "before"}
    provider = ModelProvider(TextComponent, {"cqPath": PATH}, model_service=model_service, notifier=notifier)
    child = provider.child_widget
    assert child.text() == "before"

    model_service.cache[PATH] = {"text": "after"}
    model_service.notify(PATH)

    # PropsSettable children are updated in place
    assert provider.child_widget is child
    assert child.text() == "after"
    assert [name for name, _ in events] == [LOADED_EVENT, LOADED_EVENT]


def test_listener_update_fetches_on_cache_miss(qapp, model_service):
    ModelProvider(
        recording_renderer([]),
        {"cqPath": PATH},
        config=ModelProviderConfig(inject_props_on_init=False),
        model_service=model_service,
    )
    model_service.notify(PATH)
    assert model_service.get_calls == [(PATH, False)]


def test_fetch_failure_keeps_last_known_props(qapp, model_service, caplog):
    renders = []
    provider = ModelProvider(recording_renderer(renders), {"cqPath": PATH, "text": "seed"},
                             model_service=model_service)

    with caplog.at_level(logging.WARNING, logger="pyqt_editable.components.model_provider"):
        model_service.fail(PATH, RuntimeError("service down"))

    assert "service down" in caplog.text
    assert provider.child_props["text"] == "seed"
    assert len(renders) == 1
    assert provider.status is SyncStatus.UNBOUND


def test_empty_fetch_result_changes_nothing(qapp, model_service):
    renders = []
    provider = ModelProvider(recording_renderer(renders), {"cqPath": PATH}, model_service=model_service)
    model_service.resolve(PATH, {})
    assert len(renders) == 1
    assert provider.status is SyncStatus.UNBOUND


def test_late_fetch_after_unmount_is_dropped(qapp, model_service):
    renders = []
    provider = ModelProvider(recording_renderer(renders), {"cqPath": PATH}, model_service=model_service)
    provider.unmount()

    model_service.resolve(PATH, {"text": "late"})
    assert "text" not in provider.child_props
    assert len(renders) == 1
    assert provider.status is SyncStatus.DISPOSED


def test_path_change_moves_listener_and_drops_stale_fetch(qapp, model_service):
    provider = ModelProvider(recording_renderer([]), {"cqPath": "/content/a"}, model_service=model_service)
    provider.set_props({"cqPath": "/content/b"})

    assert [path for path, _ in model_service.removed] == ["/content/a"]
    assert [path for path, _ in model_service.listeners] == ["/content/b"]
    assert model_service.get_calls == [("/content/a", False), ("/content/b", False)]

    model_service.resolve("/content/a", {"text": "old"})
    assert "text" not in provider.child_props

    model_service.resolve("/content/b", {"text": "new"})
    assert provider.child_props["text"] == "new"

    provider.unmount()
    assert [path for path, _ in model_service.removed] == ["/content/a", "/content/b"]
    assert model_service.listeners == []


def test_set_props_same_path_keeps_adopted_model(qapp, model_service):
    model_service.cache[PATH] = {"text": "model"}
    provider = ModelProvider(recording_renderer([]), {"cqPath": PATH, "text": "seed"}, model_service=model_service)
    provider.set_props({"cqPath": PATH, "text": "parent", "extra": 1})

    assert provider.child_props["text"] == "model"
    assert provider.child_props["extra"] == 1
    assert len(model_service.listeners) == 1


def test_fetch_completed_on_worker_thread_is_delivered_on_gui_thread(qapp, model_service):
    provider = ModelProvider(recording_renderer([]), {"cqPath": PATH}, model_service=model_service)

    worker = threading.Thread(target=model_service.resolve, args=(PATH, {"text": "threaded"}))
    worker.start()
    worker.join()
    assert provider.status is SyncStatus.PENDING

    qapp.processEvents()
    assert provider.status is SyncStatus.SYNCED
    assert provider.child_props["text"] == "threaded"


def test_notifier_from_config(qapp, model_service):
    notifier = EditorNotifier()
    events = _events(notifier)
    set_editable_config(EditableConfig(is_in_editor=True, editor_notifier=notifier))

    ModelProvider(recording_renderer([]), {"cqPath": PATH}, model_service=model_service)
    model_service.resolve(PATH, {"text": "x"})
    assert [name for name, _ in events] == [LOADED_EVENT]


def test_no_content_ready_without_inject_props_on_init(qapp, model_service):
    notifier = EditorNotifier()
    events = _events(notifier)
    model_service.cache[PATH] = {"text": "cached"}
    ModelProvider(
        recording_renderer([]),
        {"cqPath": PATH},
        config=ModelProviderConfig(inject_props_on_init=False),
        model_service=model_service,
        notifier=notifier,
    )
    assert events == []


def test_with_model_factory(qapp, model_service):
    mount = with_model(TextComponent, ModelProviderConfig(force_reload=True), model_service=model_service)
    provider = mount({"cqPath": PATH})
    assert isinstance(provider, ModelProvider)
    assert isinstance(provider.child_widget, TextComponent)
    assert model_service.get_calls == [(PATH, True)]
    assert mount.wrapped_renderer is TextComponent


def test_cache_update_invalidates_fetch_in_flight(qapp, model_service):
    provider = ModelProvider(recording_renderer([]), {"cqPath": PATH}, model_service=model_service)
    assert provider.status is SyncStatus.PENDING

    model_service.cache[PATH] = {"text": "new"}
    model_service.notify(PATH)
    assert provider.child_props["text"] == "new"
    assert provider.status is SyncStatus.SYNCED

    model_service.resolve(PATH, {"text": "old"})
    assert provider.child_props["text"] == "new"
    assert provider.status is SyncStatus.SYNCED
