"""
Tests for the controller: activation, event handling and the load/reload
error boundary.
"""

from unittest.mock import Mock

import pytest

from word_highlighter.config import ConfigManager, CONFIG_PATH_KEY
from word_highlighter.logic.controller import WordHighlightController
from word_highlighter.logic.events import (
    EventSource,
    ACTIVE_EDITOR_CHANGED,
    DOCUMENT_CHANGED,
    VIEW_CLOSED,
    CONFIGURATION_CHANGED,
    RELOAD_REQUESTED,
)
from word_highlighter.logic.word_config import ConfigStore


@pytest.fixture
def settings(tmp_path):
    return ConfigManager(path=str(tmp_path / "settings.json"))


@pytest.fixture
def env(settings, style_factory):
    """Controller wired to a real store and event hub, mocked host parts."""
    events = EventSource()
    settings.on_change(lambda key: events.emit(CONFIGURATION_CHANGED, key))
    store = ConfigStore(style_factory)
    highlighter = Mock()
    notifier = Mock()
    active = Mock(name="active_view")
    controller = WordHighlightController(settings, store, highlighter, events, notifier, lambda: active)
    return controller, store, highlighter, events, notifier, active


def test_activate_loads_configuration_and_highlights(env, settings, write_config):
    controller, store, highlighter, events, notifier, active = env
    settings.set(CONFIG_PATH_KEY, write_config({"foo": "#ff0000", "bar": "#00ff00"}))

    controller.activate()

    assert store.mapping == {"foo": "#ff0000", "bar": "#00ff00"}
    notifier.info.assert_called_with("Loaded 2 word(s) from configuration")
    highlighter.update.assert_called_with(active)
    for name in (RELOAD_REQUESTED, ACTIVE_EDITOR_CHANGED, DOCUMENT_CHANGED, CONFIGURATION_CHANGED):
        assert events.handler_count(name) == 1


def test_activate_twice_subscribes_once(env):
    controller, _, _, events, _, _ = env
    controller.activate()
    controller.activate()
    assert events.handler_count(RELOAD_REQUESTED) == 1


def test_missing_path_is_informational(env):
    controller, store, highlighter, _, notifier, _ = env
    controller.activate()
    notifier.info.assert_called_once_with("Configuration path not set")
    notifier.error.assert_not_called()
    assert store.mapping == {}


def test_clearing_path_turns_highlighting_off(env, settings, write_config):
    controller, store, _, _, notifier, _ = env
    settings.set(CONFIG_PATH_KEY, write_config({"foo": "red"}))
    controller.activate()
    handle = store.style_for("foo")

    settings.set(CONFIG_PATH_KEY, "")

    assert store.mapping == {}
    assert handle.disposed == 1
    notifier.info.assert_called_with("Configuration path not set")


def test_bad_config_reports_error_and_keeps_previous(env, settings, write_config):
    controller, store, _, _, notifier, _ = env
    path = write_config({"foo": "red"})
    settings.set(CONFIG_PATH_KEY, path)
    controller.activate()

    with open(path, "w", encoding="utf-8") as f:
        f.write("{not valid")
    assert controller.load_configuration() is False

    assert store.mapping == {"foo": "red"}
    assert notifier.error.call_count == 1
    assert notifier.error.call_args[0][0].startswith("Error loading configuration - ")


def test_missing_file_reports_error(env, settings, tmp_path):
    controller, store, _, _, notifier, _ = env
    settings.set(CONFIG_PATH_KEY, str(tmp_path / "gone.json"))
    controller.activate()
    notifier.error.assert_called_once()
    assert "gone.json" in notifier.error.call_args[0][0]
    assert store.mapping == {}


def test_reload_event_reloads_and_updates_active(env, settings, write_config):
    controller, store, highlighter, events, _, active = env
    path = write_config({"foo": "red"})
    settings.set(CONFIG_PATH_KEY, path)
    controller.activate()
    first = store.style_for("foo")
    highlighter.reset_mock()

    write_config({"foo": "red", "bar": "blue"})
    events.emit(RELOAD_REQUESTED)

    assert store.mapping == {"foo": "red", "bar": "blue"}
    assert first.disposed == 1
    highlighter.update.assert_called_once_with(active)


def test_configuration_change_of_other_key_is_ignored(env, settings):
    controller, _, highlighter, _, notifier, _ = env
    controller.activate()
    highlighter.reset_mock()
    notifier.reset_mock()

    settings.set("theme", "dark")

    highlighter.update.assert_not_called()
    notifier.info.assert_not_called()


def test_configuration_change_of_path_reloads(env, settings, write_config):
    controller, store, highlighter, _, _, active = env
    controller.activate()
    highlighter.reset_mock()

    settings.set(CONFIG_PATH_KEY, write_config({"TODO": "#ffff00"}))

    assert store.mapping == {"TODO": "#ffff00"}
    highlighter.update.assert_called_once_with(active)


def test_active_editor_change_updates_that_view(env):
    controller, _, highlighter, events, _, _ = env
    controller.activate()
    highlighter.reset_mock()
    other = Mock()

    events.emit(ACTIVE_EDITOR_CHANGED, other)
    events.emit(ACTIVE_EDITOR_CHANGED, None)

    highlighter.update.assert_called_once_with(other)


def test_document_change_only_for_active_view(env):
    controller, _, highlighter, events, _, active = env
    controller.activate()

    events.emit(DOCUMENT_CHANGED, Mock())
    highlighter.trigger.assert_not_called()

    events.emit(DOCUMENT_CHANGED, active)
    highlighter.trigger.assert_called_once_with(active)


def test_deactivate_releases_styles_and_unsubscribes(env, settings, write_config):
    controller, store, highlighter, events, _, _ = env
    settings.set(CONFIG_PATH_KEY, write_config({"foo": "red", "bar": "blue"}))
    controller.activate()
    handles = [h for _, h in store.styles]

    controller.deactivate()

    assert [h.disposed for h in handles] == [1, 1]
    assert store.styles == []
    highlighter.cancel.assert_called_once()
    for name in (RELOAD_REQUESTED, ACTIVE_EDITOR_CHANGED, DOCUMENT_CHANGED, CONFIGURATION_CHANGED):
        assert events.handler_count(name) == 0
    assert not controller.active


def test_active_editor_change_cancels_pending_update(env):
    controller, _, highlighter, events, _, _ = env
    controller.activate()

    events.emit(ACTIVE_EDITOR_CHANGED, Mock())

    highlighter.cancel.assert_called_once()


def test_closed_view_is_forgotten_by_styles(env, settings, write_config):
    controller, store, highlighter, events, _, _ = env
    settings.set(CONFIG_PATH_KEY, write_config({"foo": "red", "bar": "blue"}))
    controller.activate()
    closed = Mock()
    highlighter.pending_for.return_value = True

    events.emit(VIEW_CLOSED, closed)

    highlighter.pending_for.assert_called_once_with(closed)
    highlighter.cancel.assert_called_once()
    assert [h.forgotten for _, h in store.styles] == [[closed], [closed]]
