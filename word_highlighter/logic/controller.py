import logging

from word_highlighter.config import CONFIG_PATH_KEY
from word_highlighter.logic.errors import ConfigPathMissing, WordHighlighterError
from word_highlighter.logic.events import (
    ACTIVE_EDITOR_CHANGED,
    DOCUMENT_CHANGED,
    VIEW_CLOSED,
    CONFIGURATION_CHANGED,
    RELOAD_REQUESTED,
)

logger = logging.getLogger(__name__)


class WordHighlightController:
    """Connects settings, the word store and the highlighter to editor events.

    `active_view` is a callable returning the focused document view (or
    None). `notifier` needs info(msg) and error(msg).
    """

    def __init__(self, settings, store, highlighter, events, notifier, active_view):
        self.settings = settings
        self.store = store
        self.highlighter = highlighter
        self.events = events
        self.notifier = notifier
        self.active_view = active_view
        self._subscriptions = []
        self.active = False

    def activate(self):
        if self.active:
            return
        logger.info("Word highlighter activated")
        self.load_configuration()

        self._subscriptions = [
            self.events.subscribe(RELOAD_REQUESTED, self.on_reload),
            self.events.subscribe(ACTIVE_EDITOR_CHANGED, self.on_active_editor_changed),
            self.events.subscribe(DOCUMENT_CHANGED, self.on_document_changed),
            self.events.subscribe(VIEW_CLOSED, self.on_view_closed),
            self.events.subscribe(CONFIGURATION_CHANGED, self.on_configuration_changed),
        ]
        self.active = True
        self.highlighter.update(self.active_view())

    def deactivate(self):
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions = []
        self.highlighter.cancel()
        self.store.close()
        self.active = False
        logger.info("Word highlighter deactivated")

    # -----------------------------
    # Load / reload boundary
    # -----------------------------

    def load_configuration(self):
        """Reload the word config named in settings. Never raises."""
        path = self.settings.get(CONFIG_PATH_KEY)
        try:
            mapping = self.store.reload(path)
        except ConfigPathMissing as e:
            self.store.clear()
            logger.info("%s", e)
            self.notifier.info(str(e))
            return False
        except WordHighlighterError as e:
            logger.error("Error loading configuration: %s", e)
            self.notifier.error(f"Error loading configuration - {e}")
            return False

        self.notifier.info(f"Loaded {len(mapping)} word(s) from configuration")
        return True

    # -----------------------------
    # Event handlers
    # -----------------------------

    def on_reload(self):
        self.load_configuration()
        self.highlighter.update(self.active_view())

    def on_active_editor_changed(self, view):
        # A pending keystroke update belongs to the previous document
        self.highlighter.cancel()
        if view is not None:
            self.highlighter.update(view)

    def on_document_changed(self, view):
        active = self.active_view()
        if active is not None and view is active:
            self.highlighter.trigger(view)

    def on_view_closed(self, view):
        if self.highlighter.pending_for(view):
            self.highlighter.cancel()
        self.store.forget_view(view)

    def on_configuration_changed(self, key):
        if key == CONFIG_PATH_KEY:
            self.load_configuration()
            self.highlighter.update(self.active_view())
