ACTIVE_EDITOR_CHANGED = "active_editor_changed"  # (view or None)
DOCUMENT_CHANGED = "document_changed"  # (view)
VIEW_CLOSED = "view_closed"  # (view)
CONFIGURATION_CHANGED = "configuration_changed"  # (setting key)
RELOAD_REQUESTED = "reload_requested"  # ()


class EventSource:
    """Synchronous publish/subscribe hub for editor events."""

    def __init__(self):
        self._handlers = {}  # name -> list[callable]

    def subscribe(self, name, handler):
        """Register `handler` for `name`; returns a callable that unregisters it."""
        self._handlers.setdefault(name, []).append(handler)

        def unsubscribe():
            handlers = self._handlers.get(name, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, name, *args):
        # Copy so handlers may unsubscribe while being called
        for handler in list(self._handlers.get(name, [])):
            handler(*args)

    def handler_count(self, name):
        return len(self._handlers.get(name, []))
