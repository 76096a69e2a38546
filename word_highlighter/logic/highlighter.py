import bisect
import logging
import tkinter as tk

from word_highlighter.logic.matcher import compute_highlights

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 150

# Tk before 9.0 indexes text in UTF-16 units: a character above U+FFFF
# (most emoji) takes two columns.
SURROGATE_PAIRS = tk.TkVersion < 9.0


def _tk_width(ch, surrogate_pairs):
    return 2 if surrogate_pairs and ord(ch) > 0xFFFF else 1


class PositionMap:
    """Converts between Python offsets and Tk "line.col" indices for one text snapshot."""

    def __init__(self, text, surrogate_pairs=None):
        self.text = text
        self.surrogate_pairs = SURROGATE_PAIRS if surrogate_pairs is None else surrogate_pairs
        self.line_starts = [0]
        pos = text.find("\n")
        while pos != -1:
            self.line_starts.append(pos + 1)
            pos = text.find("\n", pos + 1)

    def index(self, offset):
        line = bisect.bisect_right(self.line_starts, offset) - 1
        start = self.line_starts[line]
        col = offset - start
        if self.surrogate_pairs:
            col += sum(1 for ch in self.text[start:offset] if ord(ch) > 0xFFFF)
        return f"{line + 1}.{col}"

    def offset(self, index):
        """Python offset of a Tk "line.col" index, clamped to the text."""
        line, col = (int(part) for part in index.split("."))
        if line > len(self.line_starts):
            return len(self.text)
        start = self.line_starts[max(line, 1) - 1]
        end = self.line_starts[line] - 1 if line < len(self.line_starts) else len(self.text)
        pos, units = start, 0
        while pos < end and units < col:
            units += _tk_width(self.text[pos], self.surrogate_pairs)
            pos += 1
        return pos


class WordHighlighter:
    """Recomputes word highlights for a document view.

    Holds no highlight state of its own: every update rescans the whole
    text against the store's current mapping.
    """

    def __init__(self, store, on_update=None, delay=DEFAULT_DELAY_MS):
        self.store = store
        self.on_update = on_update
        self.delay = delay
        self.timer = None
        self._timer_owner = None
        self._pending = None

    def trigger(self, view):
        """Schedule an update, collapsing bursts of keystrokes into one."""
        self.cancel()
        token = self._pending = object()
        self._timer_owner = view.text
        self.timer = view.text.after(self.delay, lambda: self._run_scheduled(view, token))

    def _run_scheduled(self, view, token):
        # A cancelled update can still be delivered if it was already queued
        if token is not self._pending:
            return
        self.timer = None
        self._timer_owner = None
        self._pending = None
        try:
            self.update(view)
        except tk.TclError:
            # document closed while the update was pending
            logger.debug("Skipped highlight update for a closed document", exc_info=True)

    def pending_for(self, view):
        return self._pending is not None and self._timer_owner is view.text

    def cancel(self):
        if self.timer is not None and self._timer_owner is not None:
            try:
                self._timer_owner.after_cancel(self.timer)
            except tk.TclError:
                logger.debug("Pending highlight update could not be cancelled", exc_info=True)
        self.timer = None
        self._timer_owner = None
        self._pending = None

    def update(self, view):
        if view is None:
            return []
        if not self.store.styles:
            if self.on_update:
                self.on_update(view, [])
            return []

        text = view.text.get("1.0", "end-1c")
        positions = PositionMap(text)
        requests = compute_highlights(text, self.store.mapping)
        for request in requests:
            handle = self.store.style_for(request.word)
            if handle is None:
                continue
            handle.apply(view, [(positions.index(r.start), positions.index(r.end)) for r in request.ranges])

        logger.debug("Highlighted %d word(s), %d range(s)", len(requests), sum(len(r.ranges) for r in requests))
        if self.on_update:
            self.on_update(view, requests)
        return requests
