import itertools
import logging
import re
import tkinter as tk

logger = logging.getLogger(__name__)

WORD_TAG_PREFIX = "wh_word_"  # internal

_tag_ids = itertools.count(1)
_HEX_ALPHA = re.compile(r"^#([0-9a-fA-F]{6})[0-9a-fA-F]{2}$")


def tk_color(color):
    """Tk has no alpha channel: '#RRGGBBAA' is rendered as '#RRGGBB'."""
    m = _HEX_ALPHA.match(color)
    if m:
        return "#" + m.group(1)
    return color


class HighlightStyle:
    """Render-style handle for one configured word.

    Backed by a Text tag (background) plus markers on the view's overview
    ruler. The tag is configured lazily on every text widget it is applied
    to and deleted from all of them on dispose().
    """

    def __init__(self, word, color):
        self.word = word
        self.color = color
        self.tag = f"{WORD_TAG_PREFIX}{next(_tag_ids)}"
        self.disposed = False
        self._views = []  # views this tag was configured on
        self._rejected = []  # text widgets where Tk refused the color

    def apply(self, view, ranges):
        """Show exactly `ranges` ((start, end) Tk index pairs) in `view`."""
        if self.disposed:
            raise RuntimeError(f"style for {self.word!r} was already released")

        text = view.text
        if any(t is text for t in self._rejected):
            return
        if view not in self._views:
            try:
                text.tag_configure(self.tag, background=tk_color(self.color))
            except tk.TclError as e:
                logger.warning("Color %r for %r rejected: %s", self.color, self.word, e)
                self._rejected.append(text)
                return
            # Keep word highlights under the selection so selected text stays visible
            try:
                text.tag_lower(self.tag, "sel")
            except tk.TclError:
                pass
            self._views.append(view)

        text.tag_remove(self.tag, "1.0", tk.END)
        for start, end in ranges:
            text.tag_add(self.tag, start, end)

        ruler = getattr(view, "ruler", None)
        if ruler is not None:
            ruler.set_marks(self.tag, tk_color(self.color), [start for start, _ in ranges])

    def forget(self, view):
        """Drop a closed view; its widget and tags are already gone."""
        self._views = [v for v in self._views if v is not view]
        self._rejected = [t for t in self._rejected if t is not view.text]

    def dispose(self):
        if self.disposed:
            return
        self.disposed = True
        views, self._views = self._views, []
        for view in views:
            try:
                view.text.tag_delete(self.tag)
            except tk.TclError:
                # widget already destroyed
                pass
            ruler = getattr(view, "ruler", None)
            if ruler is not None:
                ruler.clear_marks(self.tag)
        self._rejected = []

    def __repr__(self):
        state = "disposed" if self.disposed else "active"
        return f"<HighlightStyle {self.word!r} {self.color} {self.tag} {state}>"
