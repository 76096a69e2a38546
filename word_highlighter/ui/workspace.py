import os
import tkinter as tk
from tkinter import ttk, font

from word_highlighter.logic.events import ACTIVE_EDITOR_CHANGED, DOCUMENT_CHANGED, VIEW_CLOSED


class LineNumbers(tk.Canvas):
    def __init__(self, *args, **kwargs):
        tk.Canvas.__init__(self, *args, **kwargs)
        self.textwidget = None
        self.font = font.Font(family="Consolas", size=10)
    def attach(self, tx): self.textwidget = tx
    def redraw(self, *args):
        self.delete("all")
        i = self.textwidget.index("@0,0")
        while True:
            dline = self.textwidget.dlineinfo(i)
            if dline is None: break
            y = dline[1]
            self.create_text(35, y, anchor="ne", text=str(i).split(".")[0], fill="#888", font=self.font)
            i = self.textwidget.index("%s+1line" % i)


class MarkerRuler(tk.Canvas):
    """Overview strip beside the text: one tick per highlighted line."""

    def __init__(self, *args, **kwargs):
        tk.Canvas.__init__(self, *args, **kwargs)
        self.textwidget = None
        self.marks = {}  # tag -> (color, [start index, ...])
        self.bind("<Configure>", self.redraw)

    def attach(self, tx): self.textwidget = tx

    def set_marks(self, tag, color, starts):
        self.marks[tag] = (color, list(starts))
        self.redraw()

    def clear_marks(self, tag):
        if self.marks.pop(tag, None) is not None:
            self.redraw()

    def redraw(self, *args):
        try:
            self.delete("all")
            if self.textwidget is None:
                return
            total = int(self.textwidget.index("end-1c").split(".")[0])
            height = self.winfo_height()
            width = self.winfo_width()
        except tk.TclError:
            return
        for color, starts in self.marks.values():
            for start in starts:
                line = int(self.textwidget.index(start).split(".")[0])
                y = int((line - 1) / max(total, 1) * height)
                self.create_rectangle(2, y, width - 2, y + 3, fill=color, outline=color)


class DocumentView:
    """One editor tab: text widget with line numbers and marker ruler."""

    def __init__(self, parent, colors, path=None):
        self.path = path
        self.dirty = False
        self.frame = tk.Frame(parent, bg=colors["paper"])

        self.vs = ttk.Scrollbar(self.frame, orient=tk.VERTICAL)
        self.vs.pack(side=tk.RIGHT, fill=tk.Y)
        self.ruler = MarkerRuler(self.frame, width=12, bg=colors["ruler"], bd=0, highlightthickness=0)
        self.ruler.pack(side=tk.RIGHT, fill=tk.Y)
        self.linenumbers = LineNumbers(self.frame, width=40, bg="#f0f0f0", bd=0, highlightthickness=0)
        self.linenumbers.pack(side=tk.LEFT, fill=tk.Y)

        self.text = tk.Text(self.frame, font=("Consolas", 11), wrap=tk.NONE, undo=True, padx=10, pady=10, bd=0,
                            bg=colors["paper"], fg=colors["text"], insertbackground=colors["text"],
                            yscrollcommand=self._on_scroll)
        self.text.pack(fill=tk.BOTH, expand=True)
        self.vs.config(command=self.text.yview)
        self.linenumbers.attach(self.text)
        self.ruler.attach(self.text)

    @property
    def title(self):
        return os.path.basename(self.path) if self.path else "Untitled"

    def _on_scroll(self, first, last):
        self.vs.set(first, last)
        self.linenumbers.redraw()

    def set_content(self, content):
        self.text.delete("1.0", tk.END)
        self.text.insert("1.0", content)
        self.text.edit_reset()
        self.text.edit_modified(False)
        self.dirty = False

    def get_content(self):
        return self.text.get("1.0", "end-1c")

    def update_theme(self, c):
        self.frame.config(bg=c["paper"])
        self.ruler.config(bg=c["ruler"])
        self.text.config(bg=c["paper"], fg=c["text"], insertbackground=c["text"])


class Workspace:
    """Tabbed documents; reports tab switches and edits to the event source."""

    def __init__(self, parent, colors, events):
        self.colors = colors
        self.events = events
        self.frame = tk.Frame(parent, bg=colors["bg"])
        self.notebook = ttk.Notebook(self.frame)
        self.notebook.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)
        self.views = []
        self.notebook.bind("<<NotebookTabChanged>>", self._on_tab_changed)

    def pack(self, **kwargs):
        self.frame.pack(**kwargs)

    def pack_forget(self):
        self.frame.pack_forget()

    def add_view(self, path=None, content=""):
        view = DocumentView(self.notebook, self.colors, path)
        view.set_content(content)
        self.views.append(view)
        self.notebook.add(view.frame, text=f"  {view.title}  ")

        view.text.bind("<<Modified>>", lambda e, v=view: self._on_modified(v), add="+")
        view.text.bind("<KeyRelease>", lambda e, v=view: v.linenumbers.redraw(), add="+")

        self.notebook.select(view.frame)
        return view

    def close_view(self, view):
        if view not in self.views:
            return
        self.views.remove(view)
        self.events.emit(VIEW_CLOSED, view)
        self.notebook.forget(view.frame)
        view.frame.destroy()
        if not self.views:
            self.events.emit(ACTIVE_EDITOR_CHANGED, None)

    def active_view(self):
        try:
            current = self.notebook.select()
        except tk.TclError:
            return None
        for view in self.views:
            if str(view.frame) == current:
                return view
        return None

    def rename_view(self, view, path):
        view.path = path
        self.notebook.tab(view.frame, text=f"  {view.title}  ")

    def _on_tab_changed(self, _evt):
        view = self.active_view()
        if view is not None:
            view.linenumbers.redraw()
        self.events.emit(ACTIVE_EDITOR_CHANGED, view)

    def _on_modified(self, view):
        try:
            if not view.text.edit_modified():
                return
            view.text.edit_modified(False)
        except tk.TclError:
            return
        view.dirty = True
        view.linenumbers.redraw()
        self.events.emit(DOCUMENT_CHANGED, view)

    def update_theme(self, c):
        self.colors = c
        self.frame.config(bg=c["bg"])
        for view in self.views:
            view.update_theme(c)
