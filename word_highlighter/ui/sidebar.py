import tkinter as tk
from tkinter import ttk

from word_highlighter.logic.highlighter import PositionMap
from word_highlighter.logic.styles import tk_color


class Sidebar:
    """Configured words with their occurrence counts in the active document."""

    def __init__(self, parent, app, colors):
        self.app = app
        self.frame = tk.Frame(parent, bg=colors["sidebar"], width=220)
        self.requests = []

        self.lbl = tk.Label(
            self.frame,
            text=" WORDS ",
            bg=colors["sidebar"],
            font=("Segoe UI", 9, "bold"),
            fg="#555"
        )
        self.lbl.pack(fill=tk.X, pady=(10, 0))

        style = ttk.Style()
        style.configure(
            "Sidebar.Treeview",
            background=colors["paper"],
            fieldbackground=colors["paper"],
            foreground=colors["text"],
            borderwidth=0
        )

        self.tree = ttk.Treeview(
            self.frame,
            columns=("count",),
            show="tree",
            selectmode="browse",
            style="Sidebar.Treeview"
        )
        self.tree.column("#0", width=150)
        self.tree.column("count", width=50, anchor="e")
        self.tree.pack(fill=tk.BOTH, expand=True, padx=5, pady=5)
        self.tree.bind("<<TreeviewSelect>>", self.nav_jump)

    def show_words(self, view, requests):
        self.requests = list(requests)
        self.tree.delete(*self.tree.get_children())
        for i, request in enumerate(self.requests):
            tag = f"word_{i}"
            try:
                self.tree.tag_configure(tag, background=tk_color(request.color))
            except tk.TclError:
                tag = ""
            self.tree.insert("", tk.END, iid=str(i), text=request.word,
                             values=(len(request.ranges),), tags=(tag,) if tag else ())

    def nav_jump(self, _e=None):
        sel = self.tree.selection()
        view = self.app.workspace.active_view()
        if not sel or view is None:
            return

        request = self.requests[int(sel[0])]
        if not request.ranges:
            return

        # Cycle through occurrences after the cursor, wrapping to the first
        try:
            positions = PositionMap(view.text.get("1.0", "end-1c"))
            offset = positions.offset(view.text.index(tk.INSERT))
            target = next((r for r in request.ranges if r.start > offset), request.ranges[0])
            view.text.see(positions.index(target.start))
            view.text.mark_set(tk.INSERT, positions.index(target.start))
            view.text.focus()
        except tk.TclError:
            pass

    def update_theme(self, c):
        self.frame.config(bg=c["sidebar"])
        self.lbl.config(bg=c["sidebar"], fg=c["text"])

        style = ttk.Style()
        style.configure(
            "Sidebar.Treeview",
            background=c["paper"],
            fieldbackground=c["paper"],
            foreground=c["text"]
        )
