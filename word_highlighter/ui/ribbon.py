import tkinter as tk
from tkinter import ttk


class Ribbon:
    def __init__(self, parent, callbacks, colors):
        self.callbacks = callbacks
        self.colors = colors
        self.frame = tk.Frame(parent, bg=colors["ribbon"], height=90)
        self.frame.pack_propagate(False)

        self.tabs = ttk.Notebook(self.frame)
        self.tabs.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.groups = []

        self._build_tabs()

    def pack(self, **kwargs):
        self.frame.pack(**kwargs)

    def _add_tab(self, txt):
        f = tk.Frame(self.tabs, bg=self.colors["ribbon"])
        self.tabs.add(f, text=f"  {txt}  ")
        self.groups.append(f)
        return f

    def _grp(self, p, txt):
        f = tk.LabelFrame(p, text=txt, bg=self.colors["ribbon"], fg="#666", padx=5, pady=2, font=("Segoe UI", 8))
        f.pack(side=tk.LEFT, fill=tk.Y, padx=5, pady=5)
        self.groups.append(f)
        return f

    def _btn(self, p, txt, key):
        tk.Button(p, text=txt, command=self.callbacks[key], relief=tk.FLAT, bg="#fcfcfc",
                  activebackground="#e1e1e1", bd=1).pack(side=tk.LEFT, padx=2, fill=tk.Y, pady=2)

    def _build_tabs(self):
        # FILE
        t = self._add_tab("File")
        g = self._grp(t, "Document")
        self._btn(g, "New", 'new')
        self._btn(g, "Open", 'open')
        self._btn(g, "Save", 'save')
        self._btn(g, "Save As", 'save_as')
        self._btn(g, "Close", 'close')

        # WORDS
        t = self._add_tab("Words")
        g = self._grp(t, "Configuration")
        self._btn(g, "Choose Config", 'choose_config')
        self._btn(g, "Reload", 'reload')

        # VIEW
        t = self._add_tab("View")
        g = self._grp(t, "Appearance")
        self._btn(g, "Theme", 'theme')
        self._btn(g, "Sidebar", 'sidebar')

    def update_theme(self, c):
        self.colors = c
        self.frame.config(bg=c["ribbon"])
        for f in self.groups:
            f.config(bg=c["ribbon"])
