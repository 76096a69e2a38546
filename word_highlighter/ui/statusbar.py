import tkinter as tk
from tkinter import messagebox

from word_highlighter.config import APP_NAME


class StatusBar:
    """Bottom bar; also the notifier for load results."""

    def __init__(self, parent, app, colors):
        self.app = app

        self.frame = tk.Frame(parent, bg=colors["primary"], height=28)
        self.frame.pack(side=tk.BOTTOM, fill=tk.X)

        # Left Info
        self.lbl_status = tk.Label(self.frame, text="Ready",
                                   bg=colors["primary"], fg="white",
                                   font=("Segoe UI", 9))
        self.lbl_status.pack(side=tk.LEFT, padx=10)

        # Right: words matched in the active document
        self.lbl_matches = tk.Label(self.frame, text="", bg=colors["primary"], fg="white",
                                    font=("Segoe UI", 9))
        self.lbl_matches.pack(side=tk.RIGHT, padx=10)

    def info(self, message):
        self.lbl_status.config(text=f"{APP_NAME}: {message}")

    def error(self, message):
        self.lbl_status.config(text=f"{APP_NAME}: {message}")
        messagebox.showerror(APP_NAME, message)

    def update_matches(self, requests):
        total = sum(len(r.ranges) for r in requests)
        words = sum(1 for r in requests if r.ranges)
        self.lbl_matches.config(text=f"{total} match(es), {words} word(s)" if requests else "")

    def update_theme(self, c):
        self.frame.config(bg=c["primary"])
        self.lbl_status.config(bg=c["primary"])
        self.lbl_matches.config(bg=c["primary"])
