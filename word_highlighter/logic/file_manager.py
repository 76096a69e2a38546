import os
import logging
from tkinter import filedialog, messagebox

from word_highlighter.config import APP_NAME, CONFIG_PATH_KEY

logger = logging.getLogger(__name__)


class FileManager:
    """Plain-text document open/save, plus choosing the word config file.

    Documents live in workspace tabs; this module only moves text between
    files and DocumentView widgets.
    """

    def __init__(self, workspace, root, settings):
        self.workspace = workspace
        self.root = root
        self.settings = settings

    # ----------------------------
    # Public API
    # ----------------------------

    def new_file(self):
        return self.workspace.add_view()

    def open_file(self):
        path = filedialog.askopenfilename(filetypes=[("Text", "*.txt"), ("All", "*.*")])
        if not path:
            return None
        return self.open_path(path)

    def open_path(self, path):
        for view in self.workspace.views:
            if view.path and os.path.abspath(view.path) == os.path.abspath(path):
                self.workspace.notebook.select(view.frame)
                return view
        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not open %s: %s", path, e)
            messagebox.showerror("Error", f"Could not open file: {e}")
            return None
        view = self.workspace.add_view(path, content)
        self._update_title(view)
        return view

    def save_file(self):
        view = self.workspace.active_view()
        if view is None:
            return False
        if not view.path:
            return self.save_file_as()
        return self._write_file(view, view.path)

    def save_file_as(self):
        view = self.workspace.active_view()
        if view is None:
            return False
        path = filedialog.asksaveasfilename(defaultextension=".txt",
                                            filetypes=[("Text", "*.txt"), ("All", "*.*")])
        if not path:
            return False
        if not self._write_file(view, path):
            return False
        self.workspace.rename_view(view, path)
        self._update_title(view)
        return True

    def close_file(self):
        view = self.workspace.active_view()
        if view is None:
            return
        if view.dirty and not messagebox.askyesno("Close", f"Discard unsaved changes to {view.title}?"):
            return
        self.workspace.close_view(view)

    def choose_config(self):
        """Ask for the word-color JSON file; returns its path or None."""
        current = self.settings.get(CONFIG_PATH_KEY) or ""
        path = filedialog.askopenfilename(
            title="Choose Word Colors",
            initialdir=os.path.dirname(current) or None,
            filetypes=[("JSON", "*.json"), ("All", "*.*")],
        )
        return path or None

    # ----------------------------
    # Helpers
    # ----------------------------

    def _write_file(self, view, path):
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(view.get_content())
        except OSError as e:
            logger.error("Could not save %s: %s", path, e)
            messagebox.showerror("Save Error", str(e))
            return False
        view.dirty = False
        self._update_title(view)
        return True

    def _update_title(self, view):
        self.root.title(f"{APP_NAME} - {view.title}")
