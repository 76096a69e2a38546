import logging
import tkinter as tk

from word_highlighter.config import ConfigManager, THEME, APP_NAME, VERSION, CONFIG_PATH_KEY
from word_highlighter.ui.ribbon import Ribbon
from word_highlighter.ui.workspace import Workspace
from word_highlighter.ui.sidebar import Sidebar
from word_highlighter.ui.statusbar import StatusBar
from word_highlighter.logic.events import EventSource, CONFIGURATION_CHANGED, RELOAD_REQUESTED
from word_highlighter.logic.file_manager import FileManager
from word_highlighter.logic.highlighter import WordHighlighter
from word_highlighter.logic.styles import HighlightStyle
from word_highlighter.logic.word_config import ConfigStore
from word_highlighter.logic.controller import WordHighlightController

logger = logging.getLogger(__name__)


class App:
    def __init__(self, root, config_path=None, files=(), settings=None):
        self.root = root
        self.config_mgr = settings or ConfigManager()
        self.settings = self.config_mgr.data

        self.root.title(f"{APP_NAME} {VERSION}")
        self.root.geometry(self.settings.get("geometry", "1200x800"))

        self.current_theme = self.settings.get("theme", "light")
        if self.current_theme not in THEME:
            self.current_theme = "light"
        self.colors = THEME[self.current_theme]
        self.sidebar_visible = True

        self.events = EventSource()
        # Host settings changes become configuration events
        self.config_mgr.on_change(lambda key: self.events.emit(CONFIGURATION_CHANGED, key))

        # Layout
        self.main_container = tk.Frame(self.root, bg=self.colors["bg"])
        self.main_container.pack(fill=tk.BOTH, expand=True)

        self.sidebar = Sidebar(self.main_container, self, self.colors)
        self.workspace = Workspace(self.main_container, self.colors, self.events)
        self.statusbar = StatusBar(self.root, self, self.colors)

        # Logic Modules
        self.file_mgr = FileManager(self.workspace, self.root, self.config_mgr)
        self.store = ConfigStore(style_factory=HighlightStyle)
        self.highlighter = WordHighlighter(self.store, on_update=self._on_highlighted)
        self.controller = WordHighlightController(
            self.config_mgr, self.store, self.highlighter, self.events,
            notifier=self.statusbar, active_view=self.workspace.active_view,
        )

        # Commands
        callbacks = {
            'new': self.file_mgr.new_file,
            'open': self.file_mgr.open_file,
            'save': self.file_mgr.save_file,
            'save_as': self.file_mgr.save_file_as,
            'close': self.file_mgr.close_file,
            'choose_config': self.choose_config,
            'reload': self.reload_words,
            'theme': self.toggle_theme,
            'sidebar': self.toggle_sidebar,
        }

        self.ribbon = Ribbon(self.root, callbacks, self.colors)
        self.ribbon.pack(side=tk.TOP, fill=tk.X, before=self.main_container)

        self._bind_shortcuts()
        self._apply_layout_state()

        if config_path:
            # Before activation, so the first load already uses it
            self.settings[CONFIG_PATH_KEY] = config_path
            self.config_mgr.save()

        for path in files:
            self.file_mgr.open_path(path)
        if not self.workspace.views:
            self.file_mgr.new_file()

        self.controller.activate()
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

    # -----------------------------
    # Word configuration
    # -----------------------------

    def reload_words(self):
        self.events.emit(RELOAD_REQUESTED)

    def choose_config(self):
        path = self.file_mgr.choose_config()
        if not path:
            return
        # Picking the same file again still reloads it
        if not self.config_mgr.set(CONFIG_PATH_KEY, path):
            self.reload_words()

    def _on_highlighted(self, view, requests):
        self.sidebar.show_words(view, requests)
        self.statusbar.update_matches(requests)

    # -----------------------------
    # View
    # -----------------------------

    def toggle_theme(self):
        self.current_theme = "dark" if self.current_theme == "light" else "light"
        self.colors = THEME[self.current_theme]
        self.config_mgr.set("theme", self.current_theme)
        self.apply_theme()

    def toggle_sidebar(self):
        self.sidebar_visible = not self.sidebar_visible
        self._apply_layout_state()

    def _apply_layout_state(self):
        self.sidebar.frame.pack_forget()
        self.workspace.pack_forget()
        if self.sidebar_visible:
            self.sidebar.frame.pack(side=tk.LEFT, fill=tk.Y)
        self.workspace.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)

    def apply_theme(self):
        self.main_container.config(bg=self.colors["bg"])
        self.ribbon.update_theme(self.colors)
        self.workspace.update_theme(self.colors)
        self.sidebar.update_theme(self.colors)
        self.statusbar.update_theme(self.colors)

    def _bind_shortcuts(self):
        self.root.bind("<Control-n>", lambda e: self.file_mgr.new_file())
        self.root.bind("<Control-o>", lambda e: self.file_mgr.open_file())
        self.root.bind("<Control-s>", lambda e: self.file_mgr.save_file())
        self.root.bind("<Control-w>", lambda e: self.file_mgr.close_file())
        self.root.bind("<Control-r>", lambda e: self.reload_words())

    def on_close(self):
        self.controller.deactivate()
        try:
            self.settings["geometry"] = self.root.geometry()
        except tk.TclError:
            pass
        self.config_mgr.save()
        self.root.destroy()
