import json, os
import logging

logger = logging.getLogger(__name__)

APP_NAME = "Word Highlighter"
VERSION = "1.0"
CONFIG_FILE = "word_highlighter_settings.json"

# Setting holding the path of the word -> color JSON file
CONFIG_PATH_KEY = "config_path"

THEME = {
    "light": {"ribbon": "#f3f3f3", "bg": "#e6e6e6", "paper": "#ffffff", "text": "#2d2d2d", "ruler": "#fcfcfc", "sidebar": "#f9f9f9", "primary": "#2b579a"},
    "dark": {"ribbon": "#2d2d2d", "bg": "#1e1e1e", "paper": "#3c3c3c", "text": "#e0e0e0", "ruler": "#333333", "sidebar": "#252526", "primary": "#007acc"}
}


class ConfigManager:
    def __init__(self, path=CONFIG_FILE):
        self.path = path
        self.defaults = {"theme": "light", "geometry": "1200x800", CONFIG_PATH_KEY: ""}
        self.listeners = []
        self.data = self.load()

    def load(self):
        data = self.defaults.copy()
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    stored = json.load(f)
                if isinstance(stored, dict):
                    data.update(stored)
                else:
                    logger.warning("Ignoring settings in %s: not a JSON object", self.path)
            except (OSError, ValueError) as e:
                logger.warning("Could not read settings from %s: %s", self.path, e)
        return data

    def save(self):
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=2)
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self.path, e)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, value):
        """Store and persist a setting; listeners hear about real changes only."""
        if self.data.get(key) == value:
            return False
        self.data[key] = value
        self.save()
        for listener in list(self.listeners):
            listener(key)
        return True

    def on_change(self, listener):
        self.listeners.append(listener)
