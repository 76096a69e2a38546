class WordHighlighterError(Exception):
    """Base class for word configuration failures."""


class ConfigPathMissing(WordHighlighterError):
    def __init__(self):
        super().__init__("Configuration path not set")


class ConfigReadError(WordHighlighterError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class ConfigParseError(WordHighlighterError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid word configuration in {path}: {reason}")
