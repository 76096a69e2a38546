import json
import logging

from word_highlighter.logic.errors import ConfigPathMissing, ConfigReadError, ConfigParseError

logger = logging.getLogger(__name__)


def read_mapping(path):
    """Read a word -> color JSON object from `path`.

    Duplicate words keep the last color seen. Words that are empty strings
    can never match and are dropped.
    """
    if not path:
        raise ConfigPathMissing()

    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except UnicodeDecodeError as e:
        raise ConfigParseError(path, f"not UTF-8 text ({e})") from e
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e)) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigParseError(path, f"expected a JSON object, got {type(data).__name__}")

    mapping = {}
    for word, color in data.items():
        if not isinstance(color, str):
            raise ConfigParseError(path, f"color for {word!r} must be a string, got {type(color).__name__}")
        if not word:
            logger.warning("Skipping empty word in %s", path)
            continue
        mapping[word] = color
    return mapping


class ConfigStore:
    """Owns the current word -> color mapping and one render style per word.

    The mapping is only ever replaced as a whole. Style handles from the
    previous mapping are released before new ones are created, so the two
    sets never coexist.
    """

    def __init__(self, style_factory=None):
        self.style_factory = style_factory
        self._mapping = {}
        self._styles = []  # list[(word, handle)]

    @property
    def mapping(self):
        return dict(self._mapping)

    @property
    def styles(self):
        return list(self._styles)

    def __len__(self):
        return len(self._mapping)

    def style_for(self, word):
        for w, handle in self._styles:
            if w == word:
                return handle
        return None

    def load(self, path):
        """Install the mapping read from `path` and return a copy of it.

        Raises a WordHighlighterError on failure; the current mapping and
        styles are left as they were.
        """
        mapping = read_mapping(path)
        self._install(mapping)
        logger.info("Loaded %d word(s) from %s", len(mapping), path)
        return self.mapping

    def reload(self, path):
        """Like load(), but releases the current styles before installing.

        The new file is parsed first, so a bad file keeps the current
        mapping and its styles active.
        """
        mapping = read_mapping(path)
        self.release_styles()
        self._install(mapping)
        logger.info("Reloaded %d word(s) from %s", len(mapping), path)
        return self.mapping

    def _install(self, mapping):
        if self._styles:
            self.release_styles()

        created = []
        try:
            if self.style_factory is not None:
                for word, color in mapping.items():
                    created.append((word, self.style_factory(word, color)))
        except Exception:
            for _, handle in created:
                handle.dispose()
            self._mapping = {}
            raise

        self._mapping = dict(mapping)
        self._styles = created

    def release_styles(self):
        """Dispose every active style handle exactly once."""
        styles, self._styles = self._styles, []
        for word, handle in styles:
            try:
                handle.dispose()
            except Exception:
                logger.exception("Failed to release style for %r", word)
        return len(styles)

    def forget_view(self, view):
        """Stop tracking a closed document view in every active style."""
        for _, handle in self._styles:
            handle.forget(view)

    def clear(self):
        self.release_styles()
        self._mapping = {}

    def close(self):
        self.clear()
