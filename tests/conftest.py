"""
Shared fixtures. Puts the project root on sys.path so the word_highlighter
package imports without installation.
"""

import os
import sys
import json
from unittest.mock import Mock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))


class FakeStyle:
    """Render-style handle that only counts its own disposal."""

    def __init__(self, word, color, log):
        self.word = word
        self.color = color
        self.log = log
        self.disposed = 0
        self.applied = []
        self.forgotten = []
        log.append(("create", word))

    def apply(self, view, ranges):
        self.applied.append((view, list(ranges)))

    def forget(self, view):
        self.forgotten.append(view)

    def dispose(self):
        self.disposed += 1
        self.log.append(("dispose", self.word))


@pytest.fixture
def style_log():
    return []


@pytest.fixture
def style_factory(style_log):
    return lambda word, color: FakeStyle(word, color, style_log)


@pytest.fixture
def write_config(tmp_path):
    """Write a word config file and return its path."""
    def _write(content, name="words.json"):
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return str(path)
    return _write


@pytest.fixture
def fake_view():
    """Stand-in for a DocumentView: a text widget and a marker ruler."""
    def _make(content=""):
        view = Mock()
        view.text.get.return_value = content
        return view
    return _make
