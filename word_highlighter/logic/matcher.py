import re
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class Range:
    """Half-open character span [start, end) in a document's text."""
    start: int
    end: int


@dataclass
class HighlightRequest:
    word: str
    color: str
    ranges: List[Range] = field(default_factory=list)


def word_pattern(word: str):
    # The word is always a literal; \b on both sides keeps matches whole-token.
    return re.compile(r"\b" + re.escape(word) + r"\b")


def find_occurrences(text: str, word: str) -> List[Range]:
    """Every whole-token occurrence of `word` in `text`, left to right.

    Matches never overlap, so `cat` in "category" or `TODO` in "TODOList"
    are not reported.
    """
    if not word:
        return []
    return [Range(m.start(), m.start() + len(word)) for m in word_pattern(word).finditer(text)]


def compute_highlights(text: str, mapping: Dict[str, str]) -> List[HighlightRequest]:
    """One request per configured word, in mapping order.

    Words without occurrences still get an (empty) request so the renderer
    clears what it showed before.
    """
    return [HighlightRequest(word, color, find_occurrences(text, word)) for word, color in mapping.items()]
