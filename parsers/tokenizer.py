"""
Marker-based field extraction for command lines.

A marker is a short prefix such as ``s/`` or ``id/`` that tags the text
following it. Two strategies are provided:

- ordered scan (:func:`extract_value`): for commands whose fields appear in a
  fixed relative order. Reads from a marker up to the next expected marker.
- token scan (:func:`extract_token_value`): for commands where any subset of
  fields may appear in any order. Splits the text before every ``word/``
  token and looks the marker up among the pieces.

Both are pure functions over text.
"""
import re
from typing import List, Optional, Tuple

START = "s/"
END = "e/"
DATE = "d/"
TASK = "st/"
INDEX = "id/"
HOURS = "h/"
TEST_NAME = "t/"
TEST_RESULT = "r/"

_WHITESPACE = re.compile(r"\s+")
# whitespace followed by word characters and a slash starts a new token
_TOKEN_BOUNDARY = re.compile(r"\s+(?=\w+/)")


def normalize(line: Optional[str]) -> str:
    """Trim, collapse whitespace runs and lower-case the whole line."""
    if line is None:
        return ""
    return _WHITESPACE.sub(" ", line.strip()).lower()


def split_head(text: str) -> Tuple[str, str]:
    """Split off the first word. The rest is "" when there is nothing after it."""
    parts = text.split(" ", 1)
    return parts[0], parts[1] if len(parts) > 1 else ""


def has_markers(text: str, *markers: str) -> bool:
    """Substring check only; says nothing about whether the values are valid."""
    return all(marker in text for marker in markers)


def extract_value(text: str, start_marker: str, end_marker: Optional[str] = None) -> str:
    """
    Ordered scan: return the trimmed text between the first occurrence of
    `start_marker` and the next occurrence of `end_marker` after it, or the
    end of the string when `end_marker` is None or absent.

    Returns "" when `start_marker` does not occur.
    """
    start = text.find(start_marker)
    if start == -1:
        return ""
    start += len(start_marker)
    end = text.find(end_marker, start) if end_marker is not None else -1
    return text[start:].strip() if end == -1 else text[start:end].strip()


def tokenize(text: str) -> List[str]:
    return _TOKEN_BOUNDARY.split(text)


def extract_token_value(text: str, marker: str) -> Optional[str]:
    """
    Token scan: return the trimmed value of the first token starting with
    `marker`, or None if no token does.

    A token starting with ``st/`` does not match the marker ``s/``, and
    ``id/`` does not match ``d/``, because matching is done on token starts.
    """
    for token in tokenize(text):
        if token.startswith(marker):
            return token[len(marker):].strip()
    return None
