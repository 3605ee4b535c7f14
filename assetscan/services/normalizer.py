"""
Text Normalization Module
Folds raw OCR text into a canonical form and splits it into tokens
"""
import re
from typing import Any, List

_NON_WORD = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE = re.compile(r"\s+")
_TOKEN = re.compile(r"\b\w+\b", re.ASCII)


def normalize_text(text: Any) -> str:
    """
    Lowercase, drop punctuation, collapse whitespace and trim

    Args:
        text: Raw text (None yields "")

    Returns:
        Canonical text
    """
    if text is None:
        return ""
    text = str(text).lower()
    text = _NON_WORD.sub("", text)
    return _WHITESPACE.sub(" ", text).strip()


def tokenize(text: Any) -> List[str]:
    """Split canonical text into word tokens"""
    return _TOKEN.findall(normalize_text(text))


def join_lines(lines: List[str]) -> str:
    """Join OCR text lines into a single string"""
    return " ".join(lines)
