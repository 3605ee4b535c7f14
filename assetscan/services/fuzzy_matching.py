"""
Approximate String Matching
Edit-distance similarity between short strings, gated by a threshold
"""
from rapidfuzz.distance import Levenshtein

DEFAULT_THRESHOLD = 60.0


def edit_distance(a: str, b: str) -> int:
    """Unit-cost Levenshtein distance (insert, delete, substitute)"""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Similarity ratio on a 0-100 scale

    ratio = (max_len - distance) / max_len * 100, where max_len is the longer
    input length. Two empty strings have ratio 0.
    """
    max_len = max(len(a), len(b))
    if not max_len:
        return 0.0
    return ((max_len - edit_distance(a, b)) / max_len) * 100


def fuzzy_match(token: str, pattern: str, threshold: float = DEFAULT_THRESHOLD) -> float:
    """
    Gated similarity between a token and a pattern token

    Args:
        token: Input token
        pattern: Pattern sub-token
        threshold: Minimum ratio (0-100) to accept

    Returns:
        The ratio when it reaches the threshold, otherwise 0
    """
    ratio = similarity(token, pattern)
    return ratio if ratio >= threshold else 0.0
