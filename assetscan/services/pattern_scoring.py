"""
Weighted Pattern Scoring
Scores a token sequence against an ordered list of weighted pattern terms and
picks the best-scoring rule among candidates
"""
from typing import Iterable, Optional, Sequence, Tuple, TypeVar
import logging

from assetscan.models.catalog import PatternTerm
from assetscan.models.responses import MatchTrace, ScoreResult
from assetscan.services.fuzzy_matching import DEFAULT_THRESHOLD, fuzzy_match

logger = logging.getLogger(__name__)

T = TypeVar("T")


def match_term(
    tokens: Sequence[str],
    term: PatternTerm,
    threshold: float = DEFAULT_THRESHOLD
) -> Optional[MatchTrace]:
    """
    Find the first input token matching any sub-token of a term

    Sub-tokens are tried in declaration order and the first nonzero ratio wins,
    even if a later sub-token would score higher.

    Returns:
        MatchTrace for the first qualifying token, or None
    """
    sub_tokens = term.sub_tokens
    if not sub_tokens:
        return None

    for token in tokens:
        for sub_token in sub_tokens:
            ratio = fuzzy_match(token, sub_token, threshold)
            if ratio > 0:
                return MatchTrace(
                    pattern=term.text,
                    token=token,
                    match_ratio=ratio,
                    weight=term.weight
                )
    return None


def score_patterns(
    tokens: Sequence[str],
    terms: Iterable[PatternTerm],
    threshold: float = DEFAULT_THRESHOLD
) -> ScoreResult:
    """
    Score tokens against weighted pattern terms

    Each term contributes at most once: (ratio / 100) * weight for its first
    matching token. max_possible_score sums every term's weight, matched or not.

    Args:
        tokens: Normalized input tokens
        terms: Pattern terms of one rule
        threshold: Similarity threshold (0-100)

    Returns:
        ScoreResult with match count, raw and max possible score
    """
    result = ScoreResult()

    for term in terms:
        result.max_possible_score += term.weight

        match = match_term(tokens, term, threshold)
        if match is None:
            continue

        result.match_count += 1
        result.raw_score += (match.match_ratio / 100) * term.weight
        result.matches.append(match)

    return result


def select_best(
    candidates: Iterable[Tuple[T, int, ScoreResult]]
) -> Optional[Tuple[T, ScoreResult]]:
    """
    Pick the strictly highest raw score among qualifying candidates

    A candidate qualifies when its match count reaches its required count.
    Ties keep the first-seen candidate, and a zero raw score never wins.

    Args:
        candidates: (item, require_match_count, score) in evaluation order

    Returns:
        (item, score) of the winner, or None
    """
    best: Optional[Tuple[T, ScoreResult]] = None
    best_score = 0.0

    for item, require_match_count, score in candidates:
        if score.match_count >= require_match_count and score.raw_score > best_score:
            best_score = score.raw_score
            best = (item, score)

    return best
