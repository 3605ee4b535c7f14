"""
Asset Classification Module
Determines which asset/system type a piece of text describes
"""
from typing import List, Optional, Sequence, Tuple
import logging

from assetscan.models.catalog import ClassificationRule
from assetscan.models.responses import AssetClassification, RuleTrace, ScoreResult
from assetscan.services.fuzzy_matching import DEFAULT_THRESHOLD
from assetscan.services.normalizer import tokenize
from assetscan.services.pattern_scoring import score_patterns, select_best

logger = logging.getLogger(__name__)


def evaluate_rules(
    tokens: Sequence[str],
    rules: Sequence[ClassificationRule],
    threshold: float = DEFAULT_THRESHOLD
) -> List[Tuple[ClassificationRule, ScoreResult]]:
    """Score every rule independently, in catalog order"""
    return [
        (rule, score_patterns(tokens, rule.patterns, threshold))
        for rule in rules
    ]


def build_rule_trace(rule: ClassificationRule, score: ScoreResult) -> RuleTrace:
    """Diagnostic entry for one asset rule"""
    return RuleTrace(
        system_type=rule.system_type,
        asset_type=rule.asset_type,
        matches=score.matches,
        match_count=score.match_count,
        total_score=score.raw_score,
        max_possible_score=score.max_possible_score
    )


def classify_asset(
    text: str,
    rules: Sequence[ClassificationRule],
    threshold: float = DEFAULT_THRESHOLD,
    trace: Optional[List[RuleTrace]] = None
) -> Optional[AssetClassification]:
    """
    Classify text against the asset pattern catalog

    The winner is the qualifying rule with the strictly highest raw score
    (first-seen on ties). Its score is reported as a percentage of that same
    rule's max possible score.

    Args:
        text: Free text (OCR output)
        rules: Asset classification rules
        threshold: Similarity threshold (0-100)
        trace: Optional list extended with one RuleTrace per evaluated rule

    Returns:
        AssetClassification, or None when no rule qualifies
    """
    tokens = tokenize(text)
    evaluated = evaluate_rules(tokens, rules, threshold)

    rule_traces = [build_rule_trace(rule, score) for rule, score in evaluated]
    logger.debug(f"Classification debug: {[t.model_dump() for t in rule_traces]}")
    if trace is not None:
        trace.extend(rule_traces)

    best = select_best(
        (rule, rule.require_match_count, score) for rule, score in evaluated
    )
    if best is None:
        logger.info(f"No matching asset type ({len(rules)} rules, {len(tokens)} tokens)")
        return None

    rule, score = best
    result = AssetClassification(
        asset_type=rule.asset_type,
        system_type=rule.system_type,
        score=score.normalized_score
    )

    logger.info(
        f"Classified asset: {result.system_type}/{result.asset_type} "
        f"(score: {result.score:.1f}%)"
    )

    return result
