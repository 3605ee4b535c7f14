"""
Equipment Matching Module
Finds the specific equipment record within a classified asset/system type
"""
from typing import Iterator, List, Optional, Sequence, Tuple
import logging

from assetscan.models.catalog import EquipmentCatalogEntry, EquipmentRule
from assetscan.models.responses import EquipmentMatch, RuleTrace, ScoreResult
from assetscan.services.fuzzy_matching import DEFAULT_THRESHOLD
from assetscan.services.key_hashing import KeyHashRegistry, hash_equipment_keys
from assetscan.services.normalizer import tokenize
from assetscan.services.pattern_scoring import score_patterns, select_best

logger = logging.getLogger(__name__)


def rules_for_type(
    catalog: Sequence[EquipmentCatalogEntry],
    asset_type: str,
    system_type: str
) -> Iterator[Tuple[EquipmentCatalogEntry, EquipmentRule]]:
    """Equipment rules of entries whose (systemType, assetType) equals the given pair"""
    for entry in catalog:
        if entry.system_type == system_type and entry.asset_type == asset_type:
            for rule in entry.patterns:
                yield entry, rule


def find_equipment_details(
    text: str,
    asset_type: str,
    system_type: str,
    catalog: Sequence[EquipmentCatalogEntry],
    threshold: float = DEFAULT_THRESHOLD,
    registry: Optional[KeyHashRegistry] = None,
    trace: Optional[List[RuleTrace]] = None
) -> Optional[EquipmentMatch]:
    """
    Match text against equipment rules of one asset/system type

    Only entries for the exact (system_type, asset_type) pair are considered.
    The returned score is the winner's raw accumulated score, not a percentage.

    Args:
        text: Free text (OCR output)
        asset_type: Winning asset type
        system_type: Winning system type
        catalog: Equipment pattern catalog
        threshold: Similarity threshold (0-100)
        registry: Key hash registry (a fresh one when omitted)
        trace: Optional list extended with one RuleTrace per evaluated rule

    Returns:
        EquipmentMatch with pseudonymized details, or None
    """
    tokens = tokenize(text)
    evaluated: List[Tuple[EquipmentRule, ScoreResult]] = []

    for entry, rule in rules_for_type(catalog, asset_type, system_type):
        score = score_patterns(tokens, rule.pattern, threshold)
        evaluated.append((rule, score))
        if trace is not None:
            trace.append(RuleTrace(
                system_type=entry.system_type,
                asset_type=entry.asset_type,
                equipment_id=rule.equipment_id,
                matches=score.matches,
                match_count=score.match_count,
                total_score=score.raw_score,
                max_possible_score=score.max_possible_score
            ))

    best = select_best(
        (rule, rule.require_match_count, score) for rule, score in evaluated
    )
    if best is None:
        logger.info(
            f"No matching equipment for {system_type}/{asset_type} "
            f"({len(evaluated)} rules evaluated)"
        )
        return None

    rule, score = best
    if registry is None:
        registry = KeyHashRegistry()

    details = hash_equipment_keys(rule.equipment_details.flatten(), registry)
    logger.debug(f"Key hash map: {registry.as_dict()}")

    logger.info(f"Matched equipment: {rule.equipment_id} (score: {score.raw_score:.2f})")

    return EquipmentMatch(
        equipment_id=rule.equipment_id,
        details=details,
        score=score.raw_score
    )
