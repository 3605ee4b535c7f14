"""
Classification Pipeline
Asset classification followed by equipment matching for one piece of text
"""
from typing import Optional, Sequence
import logging

from assetscan.models.catalog import ClassificationRule, EquipmentCatalogEntry
from assetscan.models.responses import (
    ClassificationResponse,
    ClassificationResult,
    ClassificationTrace,
    EquipmentDetailsResult,
)
from assetscan.services.asset_classification import classify_asset
from assetscan.services.equipment_matching import find_equipment_details
from assetscan.services.fuzzy_matching import DEFAULT_THRESHOLD
from assetscan.services.key_hashing import KeyHashRegistry

logger = logging.getLogger(__name__)

NO_ASSET_MESSAGE = "No matching asset type found."
NO_EQUIPMENT_MESSAGE = "No matching equipment details found."


def classify_text(
    text: str,
    asset_rules: Sequence[ClassificationRule],
    equipment_catalog: Sequence[EquipmentCatalogEntry],
    threshold: float = DEFAULT_THRESHOLD,
    registry: Optional[KeyHashRegistry] = None
) -> ClassificationResponse:
    """
    Classify text into an asset type, then match equipment within it

    Equipment matching only runs when asset classification succeeds. Absence of
    a match is reported through message, never raised.

    Args:
        text: Free text (OCR output, already joined)
        asset_rules: Asset classification catalog
        equipment_catalog: Equipment pattern catalog
        threshold: Similarity threshold (0-100)
        registry: Session key hash registry (a fresh one when omitted)

    Returns:
        ClassificationResponse with results, message and diagnostic trace
    """
    if registry is None:
        registry = KeyHashRegistry()

    trace = ClassificationTrace()

    asset = classify_asset(text, asset_rules, threshold, trace=trace.asset)
    if asset is None:
        return ClassificationResponse(message=NO_ASSET_MESSAGE, trace=trace)

    response = ClassificationResponse(
        classification_result=ClassificationResult(
            extracted_text=text,
            system_type=asset.system_type,
            asset_type=asset.asset_type,
            score=asset.score
        ),
        trace=trace
    )

    equipment = find_equipment_details(
        text,
        asset.asset_type,
        asset.system_type,
        equipment_catalog,
        threshold,
        registry=registry,
        trace=trace.equipment
    )

    if equipment is None:
        response.message = NO_EQUIPMENT_MESSAGE
    else:
        response.equipment_details = EquipmentDetailsResult(
            equipment_id=equipment.equipment_id,
            hashed_equipment_details=equipment.details,
            score=equipment.score
        )

    return response
