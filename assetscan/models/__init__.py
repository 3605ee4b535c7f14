"""
Data models for AssetScan Engine
"""
from .catalog import (
    PatternTerm,
    ClassificationRule,
    EquipmentSpecifics,
    EquipmentDetails,
    EquipmentRule,
    EquipmentCatalogEntry,
)
from .requests import ClassifyRequest
from .responses import (
    MatchTrace,
    ScoreResult,
    RuleTrace,
    AssetClassification,
    EquipmentMatch,
    ClassificationResult,
    EquipmentDetailsResult,
    ClassificationTrace,
    ClassificationResponse,
)

__all__ = [
    # Catalog
    "PatternTerm",
    "ClassificationRule",
    "EquipmentSpecifics",
    "EquipmentDetails",
    "EquipmentRule",
    "EquipmentCatalogEntry",
    # Request
    "ClassifyRequest",
    # Results
    "MatchTrace",
    "ScoreResult",
    "RuleTrace",
    "AssetClassification",
    "EquipmentMatch",
    "ClassificationResult",
    "EquipmentDetailsResult",
    "ClassificationTrace",
    "ClassificationResponse",
]
