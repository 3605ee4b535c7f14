"""
Core service modules for AssetScan Engine
"""
from .normalizer import normalize_text, tokenize, join_lines
from .fuzzy_matching import edit_distance, similarity, fuzzy_match, DEFAULT_THRESHOLD
from .pattern_scoring import score_patterns, select_best
from .asset_classification import classify_asset
from .equipment_matching import find_equipment_details
from .key_hashing import KeyHashRegistry, hash_key, hash_equipment_keys
from .catalog_loader import (
    InvalidCatalogError,
    parse_asset_catalog,
    parse_equipment_catalog,
    load_asset_catalog,
    load_equipment_catalog,
)
from .classification import classify_text

__all__ = [
    "normalize_text",
    "tokenize",
    "join_lines",
    "edit_distance",
    "similarity",
    "fuzzy_match",
    "DEFAULT_THRESHOLD",
    "score_patterns",
    "select_best",
    "classify_asset",
    "find_equipment_details",
    "KeyHashRegistry",
    "hash_key",
    "hash_equipment_keys",
    "InvalidCatalogError",
    "parse_asset_catalog",
    "parse_equipment_catalog",
    "load_asset_catalog",
    "load_equipment_catalog",
    "classify_text",
]
