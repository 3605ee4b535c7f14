"""
Catalog Loader
Validates pattern catalogs into engine models, outside the classification path
"""
import json
from pathlib import Path
from typing import Any, Callable, List, TypeVar, Union
import logging

from pydantic import BaseModel, ValidationError

from assetscan.models.catalog import ClassificationRule, EquipmentCatalogEntry

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class InvalidCatalogError(Exception):
    """Raised when a pattern catalog is malformed or unreadable"""
    pass


def _parse_records(data: Any, model: type, catalog_name: str) -> List[Any]:
    if not isinstance(data, list):
        raise InvalidCatalogError(
            f"{catalog_name} catalog must be a list of records, got {type(data).__name__}"
        )

    records = []
    for index, item in enumerate(data):
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            raise InvalidCatalogError(
                f"{catalog_name} catalog record {index} is invalid: {e}"
            ) from e
    return records


def parse_asset_catalog(data: Any) -> List[ClassificationRule]:
    """
    Validate parsed asset catalog data

    Args:
        data: List of rule dicts (camelCase or snake_case keys)

    Returns:
        List of ClassificationRule

    Raises:
        InvalidCatalogError: If the data is not a list or a record is malformed
    """
    return _parse_records(data, ClassificationRule, "Asset")


def parse_equipment_catalog(data: Any) -> List[EquipmentCatalogEntry]:
    """
    Validate parsed equipment catalog data

    Args:
        data: List of entry dicts (camelCase or snake_case keys)

    Returns:
        List of EquipmentCatalogEntry

    Raises:
        InvalidCatalogError: If the data is not a list or a record is malformed
    """
    return _parse_records(data, EquipmentCatalogEntry, "Equipment")


def _load_file(path: Union[str, Path], parser: Callable[[Any], List[M]]) -> List[M]:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        logger.error(f"Catalog file not found: {path}")
        raise InvalidCatalogError(f"Failed to load {path}: file not found") from e
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading catalog {path}: {e}")
        raise InvalidCatalogError(f"Failed to load {path}: {e}") from e

    try:
        records = parser(data)
    except InvalidCatalogError as e:
        logger.error(f"Invalid catalog {path}: {e}")
        raise

    logger.info(f"Loaded {len(records)} records from {path}")
    return records


def load_asset_catalog(path: Union[str, Path]) -> List[ClassificationRule]:
    """Read and validate an asset catalog JSON file"""
    return _load_file(path, parse_asset_catalog)


def load_equipment_catalog(path: Union[str, Path]) -> List[EquipmentCatalogEntry]:
    """Read and validate an equipment catalog JSON file"""
    return _load_file(path, parse_equipment_catalog)
