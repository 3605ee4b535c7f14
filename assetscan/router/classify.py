"""
Classification API Router
Handles text classification and key hash lookup endpoints
"""
from dataclasses import dataclass, field
from fastapi import APIRouter, Depends, HTTPException, Request, status
from typing import List, Dict
import uuid
import time
import logging

from assetscan.config import settings
from assetscan.models.catalog import ClassificationRule, EquipmentCatalogEntry
from assetscan.models.requests import ClassifyRequest
from assetscan.models.responses import ClassificationResponse
from assetscan.services import classify_text, join_lines
from assetscan.services.key_hashing import KeyHashRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["classification"])


@dataclass
class Catalogs:
    """Pattern catalogs loaded at startup"""

    asset_rules: List[ClassificationRule] = field(default_factory=list)
    equipment_catalog: List[EquipmentCatalogEntry] = field(default_factory=list)


def get_catalogs(request: Request) -> Catalogs:
    """Loaded catalogs, or 503 when startup loading failed"""
    catalogs = getattr(request.app.state, "catalogs", None)
    if catalogs is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Pattern catalogs not loaded"
        )
    return catalogs


def get_registry(request: Request) -> KeyHashRegistry:
    """Service-wide key hash registry"""
    registry = getattr(request.app.state, "key_registry", None)
    if registry is None:
        registry = KeyHashRegistry(digest_bytes=settings.digest_bytes)
        request.app.state.key_registry = registry
    return registry


@router.post("/classify", response_model=ClassificationResponse)
def classify(
    request: ClassifyRequest,
    catalogs: Catalogs = Depends(get_catalogs),
    registry: KeyHashRegistry = Depends(get_registry)
):
    """
    Classify free text

    1. Asset classification against the asset catalog
    2. Equipment matching within the winning asset/system type
    3. Key hashing of the matched equipment details

    No match is a normal response carrying a message.
    """
    start_time = time.time()
    query_id = str(uuid.uuid4())

    text = request.text if request.text is not None else join_lines(request.lines)
    threshold = request.threshold if request.threshold is not None else settings.match_threshold

    logger.info(f"[{query_id}] Classify request ({len(text)} chars, threshold {threshold})")

    response = classify_text(
        text,
        catalogs.asset_rules,
        catalogs.equipment_catalog,
        threshold=threshold,
        registry=registry
    )

    latency_ms = int((time.time() - start_time) * 1000)
    logger.info(f"[{query_id}] Classification complete in {latency_ms}ms: {response.message or 'matched'}")

    return response


@router.get("/key-hashes/{digest}")
async def lookup_key_hash(
    digest: str,
    registry: KeyHashRegistry = Depends(get_registry)
) -> Dict[str, str]:
    """Reverse lookup of a hashed detail key (debug/audit)"""
    key = registry.lookup(digest)
    if key is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Unknown key hash: {digest}"
        )
    return {"digest": digest, "key": key}
