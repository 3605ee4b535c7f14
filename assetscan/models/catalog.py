"""
Pattern catalog models

Catalog files use camelCase keys (systemType, requireMatchCount, ...); the models
accept those aliases as well as the snake_case field names.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, Dict, Any, List


class PatternTerm(BaseModel):
    """One weighted sub-phrase contributing to a rule's score"""

    text: str = Field(default="", description="Phrase to match, split on whitespace")
    weight: float = Field(default=0.0, ge=0.0, description="Maximum contribution")

    @field_validator("text", mode="before")
    @classmethod
    def coerce_text(cls, v: Any) -> str:
        # Missing text never matches
        return "" if v is None else str(v)

    @field_validator("weight", mode="before")
    @classmethod
    def coerce_weight(cls, v: Any) -> Any:
        return 0.0 if v is None else v

    @property
    def sub_tokens(self) -> List[str]:
        """Lowercased whitespace-separated pieces, in declaration order"""
        return self.text.lower().split()


class ClassificationRule(BaseModel):
    """Asset/system-type rule"""

    system_type: str = Field(..., alias="systemType")
    asset_type: str = Field(..., alias="assetType")
    patterns: List[PatternTerm] = Field(..., description="Weighted pattern terms")
    require_match_count: int = Field(default=0, ge=0, alias="requireMatchCount")

    class Config:
        populate_by_name = True

    @field_validator("require_match_count", mode="before")
    @classmethod
    def coerce_require_match_count(cls, v: Any) -> Any:
        return 0 if v is None else v


class EquipmentSpecifics(BaseModel):
    """Inner detail object of an equipment record"""

    product_type: Optional[Any] = Field(default=None, alias="productType")
    features: Optional[Any] = None
    technical_specs: Optional[Any] = Field(default=None, alias="technicalSpecs")
    application: Optional[Any] = None

    class Config:
        populate_by_name = True


class EquipmentDetails(BaseModel):
    """
    Equipment detail record

    manufacturer/model sit one level above the other four fields, which live in
    the nested equipmentDetails object.
    """

    manufacturer: Optional[Any] = None
    model: Optional[Any] = None
    equipment_details: EquipmentSpecifics = Field(
        default_factory=EquipmentSpecifics,
        alias="equipmentDetails"
    )

    class Config:
        populate_by_name = True

    @field_validator("equipment_details", mode="before")
    @classmethod
    def coerce_equipment_details(cls, v: Any) -> Any:
        return {} if v is None else v

    def flatten(self) -> Dict[str, Any]:
        """Flattened detail view keyed by the catalog's field names"""
        specifics = self.equipment_details
        return {
            "manufacturer": self.manufacturer,
            "model": self.model,
            "productType": specifics.product_type,
            "features": specifics.features,
            "technicalSpecs": specifics.technical_specs,
            "application": specifics.application,
        }


class EquipmentRule(BaseModel):
    """Pattern rule identifying one piece of equipment"""

    equipment_id: str = Field(..., alias="equipmentId")
    pattern: List[PatternTerm] = Field(..., description="Weighted pattern terms")
    require_match_count: int = Field(default=0, ge=0, alias="requireMatchCount")
    equipment_details: EquipmentDetails = Field(
        default_factory=EquipmentDetails,
        alias="equipmentDetails"
    )

    class Config:
        populate_by_name = True

    @field_validator("require_match_count", mode="before")
    @classmethod
    def coerce_require_match_count(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("equipment_details", mode="before")
    @classmethod
    def coerce_equipment_details(cls, v: Any) -> Any:
        return {} if v is None else v


class EquipmentCatalogEntry(BaseModel):
    """Equipment rules belonging to one (systemType, assetType) pair"""

    system_type: str = Field(..., alias="systemType")
    asset_type: str = Field(..., alias="assetType")
    patterns: List[EquipmentRule] = Field(..., description="Equipment rules")

    class Config:
        populate_by_name = True
