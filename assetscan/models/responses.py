"""
Result models produced by the classification engine
"""
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List


class MatchTrace(BaseModel):
    """One pattern term matched by one input token"""

    pattern: str = Field(..., description="Pattern term text")
    token: str = Field(..., description="Input token that matched")
    match_ratio: float = Field(..., ge=0.0, le=100.0)
    weight: float = Field(..., ge=0.0)


class ScoreResult(BaseModel):
    """Outcome of scoring one rule against a token sequence"""

    match_count: int = 0
    raw_score: float = 0.0
    max_possible_score: float = 0.0
    matches: List[MatchTrace] = Field(default_factory=list)

    @property
    def normalized_score(self) -> float:
        """raw_score as a percentage of max_possible_score"""
        if self.max_possible_score <= 0:
            return 0.0
        return (self.raw_score / self.max_possible_score) * 100


class RuleTrace(BaseModel):
    """Diagnostic entry for one evaluated rule"""

    system_type: str
    asset_type: str
    equipment_id: Optional[str] = None
    matches: List[MatchTrace] = Field(default_factory=list)
    match_count: int = 0
    total_score: float = 0.0
    max_possible_score: float = 0.0


class AssetClassification(BaseModel):
    """Winning asset/system type"""

    asset_type: str
    system_type: str
    score: float = Field(..., ge=0.0, le=100.0, description="Percentage of max possible score")


class EquipmentMatch(BaseModel):
    """Winning equipment record"""

    equipment_id: str
    details: Dict[str, Any] = Field(default_factory=dict, description="Pseudonymized detail view")
    score: float = Field(..., ge=0.0, description="Raw accumulated score")


class ClassificationResult(BaseModel):
    """Asset-level block of a classification response"""

    extracted_text: str
    system_type: str
    asset_type: str
    score: float = Field(..., ge=0.0, le=100.0)


class EquipmentDetailsResult(BaseModel):
    """Equipment-level block of a classification response"""

    equipment_id: str
    hashed_equipment_details: Dict[str, Any] = Field(default_factory=dict)
    score: float = Field(..., ge=0.0)


class ClassificationTrace(BaseModel):
    """Per-pass diagnostic traces"""

    asset: List[RuleTrace] = Field(default_factory=list)
    equipment: List[RuleTrace] = Field(default_factory=list)


class ClassificationResponse(BaseModel):
    """End-to-end classification outcome"""

    classification_result: Optional[ClassificationResult] = None
    equipment_details: Optional[EquipmentDetailsResult] = None
    message: Optional[str] = None
    trace: ClassificationTrace = Field(default_factory=ClassificationTrace)

    class Config:
        json_schema_extra = {
            "example": {
                "classification_result": {
                    "extracted_text": "Apollo smoke detector 55000-600",
                    "system_type": "Fire Alarm",
                    "asset_type": "Smoke Detector",
                    "score": 83.3
                },
                "equipment_details": {
                    "equipment_id": "EQ-APOLLO-55000",
                    "hashed_equipment_details": {
                        "3b1f0c6e2a9d4e77": "Apollo",
                        "0b5c43a1d2e9f8a0": "55000-600"
                    },
                    "score": 12.5
                },
                "message": None
            }
        }
