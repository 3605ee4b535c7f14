"""
Request models for classification API
"""
from pydantic import BaseModel, Field, model_validator
from typing import Optional, List


class ClassifyRequest(BaseModel):
    """Request model for classify endpoint"""

    text: Optional[str] = Field(default=None, description="Free text to classify")
    lines: Optional[List[str]] = Field(
        default=None,
        description="OCR text lines, joined with single spaces"
    )
    threshold: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=100.0,
        description="Similarity threshold (0-100); service default when omitted"
    )

    @model_validator(mode="after")
    def require_text_or_lines(self) -> "ClassifyRequest":
        if self.text is None and self.lines is None:
            raise ValueError("Either text or lines must be provided")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "lines": ["APOLLO", "Smoke Detector", "55000-600"],
                "threshold": 60
            }
        }
