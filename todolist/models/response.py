"""
Response models returned to callers
"""

from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class TaskStatistics(BaseModel):
    """Aggregated counts over the non-deleted tasks"""

    model_config = ConfigDict(populate_by_name=True)

    total: int = 0
    by_status: Dict[str, int] = Field(default_factory=dict, alias="byStatus")
    by_difficulty: Dict[str, int] = Field(default_factory=dict, alias="byDifficulty")


class ErrorResponse(BaseModel):
    """Error response model"""
    message: str
    error_code: Optional[str] = None
    details: Optional[dict] = None
