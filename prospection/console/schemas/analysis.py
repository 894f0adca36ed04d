from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    text: Any = None
    options: Dict[str, Any] = Field(default_factory=dict)


class AnalyzeResponse(BaseModel):
    result: Union[str, Dict[str, Any], None] = None


class LexiconSummary(BaseModel):
    categories: Dict[str, int]
    entries: int = Field(..., ge=0)
    arities: List[int] = Field(default_factory=list)
    min_weight: float
    max_weight: float


__all__ = ["AnalyzeRequest", "AnalyzeResponse", "LexiconSummary"]
