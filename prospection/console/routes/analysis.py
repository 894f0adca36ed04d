from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from prospection.adapters.lexicon_store import get_lexicon
from prospection.analysis import get_analyzer
from prospection.console.schemas.analysis import AnalyzeRequest, AnalyzeResponse, LexiconSummary
from prospection.domain import LexiconError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


@router.post("/analyze", response_model=AnalyzeResponse, summary="Score the temporal orientation of a text")
def analyze_text(payload: AnalyzeRequest) -> AnalyzeResponse:
    try:
        result = get_analyzer().analyze(payload.text, payload.options)
    except LexiconError as exc:
        logger.error("Lexicon unavailable: %s", exc)
        raise HTTPException(status_code=500, detail="Lexicon unavailable") from exc
    return AnalyzeResponse(result=result)


@router.get("/lexicon", response_model=LexiconSummary, summary="Describe the loaded lexicon")
def describe_lexicon() -> LexiconSummary:
    try:
        summary = get_lexicon().describe()
    except LexiconError as exc:
        logger.error("Lexicon unavailable: %s", exc)
        raise HTTPException(status_code=500, detail="Lexicon unavailable") from exc
    return LexiconSummary.model_validate(summary)


__all__ = ["router"]
