"""
FastAPI endpoints exposing the ACMG evidence table and the scorer.
"""
from typing import List, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..core.evidence_codes import EVIDENCE_CODES
from ..core.exceptions import EvidenceError
from ..core.logging_config import get_logger
from ..models.evidence import ScoringResult
from ..services.acmg_scorer import ACMGScorer

logger = get_logger(__name__)
router = APIRouter(prefix="/acmg")


class ScoreRequest(BaseModel):
    """Evidence to score, as a list of codes or a comma separated string."""
    evidence: Union[List[str], str] = Field(..., description="e.g. ['PVS1', 'PM2_Supporting']")


class EvidenceCodeInfo(BaseModel):
    """Public view of an ACMG table entry."""
    code: str
    category: str
    strength: str
    points: int
    description: str


@router.get("/codes", response_model=List[EvidenceCodeInfo])
async def list_codes():
    """Return the full ACMG evidence table with default points."""
    return [
        EvidenceCodeInfo(
            code=code,
            category=entry.category.value,
            strength=entry.strength.value,
            points=entry.points,
            description=entry.description,
        )
        for code, entry in EVIDENCE_CODES.items()
    ]


@router.post("/score", response_model=ScoringResult)
async def score_evidence(request: ScoreRequest):
    """
    Score a set of ACMG evidence codes.

    Returns the per-code breakdown, the points total, the classification
    tier and the posterior probability of pathogenicity. Any unknown code
    rejects the whole request with a 422.
    """
    request_logger = logger.bind(evidence=request.evidence)
    try:
        result = ACMGScorer().score(request.evidence)
    except EvidenceError as e:
        request_logger.warning("Rejected evidence", token=e.token, error=str(e))
        raise HTTPException(status_code=422, detail=str(e))
    return result
