"""Evidence and scoring result models."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.constants import ACMG_CLASSIFICATIONS
from ..core.evidence_codes import EvidenceCode, EvidenceStrength, signed_points


class ClassificationTier(str, Enum):
    """ACMG five-tier classification."""
    PATHOGENIC = ACMG_CLASSIFICATIONS["PATHOGENIC"]
    LIKELY_PATHOGENIC = ACMG_CLASSIFICATIONS["LIKELY_PATHOGENIC"]
    VUS = ACMG_CLASSIFICATIONS["VUS"]
    LIKELY_BENIGN = ACMG_CLASSIFICATIONS["LIKELY_BENIGN"]
    BENIGN = ACMG_CLASSIFICATIONS["BENIGN"]

    @property
    def identifier(self) -> str:
        """Compact tier name used in text reports, e.g. 'LikelyPathogenic'."""
        return TIER_IDENTIFIERS[self]


TIER_IDENTIFIERS = {
    ClassificationTier.PATHOGENIC: "Pathogenic",
    ClassificationTier.LIKELY_PATHOGENIC: "LikelyPathogenic",
    ClassificationTier.VUS: "UncertainSignificance",
    ClassificationTier.LIKELY_BENIGN: "LikelyBenign",
    ClassificationTier.BENIGN: "Benign",
}


class Evidence(BaseModel):
    """An evidence code as applied to a variant, optionally at a modified strength."""
    model_config = ConfigDict(frozen=True)

    evidence_code: EvidenceCode = Field(..., description="Criterion from the ACMG table")
    modifier: Optional[EvidenceStrength] = Field(None, description="Strength the criterion is applied at")

    @property
    def label(self) -> str:
        if self.modifier is None:
            return self.evidence_code.code
        return f"{self.evidence_code.code}_{self.modifier.value}"

    @property
    def points(self) -> int:
        strength = self.modifier or self.evidence_code.strength
        return signed_points(self.evidence_code.category, strength)

    def sort_key(self):
        # Unmodified evidence sorts ahead of the same code with a modifier
        modifier_rank = -1 if self.modifier is None else self.modifier.rank
        return self.evidence_code.sort_key() + (modifier_rank,)

    def __str__(self) -> str:
        return self.label


class ScoredEvidence(BaseModel):
    """One line of a scoring report."""
    label: str = Field(..., description="Evidence as written, e.g. PM2_Supporting")
    code: str = Field(..., description="Underlying ACMG code, e.g. PM2")
    points: int = Field(..., description="Signed points contributed")
    description: str = Field(..., description="Criterion text")


class ScoringResult(BaseModel):
    """Aggregate result of scoring a set of evidence codes."""
    evidence: List[ScoredEvidence] = Field(default_factory=list, description="Per-code breakdown")
    score: int = Field(..., description="Sum of evidence points")
    classification: ClassificationTier = Field(..., description="ACMG classification tier")
    probability: float = Field(..., description="Posterior probability of pathogenicity")
