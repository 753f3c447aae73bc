"""ACMG evidence scoring service."""

from typing import Iterable, List, Union

from ..core.constants import (
    ACMG_CLASSIFICATIONS,
    ODDS_PATH_SUPPORTING,
    PRIOR_PROBABILITY,
    TIER_THRESHOLDS,
)
from ..core.evidence_codes import EvidenceCode, get_evidence_code
from ..core.exceptions import UnknownCodeError
from ..core.logging_config import get_logger
from ..models.evidence import ClassificationTier, Evidence, ScoredEvidence, ScoringResult
from .evidence_parser import parse_evidence_list

logger = get_logger(__name__)


class ACMGScorer:
    """
    Point-based ACMG classifier (Tavtigian et al. 2020).

    Each evidence code is worth a fixed number of points, benign evidence
    counting negatively. The sum decides the classification tier and the
    posterior probability of pathogenicity.
    """

    def __init__(self, prior_probability: float = PRIOR_PROBABILITY,
                 odds_path_supporting: float = ODDS_PATH_SUPPORTING):
        self.prior_probability = prior_probability
        self.odds_path_supporting = odds_path_supporting

    def lookup(self, code: str) -> EvidenceCode:
        """Return the table entry for an evidence code, without modifiers."""
        evidence_code = get_evidence_code(code)
        if evidence_code is None:
            raise UnknownCodeError(code)
        return evidence_code

    def score(self, acmg_evidence: Union[str, Iterable[str]]) -> ScoringResult:
        """
        Score a comma/space separated evidence string or a sequence of codes.
        Every code is resolved before anything is summed, so an unknown code
        fails the whole request.
        """
        if not isinstance(acmg_evidence, str):
            acmg_evidence = list(acmg_evidence)
        evidence = self._deduplicate(parse_evidence_list(acmg_evidence))

        scored: List[ScoredEvidence] = []
        total = 0
        for item in evidence:
            points = item.points
            scored.append(ScoredEvidence(
                label=item.label,
                code=item.evidence_code.code,
                points=points,
                description=item.evidence_code.description,
            ))
            total += points

        result = ScoringResult(
            evidence=scored,
            score=total,
            classification=self.classify(total),
            probability=self.posterior_probability(total),
        )
        logger.info(
            "Scored ACMG evidence",
            evidence=[e.label for e in scored],
            score=result.score,
            classification=result.classification.value,
            probability=round(result.probability, 3),
        )
        return result

    def classify(self, points: int) -> ClassificationTier:
        """Map a points total to its classification tier."""
        for tier_key, lower_bound in TIER_THRESHOLDS:
            if points >= lower_bound:
                return ClassificationTier(ACMG_CLASSIFICATIONS[tier_key])
        return ClassificationTier.BENIGN

    def posterior_probability(self, points: int) -> float:
        """Posterior probability of pathogenicity for a points total."""
        odds_path = self.odds_path_supporting ** points
        prior = self.prior_probability
        return (odds_path * prior) / ((odds_path - 1.0) * prior + 1.0)

    @staticmethod
    def _deduplicate(evidence: List[Evidence]) -> List[Evidence]:
        # Repeated evidence counts once; report in canonical ACMG order
        unique = {item.label: item for item in evidence}
        return sorted(unique.values(), key=lambda item: item.sort_key())
