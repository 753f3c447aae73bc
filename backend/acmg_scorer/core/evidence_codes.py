"""
ACMG/AMP Evidence Codes
=======================

The 28 evidence criteria of the ACMG/AMP variant interpretation guideline,
with the default strength each one is applied at and the point value that
strength carries under the Bayesian points system.

References:
Richards S, et al. Standards and guidelines for the interpretation of sequence
variants. Genet Med. 2015;17(5):405-424. (Tables 3 and 4)

Tavtigian SV, et al. Fitting a naturally scaled point system to the ACMG/AMP
variant classification guidelines. Hum Mutat. 2020;41(10):1734-1737.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Direction of an evidence criterion."""
    PATHOGENIC = "Pathogenic"
    BENIGN = "Benign"


class EvidenceStrength(str, Enum):
    """Strength levels, strongest first."""
    STAND_ALONE = "StandAlone"
    VERY_STRONG = "VeryStrong"
    STRONG = "Strong"
    MODERATE = "Moderate"
    SUPPORTING = "Supporting"

    @property
    def points(self) -> int:
        return STRENGTH_POINTS[self]

    @property
    def abbreviation(self) -> str:
        return STRENGTH_ABBREVIATIONS[self]

    @property
    def rank(self) -> int:
        """Position in the strongest-first ordering."""
        return list(EvidenceStrength).index(self)

    @classmethod
    def parse(cls, value: str) -> Optional["EvidenceStrength"]:
        """Resolve a strength from its full name, case-insensitively. Abbreviations are rejected."""
        key = value.upper()
        for strength in cls:
            if key == strength.value.upper():
                return strength
        return None


STRENGTH_POINTS: Dict[EvidenceStrength, int] = {
    EvidenceStrength.STAND_ALONE: 8,
    EvidenceStrength.VERY_STRONG: 8,
    EvidenceStrength.STRONG: 4,
    EvidenceStrength.MODERATE: 2,
    EvidenceStrength.SUPPORTING: 1,
}

STRENGTH_ABBREVIATIONS: Dict[EvidenceStrength, str] = {
    EvidenceStrength.STAND_ALONE: "A",
    EvidenceStrength.VERY_STRONG: "VS",
    EvidenceStrength.STRONG: "S",
    EvidenceStrength.MODERATE: "M",
    EvidenceStrength.SUPPORTING: "P",
}


class EvidenceCode(BaseModel):
    """A single ACMG criterion such as PVS1 or BP4."""
    model_config = ConfigDict(frozen=True)

    category: Category = Field(..., description="Pathogenic or benign evidence")
    strength: EvidenceStrength = Field(..., description="Default strength of the criterion")
    number: int = Field(..., description="Criterion number within its strength level")
    description: str = Field(..., description="Criterion text from Richards et al. 2015")

    @property
    def code(self) -> str:
        """Canonical identifier, e.g. 'PVS1'."""
        return f"{self.category.value[0]}{self.strength.abbreviation}{self.number}"

    @property
    def points(self) -> int:
        """Signed points at the default strength."""
        return signed_points(self.category, self.strength)

    def sort_key(self):
        return (list(Category).index(self.category), self.strength.rank, self.number)

    def __str__(self) -> str:
        return self.code


def signed_points(category: Category, strength: EvidenceStrength) -> int:
    """Benign evidence counts against pathogenicity."""
    points = strength.points
    return points if category == Category.PATHOGENIC else -points


def _code(category: Category, strength: EvidenceStrength, number: int, description: str) -> EvidenceCode:
    return EvidenceCode(category=category, strength=strength, number=number, description=description)


_P, _B = Category.PATHOGENIC, Category.BENIGN
_A = EvidenceStrength.STAND_ALONE
_VS = EvidenceStrength.VERY_STRONG
_S = EvidenceStrength.STRONG
_M = EvidenceStrength.MODERATE
_SUP = EvidenceStrength.SUPPORTING

_CODES = [
    # PATHOGENIC - Table 3
    # Very strong
    _code(_P, _VS, 1, "Null variant (nonsense, frameshift, canonical ±1 or 2 splice sites, initiation codon, single or multiexon deletion) in a gene where LOF is a known mechanism of disease"),
    # Strong
    _code(_P, _S, 1, "Same amino acid change as a previously established pathogenic variant regardless of nucleotide change"),
    _code(_P, _S, 2, "De novo (both maternity and paternity confirmed) in a patient with the disease and no family history"),
    _code(_P, _S, 3, "Well-established in vitro or in vivo functional studies supportive of a damaging effect on the gene or gene product"),
    _code(_P, _S, 4, "The prevalence of the variant in affected individuals is significantly increased compared with the prevalence in controls"),
    # Moderate
    _code(_P, _M, 1, "Located in a mutational hot spot and/or critical and well-established functional domain (e.g., active site of an enzyme) without benign variation"),
    _code(_P, _M, 2, "Absent from controls (or at extremely low frequency if recessive) in Exome Sequencing Project, 1000 Genomes Project, or Exome Aggregation Consortium"),
    _code(_P, _M, 3, "For recessive disorders, detected in trans with a pathogenic variant"),
    _code(_P, _M, 4, "Protein length changes as a result of in-frame deletions/insertions in a nonrepeat region or stop-loss variants"),
    _code(_P, _M, 5, "Novel missense change at an amino acid residue where a different missense change determined to be pathogenic has been seen before"),
    _code(_P, _M, 6, "Assumed de novo, but without confirmation of paternity and maternity"),
    # Supporting
    _code(_P, _SUP, 1, "Cosegregation with disease in multiple affected family members in a gene definitively known to cause the disease"),
    _code(_P, _SUP, 2, "Missense variant in a gene that has a low rate of benign missense variation and in which missense variants are a common mechanism of disease"),
    _code(_P, _SUP, 3, "Multiple lines of computational evidence support a deleterious effect on the gene or gene product (conservation, evolutionary, splicing impact, etc.)"),
    _code(_P, _SUP, 4, "Patient’s phenotype or family history is highly specific for a disease with a single genetic etiology"),
    _code(_P, _SUP, 5, "Reputable source recently reports variant as pathogenic, but the evidence is not available to the laboratory to perform an independent evaluation"),

    # BENIGN - Table 4
    # Stand-alone
    _code(_B, _A, 1, "Allele frequency is >5% in Exome Sequencing Project, 1000 Genomes Project, or Exome Aggregation Consortium"),
    # Strong
    _code(_B, _S, 1, "Allele frequency is greater than expected for disorder"),
    _code(_B, _S, 2, "Observed in a healthy adult individual for a recessive (homozygous), dominant (heterozygous), or X-linked (hemizygous) disorder, with full penetrance expected at an early age"),
    _code(_B, _S, 3, "Well-established in vitro or in vivo functional studies show no damaging effect on protein function or splicing"),
    _code(_B, _S, 4, "Lack of segregation in affected members of a family"),
    # Supporting
    _code(_B, _SUP, 1, "Missense variant in a gene for which primarily truncating variants are known to cause disease"),
    _code(_B, _SUP, 2, "Observed in trans with a pathogenic variant for a fully penetrant dominant gene/disorder or observed in cis with a pathogenic variant in any inheritance pattern"),
    _code(_B, _SUP, 3, "In-frame deletions/insertions in a repetitive region without a known function"),
    _code(_B, _SUP, 4, "Multiple lines of computational evidence suggest no impact on gene or gene product (conservation, evolutionary, splicing impact, etc.)"),
    _code(_B, _SUP, 5, "Variant found in a case with an alternate molecular basis for disease"),
    _code(_B, _SUP, 6, "Reputable source recently reports variant as benign, but the evidence is not available to the laboratory to perform an independent evaluation"),
    _code(_B, _SUP, 7, "A synonymous (silent) variant for which splicing prediction algorithms predict no impact to the splice consensus sequence nor the creation of a new splice site AND the nucleotide is not highly conserved"),
]

# Read-only lookup keyed by canonical code
EVIDENCE_CODES: Mapping[str, EvidenceCode] = MappingProxyType({c.code: c for c in _CODES})


def get_evidence_code(code: str) -> Optional[EvidenceCode]:
    """Look up an evidence code by identifier (case-insensitive)."""
    return EVIDENCE_CODES.get(code.upper())
