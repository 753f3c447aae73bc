"""Rendering of scoring results for terminal and machine consumption."""

from typing import List

from ..core.evidence_codes import EVIDENCE_CODES
from ..models.evidence import ScoringResult

SEPARATOR = "--------"


def format_text(result: ScoringResult) -> str:
    """Human-readable report, one line per evidence code then a summary block."""
    lines: List[str] = [
        f"{item.label:<4}:{item.points:>2} '{item.description}'" for item in result.evidence
    ]
    lines.append(SEPARATOR)
    lines.append(f"Classification: {result.classification.identifier}")
    lines.append(f"ACMG Score: {result.score}")
    lines.append(f"Post Prob Path: {result.probability:.3f}")
    return "\n".join(lines)


def format_json(result: ScoringResult) -> str:
    return result.model_dump_json(indent=2)


def format_result(result: ScoringResult, output_format: str = "text") -> str:
    if output_format == "json":
        return format_json(result)
    return format_text(result)


def format_code_table() -> str:
    """List every ACMG code with its default points."""
    return "\n".join(
        f"{code:<4}:{entry.points:>2} {entry.strength.value:<10} '{entry.description}'"
        for code, entry in EVIDENCE_CODES.items()
    )
