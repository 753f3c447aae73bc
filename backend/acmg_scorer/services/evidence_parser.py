"""Evidence string parsing service."""

import re
from typing import List, Union

from ..core.evidence_codes import EvidenceStrength, get_evidence_code
from ..core.exceptions import InvalidModifierError, UnknownCodeError
from ..core.logging_config import get_logger
from ..models.evidence import Evidence

logger = get_logger(__name__)

EVIDENCE_PATTERN = re.compile(r"([BP][AVSMP]{1,2}\d)(?:_([A-Z]+))?")
_BRACKETS = re.compile(r"[\[\]]")
_SEPARATORS = re.compile(r"[ ,]+")


def normalize_input(acmg_evidence: Union[str, List[str]]) -> List[str]:
    """
    Split an evidence string such as "[PVS1, PM2_Supporting]" into tokens.
    Lists are accepted too, each item being normalized the same way.
    """
    if not isinstance(acmg_evidence, str):
        return [token for item in acmg_evidence for token in normalize_input(item)]
    cleaned = _BRACKETS.sub("", acmg_evidence).strip()
    return [token for token in _SEPARATORS.split(cleaned) if token]


def parse_evidence(token: str) -> Evidence:
    """Resolve a single token like 'PM2_Supporting' against the ACMG table."""
    match = EVIDENCE_PATTERN.fullmatch(token.strip().upper())
    if not match:
        raise UnknownCodeError(token)

    code, modifier_name = match.groups()
    evidence_code = get_evidence_code(code)
    if evidence_code is None:
        raise UnknownCodeError(code)

    modifier = None
    if modifier_name:
        modifier = EvidenceStrength.parse(modifier_name)
        if modifier is None:
            raise InvalidModifierError(modifier_name, token)

    logger.debug("Parsed evidence", token=token, code=code, modifier=modifier_name)
    return Evidence(evidence_code=evidence_code, modifier=modifier)


def parse_evidence_list(acmg_evidence: Union[str, List[str]]) -> List[Evidence]:
    """Parse every token, failing on the first one that cannot be resolved."""
    return [parse_evidence(token) for token in normalize_input(acmg_evidence)]
