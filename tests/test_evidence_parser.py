"""
Tests for evidence string parsing.
"""
import pytest

from acmg_scorer.core.evidence_codes import EvidenceStrength
from acmg_scorer.core.exceptions import InvalidModifierError, UnknownCodeError
from acmg_scorer.services.evidence_parser import normalize_input, parse_evidence


@pytest.mark.parametrize("raw,tokens", [
    ("PVS1, PS1, PM2_Supporting", ["PVS1", "PS1", "PM2_Supporting"]),
    ("[PVS1,PS1]", ["PVS1", "PS1"]),
    ("  PVS1   PM2 ,, BP4 ", ["PVS1", "PM2", "BP4"]),
    ("", []),
    ("[]", []),
    (" , ", []),
])
def test_normalize_input(raw, tokens):
    assert normalize_input(raw) == tokens


def test_normalize_input_accepts_lists():
    assert normalize_input(["PVS1", "PS1, PM2", ""]) == ["PVS1", "PS1", "PM2"]


def test_parse_plain_code():
    evidence = parse_evidence("PVS1")
    assert evidence.evidence_code.code == "PVS1"
    assert evidence.modifier is None
    assert evidence.label == "PVS1"
    assert evidence.points == 8


def test_parse_modifier_is_case_insensitive():
    evidence = parse_evidence("pm2_supporting")
    assert evidence.modifier == EvidenceStrength.SUPPORTING
    assert evidence.label == "PM2_Supporting"
    assert evidence.points == 1


def test_parse_full_strength_names():
    assert parse_evidence("PS3_Moderate").points == 2
    assert parse_evidence("PM2_VeryStrong").points == 8
    assert parse_evidence("PVS1_StandAlone").label == "PVS1_StandAlone"


@pytest.mark.parametrize("token,modifier", [
    ("PM2_P", "P"),
    ("PS3_M", "M"),
    ("PVS1_S", "S"),
    ("BS1_VS", "VS"),
])
def test_strength_abbreviation_is_not_a_modifier(token, modifier):
    with pytest.raises(InvalidModifierError) as exc_info:
        parse_evidence(token)
    assert exc_info.value.modifier == modifier


def test_benign_modifier_stays_negative():
    assert parse_evidence("BS1_Supporting").points == -1
    assert parse_evidence("BP4_Strong").points == -4


@pytest.mark.parametrize("token", ["PM7", "PVS2", "BA2"])
def test_well_formed_but_unknown_code(token):
    with pytest.raises(UnknownCodeError) as exc_info:
        parse_evidence(token)
    assert exc_info.value.token == token
    assert token in str(exc_info.value)


@pytest.mark.parametrize("token", ["FOO", "PVS", "XPVS1", "PVS1X", "PM12"])
def test_malformed_token(token):
    with pytest.raises(UnknownCodeError):
        parse_evidence(token)


def test_invalid_modifier():
    with pytest.raises(InvalidModifierError) as exc_info:
        parse_evidence("PM2_Weak")
    assert exc_info.value.modifier == "WEAK"
    assert exc_info.value.token == "PM2_Weak"
