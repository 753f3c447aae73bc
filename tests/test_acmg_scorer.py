"""
Tests for the point-based ACMG scorer.
"""
import pytest

from acmg_scorer.core.exceptions import InvalidModifierError, UnknownCodeError
from acmg_scorer.models.evidence import ClassificationTier


def test_known_fixture(scorer):
    """PVS1 + PS1 + PM2_Supporting is Pathogenic with 13 points"""
    result = scorer.score("PVS1, PS1, PM2_Supporting")

    assert result.score == 13
    assert result.classification == ClassificationTier.PATHOGENIC
    assert round(result.probability, 3) == 0.999
    assert [(e.label, e.points) for e in result.evidence] == [
        ("PVS1", 8),
        ("PS1", 4),
        ("PM2_Supporting", 1),
    ]


@pytest.mark.parametrize("evidence", [
    ["PVS1"],
    ["PS1", "PS3", "PM2"],
    ["PM2", "PP3", "BP4"],
    ["BA1", "BS1", "BP7"],
    ["PVS1_Strong", "PM1_Supporting", "BS3_Moderate"],
    ["PP1", "PP2", "PP3", "PP4", "PP5", "BP1"],
])
def test_score_equals_sum_of_points(scorer, evidence):
    result = scorer.score(evidence)
    assert result.score == sum(e.points for e in result.evidence)


def test_empty_input(scorer):
    result = scorer.score("")

    assert result.evidence == []
    assert result.score == 0
    assert result.classification == ClassificationTier.VUS
    assert result.probability == pytest.approx(0.1)


def test_duplicates_count_once(scorer):
    result = scorer.score("PVS1, PVS1, pvs1")
    assert result.score == 8
    assert len(result.evidence) == 1


def test_modified_and_plain_evidence_are_distinct(scorer):
    result = scorer.score("PM2_Supporting, PM2")
    assert [e.label for e in result.evidence] == ["PM2", "PM2_Supporting"]
    assert result.score == 3


def test_evidence_reported_in_canonical_order(scorer):
    result = scorer.score("BP4, PP3, BA1, PM2, BS2, PS4, PVS1")
    assert [e.label for e in result.evidence] == ["PVS1", "PS4", "PM2", "PP3", "BA1", "BS2", "BP4"]


def test_unknown_code_fails_whole_request(scorer):
    with pytest.raises(UnknownCodeError) as exc_info:
        scorer.score("PVS1, PM7, PS1")
    assert exc_info.value.token == "PM7"


def test_invalid_modifier_fails(scorer):
    with pytest.raises(InvalidModifierError):
        scorer.score("PVS1, PM2_Weak")


def test_benign_evidence(scorer):
    result = scorer.score("BA1, BS1")
    assert result.score == -12
    assert result.classification == ClassificationTier.BENIGN
    assert result.probability < 0.001


@pytest.mark.parametrize("points,tier", [
    (14, ClassificationTier.PATHOGENIC),
    (10, ClassificationTier.PATHOGENIC),
    (9, ClassificationTier.LIKELY_PATHOGENIC),
    (6, ClassificationTier.LIKELY_PATHOGENIC),
    (5, ClassificationTier.VUS),
    (0, ClassificationTier.VUS),
    (-1, ClassificationTier.LIKELY_BENIGN),
    (-6, ClassificationTier.LIKELY_BENIGN),
    (-7, ClassificationTier.BENIGN),
    (-20, ClassificationTier.BENIGN),
])
def test_classify_breakpoints(scorer, points, tier):
    assert scorer.classify(points) == tier


def test_posterior_probability_very_strong(scorer):
    """8 points is one very strong criterion, i.e. odds of 350"""
    assert scorer.posterior_probability(8) == pytest.approx(35.0 / 35.9)


def test_posterior_probability_is_monotonic(scorer):
    values = [scorer.posterior_probability(p) for p in range(-12, 16)]
    assert values == sorted(values)
    assert all(0.0 < v < 1.0 for v in values)


def test_lookup(scorer):
    assert scorer.lookup("bp7").code == "BP7"
    with pytest.raises(UnknownCodeError):
        scorer.lookup("BP8")
