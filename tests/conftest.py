import pytest

from acmg_scorer.core.logging_config import configure_logging
from acmg_scorer.services.acmg_scorer import ACMGScorer


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging("WARNING")


@pytest.fixture
def scorer():
    return ACMGScorer()
