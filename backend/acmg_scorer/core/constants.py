"""Core constants for the ACMG evidence scorer."""

# ACMG Classification Categories
ACMG_CLASSIFICATIONS = {
    "PATHOGENIC": "Pathogenic",
    "LIKELY_PATHOGENIC": "Likely pathogenic",
    "VUS": "Uncertain significance",
    "LIKELY_BENIGN": "Likely benign",
    "BENIGN": "Benign"
}

# Lower score bound (inclusive) for each tier, highest first.
# Anything below the last bound is Benign.
TIER_THRESHOLDS = (
    ("PATHOGENIC", 10),
    ("LIKELY_PATHOGENIC", 6),
    ("VUS", 0),
    ("LIKELY_BENIGN", -6),
)

# Bayesian framework (Tavtigian et al. 2018, points recalibration 2020)
PRIOR_PROBABILITY = 0.1
ODDS_PATH_VERY_STRONG = 350.0
EXPONENTIAL_PROGRESSION = 2.0
SUPPORTING_EVIDENCE_EXPONENT = EXPONENTIAL_PROGRESSION ** -3  # 0.125
ODDS_PATH_SUPPORTING = ODDS_PATH_VERY_STRONG ** SUPPORTING_EVIDENCE_EXPONENT  # ~2.08

APP_NAME = "acmg"
APP_VERSION = "0.1.0"
