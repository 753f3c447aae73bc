"""Custom exceptions for the ACMG evidence scorer."""

class AcmgScorerException(Exception):
    """Base exception for all scorer errors."""
    pass

class EvidenceError(AcmgScorerException):
    """Evidence that cannot be scored."""

    def __init__(self, message: str, token: str):
        super().__init__(message)
        self.token = token

class UnknownCodeError(EvidenceError):
    """Evidence code is not in the ACMG table."""

    def __init__(self, token: str):
        super().__init__(f"Invalid evidence code {token}", token)

class InvalidModifierError(EvidenceError):
    """Strength modifier on an evidence code is not recognised."""

    def __init__(self, modifier: str, token: str):
        super().__init__(f"Invalid modifier '{modifier}' for evidence code {token}", token)
        self.modifier = modifier
