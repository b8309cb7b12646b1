"""
Exceptions raised by the analysis library.

Infeasible requests are never errors: they come back as empty lists or None.
"""


class TernaryError(ValueError):
    """Base class for analysis errors."""


class InvalidInputError(TernaryError):
    """Unparseable letter, negative multiplicity or malformed request."""


class NumericRangeError(TernaryError):
    """A scale or signature is too large for the supported range."""


class AnalysisCancelledError(TernaryError):
    """A long-running analysis was stopped because its caller gave up on it."""
