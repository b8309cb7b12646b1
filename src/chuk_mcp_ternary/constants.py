"""
Constants and enums for ternary scale analysis.

No magic strings - use enums and Literal types for constrained values.
"""

import string
from enum import Enum
from typing import Literal

# Letters of a ternary scale word, largest step first
LARGE = 0
MEDIUM = 1
SMALL = 2

# Upper bound on scale length accepted by the public operations
MAX_SCALE_LENGTH = 256

# Default time budget for a single tool call (seconds)
DEFAULT_TIMEOUT_SECONDS = 6.0

# Wire alphabets, indexed by arity. Position in a table is the letter index.
STEP_LETTERS: tuple[str, ...] = (
    "",
    "X",
    "Ls",
    "Lms",
    "Lmns",
    "HLmns",
    "HLmnst",
    "BHLmnst",
    "BHLmnstw",
    "BCHLmnstw",
    "BCHLmnpstw",
    string.ascii_uppercase + string.ascii_lowercase,
)


class Chirality(str, Enum):
    """Relation of a word's least mode to the least mode of its reversal."""

    LEFT = "Left"
    RIGHT = "Right"
    ACHIRAL = "Achiral"


class EnumerationMode(str, Enum):
    """How scales with a given step signature are generated."""

    ALL_NECKLACES = "all_necklaces"
    MOS_SUBSTITUTION = "mos_substitution"


class Constraint(str, Enum):
    """Comparison applied by a numeric signature filter."""

    EXACTLY = "exactly"
    AT_MOST = "at_most"

    def admits(self, value: int, bound: int) -> bool:
        """Check a value against the bound."""
        if self is Constraint.EXACTLY:
            return value == bound
        return value <= bound


# Type aliases for Literal types
ChiralityName = Literal["Left", "Right", "Achiral"]
ConstraintName = Literal["exactly", "at_most"]
EnumerationModeName = Literal["all_necklaces", "mos_substitution"]


class ErrorMessages:
    """Standard error message templates."""

    UNKNOWN_LETTER = "Unknown step letter {letter!r} in word {word!r}"
    NEGATIVE_MULTIPLICITY = "Letter multiplicities must be non-negative, got {content}"
    SCALE_TOO_LONG = "Scale length {length} exceeds the maximum of {maximum}"
    BAD_SIGNATURE = "Step signature must have exactly three counts, got {signature!r}"
    UNKNOWN_MODE = "Unknown enumeration mode: {mode}"
    UNKNOWN_CONSTRAINT = "Unknown constraint: {constraint}"
    SCALE_NOT_FOUND = "Scale not found: {name}"
    TIMEOUT = "Analysis exceeded the time budget of {seconds} seconds"
    CANCELLED = "Analysis was cancelled"
