"""
Analysis - parse scale words and profile them.
"""

from chuk_mcp_ternary.analysis.encoding import (
    alphabet_for_arity,
    detect_alphabet,
    parse_word,
)
from chuk_mcp_ternary.analysis.analyzer import (
    analyze_signature,
    analyze_word,
    format_word,
    passes_filters,
    profile_word,
    quasi_parallelogram,
    read_word,
)

__all__ = [
    # Encoding
    "alphabet_for_arity",
    "detect_alphabet",
    "parse_word",
    "format_word",
    "read_word",
    # Operations
    "analyze_word",
    "profile_word",
    "analyze_signature",
    "passes_filters",
    "quasi_parallelogram",
]
