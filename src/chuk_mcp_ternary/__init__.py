"""
chuk-mcp-ternary - analysis of ternary scale words.

Scales are cyclic words over the step sizes L > m > s, written as letters
0, 1 and 2. The library enumerates scales by step signature, decomposes them
into guide frames, and projects them onto a two-dimensional lattice.
"""

__version__ = "0.1.0"
