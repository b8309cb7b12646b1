"""
Scale catalog - named ternary scales.

Named scales ship with the package; projects can add their own or override
the built-in ones.
"""

from chuk_mcp_ternary.catalog.loader import ScaleCatalog

__all__ = [
    "ScaleCatalog",
]
