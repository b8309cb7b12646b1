"""
Pytest configuration and shared fixtures.
"""

import tempfile
from pathlib import Path

import pytest

from chuk_mcp_ternary.catalog import ScaleCatalog

# Named scales used across the test modules, as letter lists
DIASEM = [0, 1, 0, 2, 0, 1, 0, 2, 0]
BLACKDYE = [2, 0, 1, 0, 2, 0, 1, 0, 2, 0]
PINEDYE = [0, 0, 1, 0, 1, 0, 0, 2]
DIAMECH_4SL = [1, 0, 2, 0, 2, 0, 1, 0, 2, 0, 2]
DIAMECH_4SR = [0, 2, 0, 1, 0, 2, 0, 2, 0, 1, 2]
DIASLEN_4SC = [2, 0, 1, 0, 2, 0, 2, 0, 1, 0, 2]
DIACHROME_5SC = [0, 2, 0, 2, 0, 1, 2, 0, 2, 0, 2, 1]

# 9L 6m 10s, a scale whose only guide frames are multiple
TWENTY_FIVE = [0, 0, 2, 1, 2, 0, 1, 2, 0, 2, 0, 1, 2, 0, 2, 1, 0, 2, 0, 2, 1, 0, 2, 1, 2]

# Its lattice scale is not a quasi-parallelogram
NOT_QUASI_PARALLELOGRAM = [0, 0, 0, 0, 2, 0, 1, 0, 0, 2, 0, 0, 0, 1, 2]


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def library_path() -> Path:
    """Path to the built-in scale library."""
    return Path(__file__).parent.parent / "src" / "chuk_mcp_ternary" / "catalog" / "library"


@pytest.fixture
def catalog(library_path: Path, temp_dir: Path) -> ScaleCatalog:
    """Scale catalog with the built-in library and an empty project directory."""
    return ScaleCatalog(library_path=library_path, project_path=temp_dir / "scales")
