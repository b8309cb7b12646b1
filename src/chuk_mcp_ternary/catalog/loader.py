"""
Scale catalog - discovers and loads named scales.

Scales can come from:
1. Built-in library (shipped with package)
2. Project scales (user's project/scales directory)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_ternary.core.words import least_mode
from chuk_mcp_ternary.models.catalog import CatalogScale, CatalogScaleMetadata

logger = logging.getLogger(__name__)


class ScaleCatalog:
    """
    Discovers and loads named scales.

    Scales are loaded from YAML files in the library and project directories.
    Project scales override library scales with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog.

        Args:
            library_path: Path to built-in scale library
            project_path: Path to project scales directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, CatalogScale] = {}

    def _scale_files(self) -> list[Path]:
        files: list[Path] = []
        if self.library_path.exists():
            files.extend(sorted(self.library_path.glob("*.yaml")))
        if self.project_path and self.project_path.exists():
            files.extend(sorted(self.project_path.glob("*.yaml")))
        return files

    def list_scales(self) -> list[CatalogScaleMetadata]:
        """
        List all available scales.

        Returns scales from both library and project, with project
        scales taking precedence.
        """
        scales: dict[str, CatalogScaleMetadata] = {}
        for path in self._scale_files():
            scale = self._load_scale_file(path)
            if scale:
                scales[scale.name] = CatalogScaleMetadata.from_scale(scale, str(path))
        return sorted(scales.values(), key=lambda s: s.name)

    def get_scale(self, name: str) -> CatalogScale | None:
        """
        Get a scale by name or alias.

        Project scales take precedence over library scales.

        Args:
            name: Scale name or alias

        Returns:
            CatalogScale if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            scale_file = directory / f"{name}.yaml"
            if scale_file.exists():
                scale = self._load_scale_file(scale_file)
                if scale:
                    self._cache[name] = scale
                    return scale

        # Aliases need a full scan
        for path in self._scale_files():
            scale = self._load_scale_file(path)
            if scale and name in scale.aliases:
                self._cache[name] = scale
                return scale

        return None

    def find_by_word(self, word: Sequence[int]) -> list[CatalogScale]:
        """Catalog scales that are modes of the given word."""
        target = least_mode(word)
        matches: dict[str, CatalogScale] = {}
        for path in self._scale_files():
            scale = self._load_scale_file(path)
            if scale and least_mode(scale.letters) == target:
                matches[scale.name] = scale
        return list(matches.values())

    def save_scale(self, scale: CatalogScale) -> Path:
        """
        Save a scale to the project directory.

        Args:
            scale: Scale to save

        Returns:
            Path to the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        dest_file = self.project_path / f"{scale.name}.yaml"
        data = scale.model_dump(by_alias=True)
        with open(dest_file, "w") as f:
            yaml.safe_dump(data, f, sort_keys=False)

        self._cache.pop(scale.name, None)
        return dest_file

    def copy_to_project(self, name: str) -> Path | None:
        """
        Copy a library scale to the project for customization.

        Args:
            name: Scale name

        Returns:
            Path to copied file, or None if not found
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / f"{name}.yaml"
        if not library_file.exists():
            return None

        self.project_path.mkdir(parents=True, exist_ok=True)

        dest_file = self.project_path / f"{name}.yaml"
        if dest_file.exists():
            raise ValueError(f"Scale already exists in project: {name}")

        dest_file.write_text(library_file.read_text())
        self._cache.pop(name, None)
        return dest_file

    def _load_scale_file(self, path: Path) -> CatalogScale | None:
        """Load a scale from a YAML file, skipping files that do not parse."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_scale(data, path)
        except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
            logger.warning(f"Skipping scale file {path}: {e}")
            return None

    def _parse_scale(self, data: dict[str, Any], path: Path) -> CatalogScale:
        """Parse a scale from YAML data."""
        if not isinstance(data, dict):
            raise ValueError("Scale file must contain a mapping")
        data = dict(data)
        data.setdefault("name", path.stem)
        return CatalogScale.model_validate(data)

    def clear_cache(self) -> None:
        """Clear the scale cache."""
        self._cache.clear()
