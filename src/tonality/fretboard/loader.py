"""
Instrument loader - discovers and loads fretted instrument definitions.

Instruments can come from:
1. Built-in library (shipped with package)
2. Project instruments (user's project/instruments directory)
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from tonality.models.instrument import InstrumentDefinition, InstrumentMetadata

logger = logging.getLogger(__name__)


class InstrumentLoader:
    """
    Discovers and loads instrument definitions.

    Instruments are loaded from YAML files in the library and project
    directories. Project instruments override library instruments with the
    same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the instrument loader.

        Args:
            library_path: Path to built-in instrument library
            project_path: Path to project instruments directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, InstrumentDefinition] = {}

    def list_instruments(self) -> list[InstrumentMetadata]:
        """
        List all available instruments.

        Returns instruments from both library and project, with project
        instruments taking precedence.
        """
        instruments: dict[str, InstrumentMetadata] = {}

        for directory in (self.library_path, self.project_path):
            if directory is None or not directory.exists():
                continue
            for path in sorted(directory.glob("*.yaml")):
                definition = self._load_instrument_file(path)
                if definition:
                    instruments[definition.name] = InstrumentMetadata.from_definition(definition)

        return list(instruments.values())

    def get_instrument(self, name: str) -> InstrumentDefinition | None:
        """
        Get an instrument by name.

        Project instruments take precedence over library instruments.

        Args:
            name: Instrument name (the YAML file stem)

        Returns:
            InstrumentDefinition if found, None otherwise
        """
        if name in self._cache:
            return self._cache[name]

        for directory in (self.project_path, self.library_path):
            if directory is None:
                continue
            path = directory / f"{name}.yaml"
            if path.exists():
                definition = self._load_instrument_file(path)
                if definition:
                    self._cache[name] = definition
                    return definition

        logger.debug(f"Instrument not found: {name}")
        return None

    def _load_instrument_file(self, path: Path) -> InstrumentDefinition | None:
        """Load an instrument from a YAML file, skipping broken files."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            if not isinstance(data, dict):
                raise ValueError("expected a mapping at the top level")
            data.setdefault("name", path.stem)
            return InstrumentDefinition.model_validate(data)
        except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
            logger.warning(f"Skipping instrument file {path}: {e}")
            return None

    def clear_cache(self) -> None:
        """Clear the instrument cache."""
        self._cache.clear()
