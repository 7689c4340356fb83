"""
Interval catalog - discovers and loads named intervals.

Named intervals can come from:
1. Built-in library (shipped with package)
2. Project catalog (user's project/intervals directory)

Each YAML file holds a list of entries under an `intervals` key:

    intervals:
      - name: tritone
        notation: A4
        aliases: [augmented fourth]
        description: Three whole tones
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_intervals.constants import ErrorMessages
from chuk_mcp_intervals.core.errors import DomainError
from chuk_mcp_intervals.core.notation import parse_signed_interval
from chuk_mcp_intervals.core.signed_interval import SignedInterval
from chuk_mcp_intervals.models.catalog import NamedInterval

logger = logging.getLogger(__name__)


class IntervalCatalog:
    """
    Discovers and loads named interval definitions.

    Entries are loaded from YAML files in the library and project directories.
    Project entries override library entries with the same name.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog.

        Args:
            library_path: Path to the built-in catalog
            project_path: Path to the project catalog directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._cache: dict[str, NamedInterval] | None = None

    def list_intervals(self) -> list[NamedInterval]:
        """
        List all named intervals, ordered by name.

        Returns entries from both library and project, with project
        entries taking precedence.
        """
        return sorted(self._entries().values(), key=lambda entry: entry.name)

    def get(self, name: str) -> NamedInterval | None:
        """
        Get a named interval by name or alias (case-insensitive).

        Args:
            name: Catalog name or alias

        Returns:
            NamedInterval if found, None otherwise
        """
        entries = self._entries()
        key = " ".join(name.split()).lower()
        if key in entries:
            return entries[key]
        for entry in entries.values():
            if entry.matches(name):
                return entry
        return None

    def resolve(self, text: str) -> SignedInterval:
        """
        Resolve a catalog name, alias or interval shorthand.

        Catalog names win over shorthand.

        Raises:
            DomainError: if text is neither a known name nor valid shorthand
        """
        entry = self.get(text)
        if entry is not None:
            return entry.interval
        try:
            return parse_signed_interval(text)
        except DomainError as e:
            raise DomainError(
                e.kind, ErrorMessages.NAMED_INTERVAL_NOT_FOUND.format(name=text)
            ) from e

    def clear_cache(self) -> None:
        """Clear the catalog cache."""
        self._cache = None

    def _entries(self) -> dict[str, NamedInterval]:
        if self._cache is not None:
            return self._cache

        entries: dict[str, NamedInterval] = {}

        # Load library entries
        if self.library_path.exists():
            for path in sorted(self.library_path.glob("*.yaml")):
                for entry in self._load_catalog_file(path):
                    entries[entry.name] = entry

        # Load project entries (override library)
        if self.project_path and self.project_path.exists():
            for path in sorted(self.project_path.glob("*.yaml")):
                for entry in self._load_catalog_file(path):
                    entries[entry.name] = entry

        self._cache = entries
        return entries

    def _load_catalog_file(self, path: Path) -> list[NamedInterval]:
        """Load the entries of a YAML file, skipping the file if it is malformed."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
            return self._parse_catalog(data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError, ValueError) as e:
            logger.warning(f"Skipping interval catalog {path}: {e}")
            return []

    def _parse_catalog(self, data: dict[str, Any] | None) -> list[NamedInterval]:
        """Parse catalog entries from YAML data."""
        if not data:
            return []
        if not isinstance(data, dict):
            raise TypeError("Catalog file must be a mapping with an 'intervals' list")
        return [NamedInterval(**item) for item in data.get("intervals", [])]
