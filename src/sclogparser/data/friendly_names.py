"""Friendly display names for raw asset codes."""

import json
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from sclogparser.config.logging import get_logger
from sclogparser.config.paths import get_default_names_path
from sclogparser.parser.patterns import ID_SUFFIX_PATTERN

logger = get_logger()


def strip_id_suffix(raw: str) -> str:
    """Remove a trailing "_<digits>" instance id from an asset code."""
    return ID_SUFFIX_PATTERN.sub("", raw)


class FriendlyNames:
    """
    Immutable, case-insensitive raw-code -> display-name table.

    Reloading builds a new instance; existing instances never change, so a
    renderer can hold one for a whole pass.
    """

    def __init__(self, table: Optional[Mapping[str, str]] = None) -> None:
        folded = {str(k).casefold(): str(v) for k, v in (table or {}).items()}
        self._table = MappingProxyType(folded)

    @classmethod
    def empty(cls) -> "FriendlyNames":
        return cls()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "FriendlyNames":
        """
        Load a table from a JSON object file.

        Args:
            path: JSON file mapping raw codes to names (default: bundled table)

        Returns:
            Loaded table; empty if the file is missing or unreadable
        """
        if path is None:
            path = get_default_names_path()

        if not path.exists():
            logger.debug(f"No friendly-name table at {path}")
            return cls.empty()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to load friendly names from {path}: {e}")
            return cls.empty()

        if not isinstance(data, dict):
            logger.error(f"Friendly-name file {path} must contain a JSON object")
            return cls.empty()

        names = cls(data)
        logger.debug(f"Loaded {len(names)} friendly names from {path}")
        return names

    def with_overrides(self, overrides: Mapping[str, str]) -> "FriendlyNames":
        """Return a new table where entries from overrides win."""
        merged = dict(self._table)
        merged.update({str(k).casefold(): str(v) for k, v in overrides.items()})
        return FriendlyNames(merged)

    def resolve(self, raw: str) -> str:
        """
        Get the display name for a raw code.

        The trailing numeric id is stripped before lookup. On a miss the
        stripped code is returned unchanged (underscores kept).
        """
        if not raw or not raw.strip():
            return raw or ""

        cleaned = strip_id_suffix(raw)
        return self._table.get(cleaned.casefold(), cleaned)

    __call__ = resolve

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, raw: object) -> bool:
        return isinstance(raw, str) and strip_id_suffix(raw).casefold() in self._table
