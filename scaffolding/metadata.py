"""Template descriptor loading.

A template may ship a ``gostrap.json`` at its root:

    {"description": "Minimal HTTP service", "author": "jane"}

A missing descriptor is fine and means "no metadata". A descriptor that is
present but broken is an error.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .errors import MetadataError

METADATA_FILE_NAME = "gostrap.json"


@dataclass
class TemplateMetadata:
    """Human-readable information about a template."""

    description: str = ""
    author: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TemplateMetadata":
        """Create from a decoded descriptor.

        Raises:
            ValueError: If a field is present but not a string.
        """
        values = {}
        for key in ("description", "author"):
            value = data.get(key, "")
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
            values[key] = value
        return cls(**values)

    def to_dict(self) -> dict[str, str]:
        return {"description": self.description, "author": self.author}


def read_metadata(
    template_root: Path,
    file_name: str = METADATA_FILE_NAME,
) -> TemplateMetadata | None:
    """Load the descriptor from a template directory.

    Args:
        template_root: Directory that may contain the descriptor
        file_name: Descriptor file name

    Returns:
        TemplateMetadata, or None if the directory has no descriptor

    Raises:
        MetadataError: If the descriptor cannot be read or decoded
    """
    metadata_path = Path(template_root) / file_name

    if not metadata_path.is_file():
        return None

    try:
        raw = metadata_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise MetadataError(metadata_path, f"cannot read file: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MetadataError(metadata_path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise MetadataError(metadata_path, "expected a JSON object")

    try:
        return TemplateMetadata.from_dict(data)
    except ValueError as e:
        raise MetadataError(metadata_path, str(e)) from e
