"""Reading of package.json style manifests."""

import json
from pathlib import Path
from typing import Any

MANIFEST_NAME = "package.json"


class ManifestError(ValueError):
    """Raised when a manifest is absent or is not a valid JSON object."""


def read_manifest(path: Path) -> dict[str, Any]:
    """Read and parse a JSON manifest.

    Args:
        path: Path to the JSON file.

    Returns:
        The parsed JSON object.

    Raises:
        ManifestError: If the file is missing, unreadable, not valid JSON,
            or does not contain a JSON object.
    """
    try:
        with open(path, encoding="utf-8-sig") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestError(f"Manifest not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Expected a JSON object in {path}")

    return data
