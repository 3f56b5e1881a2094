"""File-based persistence for engagement configurations.

Configurations are stored as JSON with a small envelope so files can be
recognized and versioned:

    {
      "format": "pronav.engagement",
      "version": 1,
      "name": "baseline",
      "saved_at": "2026-10-18T12:00:00",
      "config": {"navigation_gain": 4.0, ...}
    }

Example:
    >>> from pronav.storage import save_config, load_config
    >>> save_config(EngagementConfig(navigation_gain=3.0), "n3.json", name="n3")
    >>> config = load_config("n3.json")
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from beartype import beartype

from pronav.simulation.config import EngagementConfig

FORMAT_NAME = "pronav.engagement"
FORMAT_VERSION = 1


@beartype
def config_to_json(config: EngagementConfig, name: str = "") -> str:
    """Serialize a configuration to a JSON string."""
    data: dict[str, Any] = {
        "format": FORMAT_NAME,
        "version": FORMAT_VERSION,
        "name": name,
        "saved_at": datetime.now().isoformat(),
        "config": config.to_dict(),
    }
    return json.dumps(data, indent=2)


@beartype
def config_from_json(json_str: str) -> EngagementConfig:
    """Deserialize a configuration from a JSON string.

    A bare mapping of config fields (without the envelope) is accepted too.

    Raises:
        ValueError: On an unknown format name, a non-integer version or a
            newer format version
    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    if "format" not in data:
        return EngagementConfig.from_dict(data)

    if data["format"] != FORMAT_NAME:
        raise ValueError(f"Unknown file format {data['format']!r}")
    version = data.get("version", FORMAT_VERSION)
    if not isinstance(version, int) or isinstance(version, bool):
        raise ValueError(f"Config format version must be an integer, got {version!r}")
    if version > FORMAT_VERSION:
        raise ValueError(
            f"Config format version {version} is newer than supported ({FORMAT_VERSION})"
        )
    return EngagementConfig.from_dict(data.get("config", {}))


@beartype
def save_config(config: EngagementConfig, path: str | Path, name: str = "") -> Path:
    """Write a configuration to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config_to_json(config, name=name or path.stem))
    return path


@beartype
def load_config(path: str | Path) -> EngagementConfig:
    """Read a configuration from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found at {path}")
    return config_from_json(path.read_text())
