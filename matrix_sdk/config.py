"""Configuration loading for Matrix request builders.

All functions use ONLY stdlib.
"""

import json
import os
import sys
from pathlib import Path


def default_config_path() -> Path:
    """Return $MATRIX_CONFIG, or ~/.config/matrix/config.json if unset."""
    override = os.environ.get("MATRIX_CONFIG")
    if override:
        return Path(override)
    return Path.home() / ".config" / "matrix" / "config.json"


def load_config(
    path: str | Path | None = None,
    require_access_token: bool = False,
    require_homeserver: bool = True,
) -> dict:
    """Load Matrix config from a JSON file.

    Args:
        path: Config file to read (defaults to default_config_path())
        require_access_token: If True, require access_token field (for logout)
        require_homeserver: If False, homeserver may be missing (given elsewhere)

    Returns:
        dict with homeserver, and optionally access_token, user_id, bot_prefix

    Exits with error if config not found, unreadable or missing required fields.
    """
    config_path = Path(path) if path is not None else default_config_path()
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        print("Create it with:", file=sys.stderr)
        example = {"homeserver": "https://matrix.org"}
        if require_access_token:
            example["access_token"] = "syt_..."
        print(json.dumps(example, indent=2), file=sys.stderr)
        sys.exit(1)

    with open(config_path, encoding="utf-8") as f:
        try:
            config = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            print(f"Error: Invalid JSON in config {config_path}: {e}", file=sys.stderr)
            sys.exit(1)

    if not isinstance(config, dict):
        print(f"Error: Config must be a JSON object: {config_path}", file=sys.stderr)
        sys.exit(1)

    required = []
    if require_homeserver:
        required.append("homeserver")
    if require_access_token:
        required.append("access_token")

    missing = [k for k in required if k not in config]
    if missing:
        print(f"Error: Config missing required fields: {', '.join(missing)}", file=sys.stderr)
        sys.exit(1)

    return config
