"""Loading and saving of API credentials."""

import json
import logging
import os
from pathlib import Path

from .models import Configuration, ConfigError, parse_bool

logger = logging.getLogger(__name__)

def get_base_dir() -> Path:
    """
    Get the base directory for storing configuration.

    The directory is determined by:
    1. Environment variable ONTRAPORT_HOME if set
    2. Otherwise, ~/.ontraport

    The directory is created if it does not exist.

    Returns:
        Path to the base directory
    """
    env_home = os.environ.get("ONTRAPORT_HOME")
    if env_home:
        base_dir = Path(env_home)
    else:
        base_dir = Path.home() / ".ontraport"

    base_dir.mkdir(parents=True, exist_ok=True)
    return base_dir


def credentials_path() -> Path:
    """Path of the stored credentials file."""
    return get_base_dir() / "credentials.json"


def save_configuration(config: Configuration) -> Path:
    """
    Save a Configuration to the credentials file.

    Args:
        config: Configuration to save

    Returns:
        Path to the saved file
    """
    path = credentials_path()

    try:
        with open(path, "w") as f:
            json.dump(config.to_dict(), f, indent=2)
        path.chmod(0o600)
        logger.debug(f"Saved credentials to {path}")
        return path
    except OSError as e:
        raise ConfigError(f"Failed to save credentials to {path}: {e}")


def _load_from_file() -> Configuration:
    path = credentials_path()

    if not path.exists():
        raise ConfigError(
            f"No ONTRAPORT credentials found. Set ONTRAPORT_API_ID and "
            f"ONTRAPORT_API_KEY or create {path}"
        )

    try:
        with open(path, "r") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {path}: {e}")

    try:
        return Configuration.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise ConfigError(f"Failed to parse credentials in {path}: {e}")


def load_configuration() -> Configuration:
    """
    Load a Configuration from the environment or the credentials file.

    ONTRAPORT_API_ID and ONTRAPORT_API_KEY take precedence; ONTRAPORT_DEBUG
    enables debug mode. If either credential variable is missing the
    credentials file under get_base_dir() is used instead.

    Returns:
        The loaded Configuration

    Raises:
        ConfigError: If no source provides both credentials or the file is invalid
    """
    api_id = os.environ.get("ONTRAPORT_API_ID")
    api_key = os.environ.get("ONTRAPORT_API_KEY")

    if api_id and api_key:
        debug_mode = parse_bool(os.environ.get("ONTRAPORT_DEBUG", ""))
        return Configuration(api_id=api_id, api_key=api_key, debug_mode=debug_mode)

    logger.warning("ONTRAPORT_API_ID/ONTRAPORT_API_KEY not set, reading credentials file")
    return _load_from_file()
