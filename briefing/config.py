"""
Configuration loading for the News Briefing proxy.

Settings come from an optional JSON file, then environment variables on top.
The resulting ``Settings`` object is handed to each component explicitly.
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "config.json"

# Environment variable -> Settings field
_ENV_OVERRIDES = {
    "GOOGLE_API_KEY": "api_key",
    "HOST": "host",
    "PORT": "port",
    "LOG_LEVEL": "log_level",
}


class Settings(BaseModel):
    """Runtime configuration."""

    api_key: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 3000
    model: str = "gemini-2.5-flash"
    max_output_tokens: int = Field(default=1000, gt=0)
    cache_file: str = "ai_summary_cache.json"
    cache_ttl_hours: float = Field(default=4, gt=0)
    index_file: str = "index.html"
    log_level: str = "INFO"


def load_config(config_path: str) -> Dict[str, Any]:
    """Loads configuration from a JSON file."""
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        logger.warning("Config file not found at %s. Using defaults.", config_path)
        return {}


def load_settings(
    config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> Settings:
    """Builds Settings from the JSON config file and the environment."""
    env = os.environ if environ is None else environ
    path = config_path or env.get("BRIEFING_CONFIG", DEFAULT_CONFIG_FILENAME)

    values: Dict[str, Any] = dict(load_config(path))
    for var, field in _ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            values[field] = value

    return Settings(**values)
