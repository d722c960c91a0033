"""
Configuration management for Foodie Find.

This module centralizes environment variable loading from the .env file at project root.
It should be imported early by the Streamlit entry point (streamlit_app/app.py) so that
.env is loaded before any other code accesses environment variables.

When .env does not exist, load_dotenv() is safe to call and will no-op.

Environment Variables:
- SPOONACULAR_BASE_URL: Optional, defaults to "https://api.spoonacular.com"
- SPOONACULAR_TIMEOUT: Optional, request timeout in seconds (default: 15)
- RECIPE_PAGE_SIZE: Optional, number of results per search (default: 12)
- FOODIE_DATA_DIR: Optional, directory for the API key and favorites files
  (default: ~/.foodie_find)
- FOODIE_COMPACT_BREAKPOINT: Optional, layout width in pixels below which the compact
  presentation is used (default: 768)
- LOG_LEVEL: Optional, defaults to "INFO"

# NOTE: The Spoonacular API key is deliberately NOT an environment variable. Users enter
    it in the app and it is kept in the data directory.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.spoonacular.com"
DEFAULT_TIMEOUT_SECONDS = 15.0
DEFAULT_PAGE_SIZE = 12
DEFAULT_COMPACT_BREAKPOINT = 768


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.
    
    Locates the project root by going up from this file's location
    (recipe_finder/config.py -> project root) and loads .env if it exists.
    Safe to call multiple times.
    """
    project_root = Path(__file__).resolve().parent.parent
    env_path = project_root / ".env"
    
    # override=False means existing env vars take precedence
    load_dotenv(env_path, override=False)


# Load .env file on module import
load_env_file()


def _positive_int(raw: str | None, default: int) -> int:
    try:
        value = int(raw) if raw is not None else default
    except ValueError:
        return default
    return value if value > 0 else default


class SpoonacularConfig:
    """Configuration for the Spoonacular recipe API."""
    
    @staticmethod
    def get_base_url() -> str:
        """
        Get the API base URL.
        
        Returns:
            Base URL with trailing slash removed (default: https://api.spoonacular.com)
        """
        return os.getenv("SPOONACULAR_BASE_URL", DEFAULT_BASE_URL).rstrip("/")
    
    @staticmethod
    def get_timeout() -> float:
        """
        Get the per-request timeout in seconds.
        
        Returns:
            Timeout in seconds (default: 15). Invalid values fall back to the default.
        """
        raw = os.getenv("SPOONACULAR_TIMEOUT")
        try:
            value = float(raw) if raw is not None else DEFAULT_TIMEOUT_SECONDS
        except ValueError:
            return DEFAULT_TIMEOUT_SECONDS
        return value if value > 0 else DEFAULT_TIMEOUT_SECONDS
    
    @staticmethod
    def get_page_size() -> int:
        """Number of recipes requested per search (default: 12)."""
        return _positive_int(os.getenv("RECIPE_PAGE_SIZE"), DEFAULT_PAGE_SIZE)


class StorageConfig:
    """Configuration for local persistence."""
    
    @staticmethod
    def get_data_dir() -> Path:
        """
        Get the directory holding the persisted API key and favorites.
        
        Returns:
            Path from FOODIE_DATA_DIR, or ~/.foodie_find when unset
        """
        raw = os.getenv("FOODIE_DATA_DIR")
        if raw:
            return Path(raw).expanduser()
        return Path.home() / ".foodie_find"


class LayoutConfig:
    """Configuration for responsive presentation."""
    
    @staticmethod
    def get_compact_breakpoint() -> int:
        """Layout width (px) below which overlays are rendered inline (default: 768)."""
        return _positive_int(os.getenv("FOODIE_COMPACT_BREAKPOINT"), DEFAULT_COMPACT_BREAKPOINT)


def get_log_level() -> int:
    """
    Get the configured log level.
    
    Returns:
        A logging level constant. Unknown names fall back to INFO.
    """
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """
    Configure root logging once for the app process.
    
    logging.basicConfig is a no-op when handlers already exist, so this is safe to call
    on every Streamlit rerun.
    """
    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
