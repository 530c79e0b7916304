"""
Configuration loader with defaults.
"""
import copy
from pathlib import Path
from typing import Any, Dict, Optional
import logging

import yaml

from .io_utils import load_yaml

logger = logging.getLogger(__name__)

# Default location for the application-wide settings
DEFAULT_CONFIG_PATH = Path("config/default_config.yaml")


class Config:
    """
    Configuration container for the scorer, game store and history view.
    """

    DEFAULTS = {
        "game": {
            "game_mode": "501",  # "301" or "501"
            "finish_mode": "double",  # "double" or "single"
            "legs": 1,
        },

        "storage": {
            "games_dir": "data/games",
            "fetch_limit": 200,  # Games loaded for ranking/history
        },

        "history": {
            "language": "en",  # Month name table, see stats.history.MONTH_NAMES
            "timezone": "UTC",
        },
    }

    def __init__(self, config_path: Optional[Path] = None):
        """
        Load configuration from file or use defaults.

        Args:
            config_path: Path to config YAML (None = use defaults)
        """
        self.data = copy.deepcopy(self.DEFAULTS)

        if config_path and Path(config_path).exists():
            try:
                user_config = load_yaml(Path(config_path))
                if isinstance(user_config, dict):
                    self._merge_config(user_config)
                    logger.info(f"Configuration loaded from {config_path}")
                else:
                    logger.warning(f"Config {config_path} is not a mapping, using defaults")
            except (OSError, yaml.YAMLError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to load config: {e}, using defaults")
        else:
            logger.info("Using default configuration")

    def _merge_config(self, user_config: Dict[str, Any]) -> None:
        """Merge user config with defaults."""
        for section, values in user_config.items():
            if section in self.data and isinstance(values, dict):
                self.data[section].update(values)
            else:
                self.data[section] = values

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """Get config value."""
        return self.get_section(section).get(key, default)

    def get_section(self, section: str) -> Dict[str, Any]:
        """Get entire config section (empty if missing or not a mapping)."""
        values = self.data.get(section, {})
        return values if isinstance(values, dict) else {}
