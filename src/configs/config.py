# src/configs/config.py
import yaml
from pathlib import Path
from functools import lru_cache


class Config:
    """
    Configuration files for the calendar venue tools.
    """

    # 1. Setup Base Paths
    # This points to src/configs/
    CONFIG_DIR = Path(__file__).parent.resolve()
    # This points to the project root
    PROJECT_ROOT = CONFIG_DIR.parent.parent

    # 2. Define File Paths
    VENUE_CONFIG_PATH = CONFIG_DIR / "venues.yaml"

    @classmethod
    @lru_cache
    def load_venue_config(cls) -> dict:
        """Loads the YAML venue display configuration."""
        if not cls.VENUE_CONFIG_PATH.exists():
            raise FileNotFoundError(f"Missing config at {cls.VENUE_CONFIG_PATH}")

        with open(cls.VENUE_CONFIG_PATH, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    @classmethod
    def get_venue_config_path(cls) -> Path:
        """Returns the absolute path to the venue YAML config."""
        return cls.VENUE_CONFIG_PATH
