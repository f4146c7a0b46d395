"""
Paginated list settings management
Loads and validates settings from settings.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger("PaginatedList.Settings")


class ListSettings(BaseModel):
    """Pagination-related settings"""
    model_config = ConfigDict(validate_assignment=True)

    items_per_page: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Expected number of items per page (informational, 1-1000)"
    )
    initial_page: int = Field(
        default=1,
        ge=1,
        description="First page number requested from the fetch function"
    )
    total_pages_from_api: int = Field(
        default=1,
        ge=0,
        description="Total number of pages reported by the data source"
    )
    trigger_distance: float = Field(
        default=200.0,
        ge=0,
        description="Distance from the bottom at which the next page is requested"
    )
    fetch_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Seconds before an in-flight fetch is failed (None disables)"
    )


class WindowSettings(BaseModel):
    """Demo window settings"""
    model_config = ConfigDict(validate_assignment=True)

    default_width: int = Field(default=360, ge=100, le=4000)
    default_height: int = Field(default=640, ge=100, le=4000)


class Settings(BaseModel):
    """Main settings model"""
    model_config = ConfigDict(validate_assignment=True)

    pagination: ListSettings = Field(default_factory=ListSettings)
    window: WindowSettings = Field(default_factory=WindowSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to ./settings.yml
        """
        if config_path is None:
            config_path = Path("settings.yml")

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        try:
            if not self.config_path.exists():
                logger.info(f"Settings file not found at {self.config_path}, using defaults")
                return Settings()

            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)

            if config_data is None:
                logger.info("Settings file is empty, using defaults")
                return Settings()

            settings = Settings(**config_data)
            logger.info(f"Loaded settings from {self.config_path}")
            logger.debug(f"  - Items per page: {settings.pagination.items_per_page}")
            return settings

        except yaml.YAMLError as e:
            logger.warning(f"Error parsing settings YAML: {e}; using default settings")
            return Settings()
        except ValidationError as e:
            logger.warning(f"Invalid settings in {self.config_path}: {e}; using default settings")
            return Settings()
        except (OSError, TypeError) as e:
            logger.warning(f"Error loading settings: {e}; using default settings")
            return Settings()

    def reload(self):
        """Reload settings from file"""
        self.settings = self._load_settings()

    @property
    def pagination(self) -> ListSettings:
        return self.settings.pagination

    @property
    def items_per_page(self) -> int:
        """Get the items per page setting"""
        return self.settings.pagination.items_per_page

    @property
    def initial_page(self) -> int:
        return self.settings.pagination.initial_page

    @property
    def total_pages_from_api(self) -> int:
        return self.settings.pagination.total_pages_from_api

    @property
    def trigger_distance(self) -> float:
        """Get the scroll trigger distance setting"""
        return self.settings.pagination.trigger_distance

    @property
    def fetch_timeout(self) -> Optional[float]:
        return self.settings.pagination.fetch_timeout

    def update_settings(self, **kwargs):
        """Update settings and save to file

        Raises:
            ValidationError: an updated value is invalid; nothing is applied or saved
        """
        config_data = self.settings.model_dump()
        for key, value in kwargs.items():
            # Nested settings like 'pagination.items_per_page'
            parts = key.split('.')
            section = config_data
            for part in parts[:-1]:
                section = section[part]
            section[parts[-1]] = value

        self.settings = Settings.model_validate(config_data)
        self._save_settings()

    def _save_settings(self):
        """Save current settings to YAML file"""
        config_data = self.settings.model_dump()
        with open(self.config_path, 'w') as f:
            yaml.dump(config_data, f, default_flow_style=False)


_settings_manager: Optional[SettingsManager] = None


def get_settings() -> SettingsManager:
    """Get the global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager
