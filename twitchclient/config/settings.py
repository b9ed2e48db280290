"""Configuration management for the Twitch client."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.twitch.tv/kraken"


class APIConfig(BaseModel):
    """Twitch API connection settings."""
    base_url: str = DEFAULT_BASE_URL
    # Sent as Client-ID header; without it Twitch rate limits aggressively
    client_id: str | None = None
    api_version: int = Field(default=3, ge=1)
    timeout: float = Field(default=30.0, gt=0)

    @property
    def accept_header(self) -> str:
        return f"application/vnd.twitchtv.v{self.api_version}+json"


class TwitchConfig(BaseModel):
    """Main client configuration."""
    api: APIConfig = Field(default_factory=APIConfig)

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None


class ConfigManager:
    """Manages configuration loading and saving."""

    DEFAULT_CONFIG_NAME = "twitchclient.yaml"

    def __init__(self, config_path: Path | None = None):
        """Initialize config manager."""
        self.config_path = config_path or self._get_default_config_path()
        self._config: TwitchConfig | None = None

    def load(self) -> TwitchConfig:
        """Load configuration from file or create default."""
        if self.config_path.exists():
            try:
                with open(self.config_path, encoding='utf-8') as f:
                    data = yaml.safe_load(f) or {}
                    self._config = TwitchConfig(**data)
            except Exception as e:
                logger.warning(f"Error loading config from {self.config_path}: {e}")
                logger.warning("Using default configuration")
                self._config = TwitchConfig()
        else:
            logger.info(f"Config file not found at {self.config_path}, creating default configuration")
            self._config = TwitchConfig()
            self.save()

        return self._config

    def save(self, config: TwitchConfig | None = None) -> None:
        """Save configuration to file."""
        config_to_save = config or self._config
        if config_to_save is None:
            raise ValueError("No configuration to save")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        data = config_to_save.model_dump()
        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, indent=2)

        self._config = config_to_save
        logger.info(f"Configuration saved to {self.config_path}")

    def get_config(self) -> TwitchConfig:
        """Get current configuration, loading if necessary."""
        if self._config is None:
            self.load()
        return self._config

    def _get_default_config_path(self) -> Path:
        """Get default configuration file path."""
        # Current directory first, then user config dir
        current_dir = Path.cwd() / self.DEFAULT_CONFIG_NAME
        if current_dir.exists():
            return current_dir

        config_dir = Path.home() / ".config" / "twitchclient"
        return config_dir / self.DEFAULT_CONFIG_NAME

    def create_sample_config(self, output_path: Path | None = None) -> None:
        """Create a sample configuration file with comments."""
        output_path = output_path or (Path.cwd() / "twitchclient_sample.yaml")

        sample_yaml = f"""# Twitch Client Configuration File

# API settings
api:
  base_url: "{DEFAULT_BASE_URL}"
  client_id: null     # Your application's client id, sent as Client-ID header
  api_version: 3      # Selects the vnd.twitchtv.v<N>+json media type
  timeout: 30         # Request timeout in seconds

# Logging
log_level: "INFO"
log_file: null  # Set to file path for file logging
"""

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(sample_yaml)

        logger.info(f"Sample configuration created at {output_path}")


def get_config() -> TwitchConfig:
    """Get the configuration from the default location."""
    return ConfigManager().get_config()


def load_config(config_path: Path | None = None) -> TwitchConfig:
    """Load configuration from specific path."""
    return ConfigManager(config_path).load()
