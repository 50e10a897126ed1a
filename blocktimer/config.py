import json
import logging
from pydantic import BaseModel, Field
from typing import Dict

from .constants import DEFAULT_TAG
from .logger import Logger
from .timer import BlockTimer

class ConsoleLoggingConfig(BaseModel):
    enabled: bool = True
    level: str = "DEBUG"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    def get_level(self) -> int:
        return getattr(logging, self.level.upper())

class FileLoggingConfig(ConsoleLoggingConfig):
    enabled: bool = False
    log_dir: str = "logs"
    filename: str = "blocktimer.log"
    max_bytes: int = 10485760  # 10MB
    backup_count: int = 5

class LoggingConfig(BaseModel):
    console: ConsoleLoggingConfig = Field(default_factory=ConsoleLoggingConfig)
    file: FileLoggingConfig = Field(default_factory=FileLoggingConfig)
    # logger name -> level, e.g. {"urllib3": "WARNING"}
    additional_loggers: Dict[str, str] = Field(default_factory=dict)

class TimerConfig(BaseModel):
    tag: str = DEFAULT_TAG

class ConfigModel(BaseModel):
    timer: TimerConfig = Field(default_factory=TimerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    debug: bool = False

class Config:
    """Configuration manager that loads and validates config from JSON."""

    def __init__(self, config_path: str = "config.json"):
        """Initialize configuration from a JSON file.

        Args:
            config_path: Path to the configuration JSON file
        """
        # Load and validate config using Pydantic
        config_data = self._load_config(config_path)
        self._config = ConfigModel(**config_data)

    def _load_config(self, config_path: str) -> dict:
        """Load configuration from JSON file."""
        try:
            with open(config_path, 'r') as f:
                config_data = json.load(f)
        except (OSError, ValueError) as e:
            raise RuntimeError(f"Failed to load config from {config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise RuntimeError(
                f"Failed to load config from {config_path}: expected a JSON object, got {type(config_data).__name__}"
            )
        return config_data

    def __getattr__(self, name: str):
        """Delegate attribute access to the Pydantic model."""
        if name == "_config":
            raise AttributeError(name)
        try:
            return getattr(self._config, name)
        except AttributeError:
            raise AttributeError(f"'Config' object has no attribute '{name}'")

    def setup_logging(self, app_name: str) -> logging.Logger:
        """Set up console and file logging from the logging section."""
        return Logger.setup_from_config(app_name, self)

    def create_timer(self, sink=None) -> BlockTimer:
        """Create a BlockTimer tagged from the timer section."""
        return BlockTimer.from_config(self._config.timer, sink=sink)
