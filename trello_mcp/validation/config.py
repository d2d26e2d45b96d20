"""
trello-mcp Configuration - Credential and settings loading.

This module provides the Config class for reading settings from the global
(~/.trello-mcp/config.yaml) and local (.trello-mcp/config.yaml) files and
the environment, and the immutable Credentials every Trello call needs.
"""

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_API_BASE = "https://api.trello.com/1"
DEFAULT_TIMEOUT = 30.0

API_KEY_ENV = "TRELLO_API_KEY"
TOKEN_ENV = "TRELLO_TOKEN"

API_KEY_URL = "https://trello.com/power-ups/admin"
TOKEN_URL = (
    "https://trello.com/1/authorize?expiration=never&scope=read,write"
    "&response_type=token&name=MCP-Server&key=YOUR_API_KEY"
)


class ConfigError(Exception):
    """Raised when there's a configuration error."""

    pass


class MissingCredentialsError(ConfigError):
    """Raised when the Trello API key or token is not configured."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(f"Missing Trello credentials: {', '.join(missing)}")

    def guidance(self) -> str:
        """Actionable instructions for obtaining the missing secrets."""
        return "\n".join([
            "Error: Required environment variables:",
            f"  {API_KEY_ENV} - Your Trello API key",
            f"  {TOKEN_ENV}   - Your Trello auth token",
            "",
            f"Get your API key from: {API_KEY_URL}",
            f"Generate a token from: {TOKEN_URL}",
        ])


class Credentials(BaseModel):
    """The two secrets appended to every Trello request."""

    model_config = ConfigDict(frozen=True)

    api_key: str
    token: str

    @field_validator("api_key", "token")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value

    def __repr__(self) -> str:
        return "Credentials(api_key='***', token='***')"

    __str__ = __repr__


class TrelloSettings(BaseModel):
    """Configuration for the Trello API."""

    api_key: Optional[str] = None
    token: Optional[str] = None
    api_base: str = DEFAULT_API_BASE
    timeout: float = DEFAULT_TIMEOUT


class LoggingSettings(BaseModel):
    """Configuration for logging."""

    level: str = "INFO"


class TrelloMCPConfig(BaseModel):
    """Complete trello-mcp configuration schema."""

    trello: TrelloSettings = Field(default_factory=TrelloSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class Config:
    """
    trello-mcp configuration manager.

    Handles loading, merging, and validating configuration from:
    - Global: ~/.trello-mcp/config.yaml
    - Local: .trello-mcp/config.yaml (project-specific)
    - Environment: TRELLO_API_KEY and TRELLO_TOKEN

    Local configuration overrides global configuration; the environment
    overrides both for the credentials.

    Example:
        >>> config = Config.load()
        >>> credentials = config.credentials()
    """

    GLOBAL_CONFIG_DIR = Path.home() / ".trello-mcp"
    LOCAL_CONFIG_DIR = Path(".trello-mcp")

    def __init__(
        self,
        global_config: Optional[Dict[str, Any]] = None,
        local_config: Optional[Dict[str, Any]] = None,
        environ: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize Config.

        Args:
            global_config: Global configuration dictionary.
            local_config: Local (project) configuration dictionary.
            environ: Environment mapping; defaults to ``os.environ``.
        """
        self._global_config = global_config or {}
        self._local_config = local_config or {}
        self._environ = os.environ if environ is None else environ
        self._merged: Optional[TrelloMCPConfig] = None

    @classmethod
    def load(cls) -> "Config":
        """
        Load configuration from default locations.

        Returns:
            Config instance with loaded configuration.
        """
        global_config = cls._load_yaml(cls.GLOBAL_CONFIG_DIR / "config.yaml")
        local_config = cls._load_yaml(cls._find_local_config())

        return cls(global_config=global_config, local_config=local_config)

    @classmethod
    def _load_yaml(cls, path: Optional[Path]) -> Dict[str, Any]:
        """Load YAML file if it exists."""
        if path is None or not path.exists():
            return {}

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config from {path}: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        return data

    @classmethod
    def _find_local_config(cls) -> Optional[Path]:
        """Find the local config file by walking up the directory tree."""
        current = Path.cwd()
        while current != current.parent:
            config_path = current / cls.LOCAL_CONFIG_DIR / "config.yaml"
            if config_path.exists():
                return config_path
            current = current.parent
        return None

    def get_merged_config(self) -> Dict[str, Any]:
        """Get the merged file configuration as a dictionary."""
        return self._deep_merge(self._global_config.copy(), self._local_config)

    @property
    def merged(self) -> TrelloMCPConfig:
        """Get the validated merged configuration."""
        if self._merged is None:
            try:
                self._merged = TrelloMCPConfig(**self.get_merged_config())
            except ValidationError as e:
                raise ConfigError(f"Invalid configuration: {e}")
        return self._merged

    @property
    def api_base(self) -> str:
        return self.merged.trello.api_base

    @property
    def timeout(self) -> float:
        return self.merged.trello.timeout

    @property
    def log_level(self) -> str:
        return self.merged.logging.level

    def credentials(self) -> Credentials:
        """
        Resolve the Trello credentials.

        Environment variables win over config files. Raises
        MissingCredentialsError naming whatever is absent or blank.
        """
        api_key = self._environ.get(API_KEY_ENV) or self.merged.trello.api_key or ""
        token = self._environ.get(TOKEN_ENV) or self.merged.trello.token or ""

        missing = []
        if not api_key.strip():
            missing.append(API_KEY_ENV)
        if not token.strip():
            missing.append(TOKEN_ENV)
        if missing:
            raise MissingCredentialsError(missing)

        return Credentials(api_key=api_key, token=token)

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries, with override taking precedence."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
