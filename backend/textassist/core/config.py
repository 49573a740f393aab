"""
Core configuration module for the TextAssist completion service.
Loads application configuration from a YAML file and provider settings from
environment variables (and an optional .env file).
"""

import os
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

import yaml
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROVIDER = "mock"


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", "3000"))
    debug: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    file: str = "app.log"
    level: str = os.getenv("LOG_LEVEL", "INFO")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_size: int = 10  # MB
    backup_count: int = 5


class AppConfig(BaseModel):
    """Main application configuration.

    Provider selection and credentials are not part of the YAML file; they come
    from the environment (see ProviderSettings).
    """

    server: ServerConfig = ServerConfig()
    logging: LoggingConfig = LoggingConfig()


class ProviderConfig(BaseModel):
    """
    Resolved provider selection and credentials.

    Immutable once built. The adapter receives it by parameter and never reads
    the environment itself.
    """

    model_config = ConfigDict(frozen=True)

    selector: str = DEFAULT_PROVIDER
    credentials: Mapping[str, Optional[str]] = Field(default_factory=dict, validate_default=True)

    @field_validator("credentials")
    @classmethod
    def read_only_credentials(cls, value: Mapping[str, Optional[str]]) -> Mapping[str, Optional[str]]:
        return MappingProxyType(dict(value))

    @field_serializer("credentials")
    def serialize_credentials(self, value: Mapping[str, Optional[str]]) -> dict:
        return dict(value)

    def credential(self, provider: str) -> Optional[str]:
        """Return the secret for a provider, or None when unset or blank."""
        value = self.credentials.get(provider)
        if value is None or not value.strip():
            return None
        return value


class ProviderSettings(BaseSettings):
    """Provider environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ai_provider: str = Field(default=DEFAULT_PROVIDER, validation_alias="AI_PROVIDER")
    openai_api_key: Optional[str] = Field(default=None, validation_alias="OPENAI_API_KEY")
    hf_token: Optional[str] = Field(default=None, validation_alias="HF_TOKEN")
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GEMINI_TOKEN"),
    )

    def to_provider_config(self) -> ProviderConfig:
        return ProviderConfig(
            selector=self.ai_provider,
            credentials={
                "openai": self.openai_api_key,
                "huggingface": self.hf_token,
                "gemini": self.gemini_api_key,
            },
        )


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent.parent


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to the configuration file. If None, uses default location.

    Returns:
        AppConfig instance with loaded configuration.
    """
    if config_path is None:
        config_path = os.environ.get("TEXTASSIST_CONFIG")
        if config_path is None:
            config_path = get_project_root() / "config.yaml"

    config_path = Path(config_path)

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f) or {}
            return AppConfig(**config_data)

    return AppConfig()


def load_provider_config() -> ProviderConfig:
    """Resolve the provider configuration from the environment."""
    return ProviderSettings().to_provider_config()


# Global configuration instances
_config: Optional[AppConfig] = None
_provider_config: Optional[ProviderConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def get_provider_config() -> ProviderConfig:
    """Get the process-wide provider configuration, resolved on first use."""
    global _provider_config
    if _provider_config is None:
        _provider_config = load_provider_config()
    return _provider_config


def get_log_path() -> Path:
    """
    Get the absolute path to the log file.

    Supports both container and local development modes:
    - Container: $LOGS_DIR/app.log
    - Local: project_root/logs/app.log
    """
    config = get_config()

    logs_dir_env = os.environ.get("LOGS_DIR")

    if logs_dir_env:
        log_dir = Path(logs_dir_env)
    else:
        log_dir = get_project_root() / "logs"

    log_dir.mkdir(parents=True, exist_ok=True)

    # Use only the filename from config so logs never go outside logs/
    name = Path(config.logging.file).name or "app.log"
    return log_dir / name
