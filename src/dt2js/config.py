"""Configuration management for dt2js."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="console", description="Log format ('console' or 'json')")
    file: Optional[Path] = Field(default=None, description="Log file path. Logs go to stderr when unset.")

    @field_validator("level")
    @classmethod
    def check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("format")
    @classmethod
    def check_format(cls, value: str) -> str:
        log_format = value.lower()
        if log_format not in {"console", "json"}:
            raise ValueError(f"Unknown log format: {value}")
        return log_format

class OutputConfig(BaseModel):
    """Configuration for how generated schemas are serialized."""

    indent: int = Field(default=2, ge=0, le=8, description="JSON indentation width; 0 writes compact JSON.")
    sort_keys: bool = Field(default=False, description="Sort object keys in the emitted JSON.")
    ensure_ascii: bool = Field(default=False, description="Escape non-ASCII characters in the emitted JSON.")


class Config(BaseSettings):
    """Main configuration for dt2js. Loads from environment variables prefixed with DT2JS_."""

    model_config = SettingsConfigDict(
        env_prefix='DT2JS_',
        env_nested_delimiter='__', # e.g., DT2JS_OUTPUT__INDENT
        extra='ignore',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_file(cls, file_path: Path) -> "Config":
        """Create configuration strictly from a JSON file.
        Environment variables are not layered on top.
        """
        with open(file_path) as f:
            config_data = json.load(f)
        return cls.model_validate(config_data)
