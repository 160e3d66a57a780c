import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..chunking.engine import DEFAULT_CHUNK_SIZE


class Settings(BaseSettings):
    # Engine
    OXSHARE_CHUNK_SIZE: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        gt=0,
        description="Chunk size in bytes used when --chunk-size is not given",
    )

    # Observability & UI
    LOG_FORMAT: Literal["json", "plain", "auto"] = "auto"
    LOG_LEVEL: str = "info"
    NO_COLOR: bool = False  # Disable colored output

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings with config file -> env precedence."""
        config_data: Dict[str, Any] = {}

        if config_file:
            config_path: Optional[Path] = Path(config_file)
        else:
            # Auto-discover .oxshare.{yaml,yml,toml}
            for ext in ["yaml", "yml", "toml"]:
                config_path = Path(f".oxshare.{ext}")
                if config_path.exists():
                    break
            else:
                config_path = None

        if config_path and config_path.exists():
            if config_path.suffix in [".yaml", ".yml"]:
                import yaml  # type: ignore[import-untyped]

                with open(config_path) as f:
                    config_data = yaml.safe_load(f) or {}
            elif config_path.suffix == ".toml":
                import tomllib

                with open(config_path, "rb") as f:
                    config_data = tomllib.load(f)

        # Init kwargs outrank env vars and .env in pydantic-settings, so drop
        # any key either of them already sets.
        env_keys = {key.upper() for key in os.environ}
        env_file = cls.model_config.get("env_file")
        if isinstance(env_file, str) and Path(env_file).exists():
            env_keys |= {key.upper() for key in dotenv_values(env_file)}

        config_data = {
            key: value
            for key, value in config_data.items()
            if key.upper() not in env_keys
        }
        return cls(**config_data)
