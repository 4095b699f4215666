"""Configuration management for the pass codec."""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from tket_pass_json import PROJECT_DIR
from tket_pass_json.compiler_pass.pass_codec.defs import DEFAULT_MAX_DEPTH

ENVIRONMENTS = ["prd", "acc", "dev", "local"]


class CodecConfig(BaseModel):
    """Limits and relaxations applied when decoding / writing pass documents."""

    max_depth: int = Field(
        default=DEFAULT_MAX_DEPTH,
        ge=1,
        description="Maximum number of nested pass envelopes accepted by the decoder",
    )
    allow_extra_fields: bool = Field(
        default=False,
        description="Skip unknown top-level fields of a pass envelope instead of rejecting them",
    )
    json_indent: Optional[int] = Field(default=None, ge=0, description="Indentation of written documents")

    @field_validator("allow_extra_fields", mode="before")
    @classmethod
    def parse_flag(cls, v):
        """Accept the usual env-file spellings of a boolean."""
        if isinstance(v, str):
            return v.strip().lower() in ("1", "true", "yes", "on")
        return v

    @classmethod
    def from_yaml_and_env(
        cls,
        config_path: str | Path | None = None,
        env: str = "local",
        env_dir: str | Path = "config",
    ) -> "CodecConfig":
        """Load configuration from an optional YAML file and environment files.

        Environment variables win over YAML values. Missing files are not an
        error: defaults are used instead.
        """
        if env not in ENVIRONMENTS:
            raise ValueError(f"Invalid environment: {env}")

        # Load environment-specific .env file
        env_file = Path(env_dir) / f".env.{env}"
        if env_file.exists():
            load_dotenv(env_file, override=True)
        else:
            # Fallback to root .env if exists
            load_dotenv(override=True)

        settings: dict[str, Any] = {}
        config_path = Path(config_path) if config_path else PROJECT_DIR / "project_config_tket_pass.yml"
        if config_path.exists():
            with open(config_path, encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f) or {}
            settings.update(yaml_config.get(env) or {})

        if os.getenv("TKET_PASS_MAX_DEPTH"):
            settings["max_depth"] = int(os.environ["TKET_PASS_MAX_DEPTH"])
        if os.getenv("TKET_PASS_ALLOW_EXTRA_FIELDS"):
            settings["allow_extra_fields"] = os.environ["TKET_PASS_ALLOW_EXTRA_FIELDS"]
        if os.getenv("TKET_PASS_JSON_INDENT"):
            settings["json_indent"] = int(os.environ["TKET_PASS_JSON_INDENT"])

        return cls(**settings)


# Singleton pattern for config
_config: Optional[CodecConfig] = None


def get_config(env: Optional[str] = None) -> CodecConfig:
    """Get or create configuration singleton."""
    global _config
    if _config is None:
        env = env or os.getenv("ENVIRONMENT", "local")
        _config = CodecConfig.from_yaml_and_env(env=env)
    return _config


def reset_config():
    """Reset configuration singleton (useful for testing)."""
    global _config
    _config = None
