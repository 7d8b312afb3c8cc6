from __future__ import annotations

from pathlib import Path

import dotenv
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from theme_purge_tools.errors import ConfigError


class Settings(BaseSettings):
    # injected by GitHub Actions
    github_repository: str = Field(min_length=1, validation_alias="GITHUB_REPOSITORY")
    github_ref_name: str = Field(min_length=1, validation_alias="GITHUB_REF_NAME")

    # purge api
    purge_api_url: str = "https://purge.jsdelivr.net/"
    status_check_interval: float = Field(default=1.0, ge=0)
    max_status_checks: int = Field(default=60, gt=0)
    http_timeout: float = Field(default=30.0, gt=0)

    themes_root: Path = Path(".")

    # debug
    verbose: bool = False

    model_config = SettingsConfigDict(
        env_file=dotenv.find_dotenv(usecwd=True),
        env_prefix="theme_purge_",
        extra="ignore",
    )


def load_settings(**overrides) -> Settings:
    """
    Load settings from the environment once.
    Overrides that are None are ignored. Every missing or invalid
    input is reported in a single ConfigError.
    """
    values = {}
    for name, value in overrides.items():
        if value is None:
            continue
        # env sourced fields are keyed by their alias
        alias = Settings.model_fields[name].validation_alias
        values[alias if isinstance(alias, str) else name] = value

    try:
        return Settings(**values)
    except ValidationError as e:
        problems = []
        for err in e.errors():
            name = ".".join(str(part) for part in err["loc"])
            if err["type"] == "missing":
                problems.append(f"{name} must be set")
            else:
                problems.append(f"{name}: {err['msg']}")
        raise ConfigError(problems) from e
