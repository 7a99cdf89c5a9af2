from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from formcheck.core.errors import (
    AppError,
    Ok,
    Result,
    file_not_found,
    file_read_error,
    invalid_format,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FORMCHECK_", env_file=".env", extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for structured JSON, False for colored console

    # Custom-data key that marks a control as required when it has no
    # native "required" property (radio groups, check boxes)
    REQUIRED_MARKER_KEY: str = "required"

    # Property whose binding is reported for an invalid control
    BINDING_PROPERTY: str = "value"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_control_kinds(path: str | Path) -> Result[tuple[str, ...], AppError]:
    """Read custom control kind names from a YAML file.

    Accepts either a bare list of kind names or a mapping with a
    ``controls`` list. The returned tuple is meant to be passed per call
    as ``custom_kinds``.
    """
    path = Path(path)
    if not path.is_file():
        return file_not_found(str(path), origin="config")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        return file_read_error(str(path), e, origin="config")

    if isinstance(data, dict):
        data = data.get("controls")
    if data is None:
        return Ok(())
    if not isinstance(data, list) or not all(isinstance(k, str) and k for k in data):
        return invalid_format("controls", "list of control kind names", type(data).__name__, origin="config")
    return Ok(tuple(data))
