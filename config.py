from enum import Enum
from pathlib import Path
from typing import Literal, get_args

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Env(Enum):
    local = "local"
    dev = "dev"
    prod = "prod"


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class OutputFormat(Enum):
    text = "text"
    markdown = "markdown"


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ONION_")

    env: Env = Env.local
    html_dir: Path = Path(__file__).parent / "app" / "templates"
    log_level: LogLevel = "WARNING"
    output_format: OutputFormat = OutputFormat.text

    # Fabrication knobs. A fixed seed makes every run reproducible.
    seed: int | None = None
    session_valid_probability: float = Field(default=0.8, ge=0, le=1)
    user_failure_probability: float = Field(default=0.5, ge=0, le=1)
    recipe_failure_probability: float = Field(default=0.5, ge=0, le=1)
    ingredient_failure_probability: float = Field(default=0.0, ge=0, le=1)
    latency: float = Field(default=0.0, ge=0)
