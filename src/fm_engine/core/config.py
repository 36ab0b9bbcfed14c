"""Configuration management for fm-engine."""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    log_format: str = "json"
    otel_enabled: bool = False
    otel_service_name: str = "fm-engine"

    follow_symlinks: bool = False
    terminal_candidates: list[str] = Field(
        default_factory=lambda: [
            "x-terminal-emulator",
            "gnome-terminal",
            "konsole",
            "xterm",
        ]
    )
    macos_iterm_path: str = "/Applications/iTerm.app"

    model_config = {
        "env_prefix": "FM_ENGINE_",
        "case_sensitive": False,
    }


settings = Settings()
