"""
Environment configuration loader with validation for the airline tycoon engine.
"""

import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv


class TycoonConfig(BaseModel):
    """Configuration model for the simulation engine with validation."""

    # Company setup
    company_name: str = Field(default="Tycoon Air", description="Name of the player's airline")
    starting_cash: float = Field(
        default=10_000_000, ge=0, description="Cash balance at game start"
    )

    # Game clock
    tick_interval_seconds: float = Field(
        default=0.1, gt=0, description="Real-time seconds between clock steps"
    )
    default_speed: int = Field(
        default=0, ge=0, le=3, description="Initial game speed (0=paused .. 3=fast)"
    )

    # Ledger
    history_days: int = Field(
        default=30, ge=1, description="Number of daily financial records to keep"
    )

    # Diagnostics
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes", "on")


def load_config(env_file: Optional[str] = None) -> TycoonConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        TycoonConfig: Validated configuration object

    Raises:
        ValueError: If configuration values are missing or invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    try:
        config_data: Dict[str, Any] = {
            "company_name": os.getenv("TYCOON_COMPANY_NAME", "Tycoon Air"),
            "starting_cash": float(os.getenv("TYCOON_STARTING_CASH", "10000000")),
            "tick_interval_seconds": float(os.getenv("TYCOON_TICK_INTERVAL_SECONDS", "0.1")),
            "default_speed": int(os.getenv("TYCOON_DEFAULT_SPEED", "0")),
            "history_days": int(os.getenv("TYCOON_HISTORY_DAYS", "30")),
            "debug": _env_flag("TYCOON_DEBUG", "false"),
            "log_level": os.getenv("TYCOON_LOG_LEVEL", "INFO"),
        }
        return TycoonConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")


# Global configuration instance
_config: Optional[TycoonConfig] = None


def get_config() -> TycoonConfig:
    """
    Get the global configuration instance, loading it if necessary.

    Returns:
        TycoonConfig: The global configuration object
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next ``get_config`` reloads it."""
    global _config
    _config = None
