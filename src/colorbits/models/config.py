"""Application configuration model."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from colorbits.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".colorbits" / "config.json"

OutputFormat = Literal["bits", "levels", "json"]


class AppConfig(BaseModel):
    """Command line defaults and output settings."""

    default_order: str = Field(
        default="GRB",
        description="Component order used when --order is not given (e.g. GRB for WS2812)",
    )
    output_format: OutputFormat = Field(
        default="bits",
        description="How encoded bits are printed: bits (1/0), levels (H/L) or json",
    )
    group_channels: bool = Field(
        default=True, description="Separate the three channels with a space in text output"
    )
    high_symbol: str = Field(
        default="H", min_length=1, max_length=1, description="Symbol for a set bit in levels output"
    )
    low_symbol: str = Field(
        default="L", min_length=1, max_length=1, description="Symbol for a clear bit in levels output"
    )

    @field_validator("default_order")
    @classmethod
    def validate_default_order(cls, v: str) -> str:
        """Ensure the order name is registered."""
        from colorbits.ordering import list_orders

        name = v.upper()
        if name not in list_orders():
            raise ValueError(f"Unknown component order '{v}'")
        return name

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.colorbits/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
