"""Data models for colorbits."""

from .color import Color
from .enums import Component
from .config import AppConfig, OutputFormat

__all__ = [
    # Models
    "AppConfig",
    "Color",
    # Enums
    "Component",
    "OutputFormat",
]
