"""CLI commands for colorbits."""

from .config import config
from .encode import encode
from .orders import orders

__all__ = ["config", "encode", "orders"]
