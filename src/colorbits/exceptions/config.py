"""Errors raised while loading or validating the config file."""

from typing import Any, Optional

from .base import ColorBitsError


class ConfigurationError(ColorBitsError):
    """The config file cannot be used."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is not valid JSON (or is empty)."""

    def __init__(self, file_path: str, parse_error: str):
        lowered = parse_error.lower()
        if "trailing comma" in lowered:
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Remove the comma after the last entry in {file_path}"
        else:
            user_msg = "Configuration file is not valid JSON"
            recovery = (
                f"Fix or delete {file_path}.\n"
                "'colorbits config reset --yes' writes a fresh file with defaults"
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"JSON parse error in {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A config field holds a value the settings model rejects."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        hints = [f"Set '{field}' with 'colorbits config set' or edit the file by hand"]
        if file_path:
            hints.append(f"Config file: {file_path}")
        if "order" in field:
            hints.append("Run 'colorbits orders' to see valid component orders")
        elif "format" in field:
            hints.append("Valid output formats: bits, levels, json")

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Config validation failed for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint="\n".join(hints),
        )
        self.field = field
        self.value = value
        self.file_path = file_path
