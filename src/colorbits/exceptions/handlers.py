"""
Centralized error handling utilities.

Each layer translates errors to be more useful at the next level up:

```
┌─────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
│  - Logs to file with --debug        │
└─────────────────────────────────────┘
                  ↑
                  │ ColorBitsError
                  │
┌─────────────────────────────────────┐
│  APPLICATION LAYER                  │
│  - Order registry, persistence      │
│  - Converts to ColorBitsError       │
└─────────────────────────────────────┘
                  ↑
                  │ ValidationError, OSError, etc.
                  │
┌─────────────────────────────────────┐
│  LOW LEVEL (pydantic, file I/O)     │
└─────────────────────────────────────┘
```

### Handling Patterns

| Pattern | Code |
|---------|------|
| Config validation | `raise wrap_pydantic_error(e, str(path)) from e` |
| Try multiple ops, collect errors | `collector = collect_errors("check orders"); with collector.try_operation(...): ...` |
| Critical section with auto-logging | `with ErrorContext("save config"): ...` |
"""

import logging
from typing import Optional

from .base import ColorBitsError
from .config import ConfigFileInvalidError, ConfigValidationError


logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("save config") as ctx:
            config.save(path)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and handle any exceptions.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, ColorBitsError):
            self.logger.error(
                f"Failed to {self.operation}: {exc_val.technical_message}"
            )
        else:
            self.logger.error(
                f"Failed to {self.operation}: {exc_val}",
                exc_info=True
            )

        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: str) -> ColorBitsError:
    """
    Convert Pydantic validation errors to colorbits exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Invalid JSON syntax rather than invalid values
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            reason = first_error.get('msg', 'validation failed')
            value = first_error.get('input', None)

            return ConfigValidationError(
                field=field,
                value=value,
                error_msg=reason,
                file_path=file_path
            )
        elif errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                msg = err.get('msg', 'validation failed')
                error_lines.append(f"  - {field}: {msg}")

            combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=combined_msg,
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ColorBitsError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """
    Create an error collector for batch operations.

    Example:
        ```python
        collector = collect_errors("check orders")

        for name, order in list_orders().items():
            with collector.try_operation(f"check {name}"):
                validate_order(order)

        if collector.has_errors:
            print(collector.get_summary())
        ```
    """
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Collects multiple errors during batch operations.

    Allows operations to continue even if some fail, then
    report all failures at once.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, Exception]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        """Check if any errors were collected."""
        return len(self.errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of errors collected."""
        return len(self.errors)

    def try_operation(self, sub_operation: str):
        """
        Context manager for a single operation within the batch.

        Only ColorBitsError is collected; anything else propagates.
        """
        return self._OperationContext(self, sub_operation)

    def get_summary(self) -> str:
        """
        Get a summary of collected errors.

        Returns:
            Multi-line summary string
        """
        if not self.has_errors:
            return f"All operations completed successfully ({self.success_count} total)"

        summary = f"Failed {self.error_count} of {self.error_count + self.success_count} operations:\n"
        for sub_op, error in self.errors:
            if isinstance(error, ColorBitsError):
                summary += f"  - {sub_op}: {error.user_message}\n"
            else:
                summary += f"  - {sub_op}: {error}\n"

        return summary.rstrip()

    class _OperationContext:
        """Internal context manager for individual operations."""

        def __init__(self, collector: "ErrorCollector", sub_operation: str):
            self.collector = collector
            self.sub_operation = sub_operation

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_type is None:
                self.collector.success_count += 1
                return False

            if not isinstance(exc_val, ColorBitsError):
                return False

            logger.debug(f"{self.collector.operation}: {self.sub_operation} failed: {exc_val}")
            self.collector.errors.append((self.sub_operation, exc_val))
            return True
