"""Shared utilities for Pydantic model persistence.

Stateless helpers for loading and saving Pydantic models to/from JSON
files. Used by AppConfig for the command line settings file.

Error Handling:
    Low-level Pydantic/IO errors are converted into ColorBitsError
    exceptions with recovery hints (see colorbits.exceptions.handlers).

Safety Features:
    - Automatic .bak backups before overwriting files
    - Atomic writes using temp file + rename
"""

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import Optional, TypeVar

from pydantic import BaseModel, ValidationError

from colorbits.exceptions import ConfigFileInvalidError, ConfigurationError, wrap_pydantic_error

logger = logging.getLogger(__name__)

# Type variable bound to Pydantic BaseModel
T = TypeVar("T", bound=BaseModel)


class PydanticPersistence:
    """
    Utility class providing shared Pydantic persistence operations.

    All methods are static and can be used without instantiation.

    Example Usage:
        ```python
        config = PydanticPersistence.load_json(
            path=Path("config.json"),
            model_type=AppConfig
        )

        PydanticPersistence.save_json(
            data=config,
            path=Path("config.json")
        )
        ```
    """

    @staticmethod
    def load_json(path: Path, model_type: type[T]) -> T:
        """
        Load and validate a Pydantic model from a JSON file.

        Args:
            path: Path to the JSON file to load
            model_type: The Pydantic model class to validate against

        Returns:
            Validated model instance

        Raises:
            FileNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the JSON syntax is invalid
            ConfigValidationError: If the JSON content fails Pydantic validation
        """
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            json_content = path.read_text(encoding="utf-8")

            if not json_content.strip():
                raise ConfigFileInvalidError(str(path), "File is empty")

            model = model_type.model_validate_json(json_content)

            logger.debug(f"Loaded {model_type.__name__} from {path}")
            return model

        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path)) from e

        except ConfigurationError:
            raise

        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Unexpected error loading {model_type.__name__} from {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unexpected error: {e}") from e

    @staticmethod
    def save_json(
        data: BaseModel,
        path: Path,
        indent: int = 2,
        create_parents: bool = True,
        backup: bool = True,
    ) -> None:
        """
        Save a Pydantic model to a JSON file with automatic backup and atomic write.

        Args:
            data: The Pydantic model instance to save
            path: Path where the file should be saved
            indent: JSON indentation level (default: 2 spaces)
            create_parents: Create parent directories if they don't exist (default: True)
            backup: Create .bak backup before overwriting existing file (default: True)

        Raises:
            OSError: If the file cannot be written (permission denied, disk full, etc.)
        """
        try:
            if create_parents:
                path.parent.mkdir(parents=True, exist_ok=True)

            if backup and path.exists():
                backup_path = path.with_suffix(path.suffix + ".bak")
                shutil.copy2(path, backup_path)
                logger.debug(f"Created backup: {backup_path}")

            json_content = data.model_dump_json(indent=indent)

            # Atomic write: write to temp file first, then rename
            temp_path = path.with_suffix(path.suffix + ".tmp")
            try:
                temp_path.write_text(json_content, encoding="utf-8")
                temp_path.replace(path)
                logger.debug(f"Saved {type(data).__name__} to {path}")
            finally:
                if temp_path.exists():
                    temp_path.unlink()

        except OSError as e:
            logger.error(f"OS error saving {type(data).__name__} to {path}: {e}")
            raise

    @staticmethod
    def load_json_or_default(
        path: Path, model_type: type[T], default_factory: Optional[Callable[[], T]] = None
    ) -> T:
        """
        Load a model from JSON, or return a default if the file doesn't exist.

        Args:
            path: Path to the JSON file
            model_type: The Pydantic model class
            default_factory: Optional callable that returns a default instance.
                           If None, calls model_type() to get defaults.

        Raises:
            ConfigFileInvalidError: If the file exists but has invalid JSON syntax
            ConfigValidationError: If the file exists but has invalid values

        Notes:
            Does not automatically save the default to disk.
        """
        try:
            return PydanticPersistence.load_json(path, model_type)
        except FileNotFoundError:
            logger.info(f"File not found: {path}, using default {model_type.__name__}")
            if default_factory:
                return default_factory()
            return model_type()

    @staticmethod
    def validate_json(path: Path, model_type: type[T]) -> tuple[bool, Optional[str]]:
        """
        Validate a JSON file against a Pydantic model.

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            PydanticPersistence.load_json(path, model_type)
            return True, None
        except FileNotFoundError:
            return False, f"File not found: {path}"
        except ConfigurationError as e:
            return False, e.user_message
