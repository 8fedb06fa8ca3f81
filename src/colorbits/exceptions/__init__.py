"""
Custom exception hierarchy for colorbits.

## Exception Hierarchy

```
ColorBitsError (base)
├── OrderError
│   ├── MalformedOrderError
│   └── UnknownOrderError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ColorBitsError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

Reaching the end of a bit sequence is not an error: the iterators raise
`StopIteration` like any other Python iterator.

### Example: Unknown Order

```python
from colorbits.ordering import get_order

get_order("XYZ")
# User sees: "Unknown component order: 'XYZ'"
# Recovery hint: "Available orders: BGR, BRG, ... Run 'colorbits orders' ..."
```
"""

from .base import ColorBitsError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    ErrorContext,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)
from .ordering import MalformedOrderError, OrderError, UnknownOrderError

__all__ = [
    # Base
    "ColorBitsError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Ordering
    "MalformedOrderError",
    "OrderError",
    "UnknownOrderError",
    # Handlers
    "ErrorCollector",
    "ErrorContext",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
