"""
Custom exception hierarchy for colorconverter.

The conversion API reports malformed colors by returning ``None`` (or an
empty palette, or ``False``); it does not raise. These exceptions are for
the layers around it: the command line turns a missing result into an
``InvalidColorError``, and configuration loading raises
``ConfigurationError`` subclasses.

## Exception Hierarchy

```
ColorConverterError (base)
├── InvalidColorError
├── UnsupportedFormatError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All exceptions carry `user_message`, `technical_message` and
`recovery_hint`.

### Example

```python
from colorconverter.exceptions import InvalidColorError

raise InvalidColorError("#GG5733")

# User sees: "Invalid color: '#GG5733'"
# Recovery hint lists the accepted formats
```
"""

from .base import ColorConverterError
from .color import InvalidColorError, UnsupportedFormatError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, wrap_pydantic_error

__all__ = [
    # Base
    "ColorConverterError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Color
    "InvalidColorError",
    "UnsupportedFormatError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
]
