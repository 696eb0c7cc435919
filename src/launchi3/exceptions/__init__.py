"""
Custom exception hierarchy for launchi3.

## Exception Hierarchy

```
Launchi3Error (base)
├── ConfigurationError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
├── ParseHexError (also ValueError)
│   ├── InvalidHexLengthError
│   └── InvalidHexCharacterError
├── HardwareError
│   ├── HardwareConnectError
│   └── HardwareIOError
└── WindowManagerError
    ├── ManagerConnectError
    └── ManagerMessageError
```

## Usage

```python
from launchi3.exceptions import ManagerMessageError

raise ManagerMessageError("get_tree", original_error="socket closed")
```

Every error carries a `user_message` for the terminal, a `technical_message`
for the log file and an optional `recovery_hint`. There is no retry anywhere:
errors surface to the CLI, which prints them and exits with status 1.
"""

from .base import Launchi3Error
from .color import InvalidHexCharacterError, InvalidHexLengthError, ParseHexError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error
from .hardware import HardwareConnectError, HardwareError, HardwareIOError
from .manager import ManagerConnectError, ManagerMessageError, WindowManagerError

__all__ = [
    # Base
    "Launchi3Error",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Colors
    "InvalidHexCharacterError",
    "InvalidHexLengthError",
    "ParseHexError",
    # Hardware
    "HardwareConnectError",
    "HardwareError",
    "HardwareIOError",
    # Window manager
    "ManagerConnectError",
    "ManagerMessageError",
    "WindowManagerError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
]
