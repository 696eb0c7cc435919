"""Device adapter registry.

Maps adapter names (from devices.json) to concrete device-specific classes.
Adapters translate between the generic device protocols and hardware-specific
MIDI messages, note mappings, and LED control.
"""

from typing import Any

# (MapperClass, OutputClass); constructors are checked where registry.py calls them
Adapter = tuple[Any, Any]


# Format: "AdapterName": (MapperClass, OutputClass)
ADAPTERS: dict[str, Adapter] = {}


def register_adapter(name: str, mapper_class: Any, output_class: Any) -> None:
    """
    Register a device adapter.

    Args:
        name: Adapter name (matches "implements" field in devices.json)
        mapper_class: Mapper class (must have __init__(config: DeviceConfig))
        output_class: Output class (must have __init__(sender, config))
    """
    ADAPTERS[name] = (mapper_class, output_class)


def get_adapter(name: str) -> Adapter | None:
    """
    Get adapter classes by name.

    Returns:
        Tuple of (MapperClass, OutputClass) or None if not found
    """
    return ADAPTERS.get(name)


def _register_builtin_adapters() -> None:
    """Register built-in adapters. Called on module import."""
    from .launchpad_mk2 import LaunchpadMK2Mapper, LaunchpadMK2Output
    from .launchpad_mk3 import LaunchpadMK3Mapper, LaunchpadMK3Output

    register_adapter("LaunchpadMK2", LaunchpadMK2Mapper, LaunchpadMK2Output)
    register_adapter("LaunchpadMK3", LaunchpadMK3Mapper, LaunchpadMK3Output)


_register_builtin_adapters()

__all__ = [
    "Adapter",
    "get_adapter",
    "register_adapter",
]
