"""
Device registry using Pydantic models for configuration validation.

How Device Detection Works
--------------------------

::

    Port available: "Launchpad Mini MK3 LPMiniMK3 MIDI 1"
                                  ↓
    Registry checks devices.json: "Does 'LPMiniMK3' match patterns?"
                                  ↓ YES
    Registry: "This is a Launchpad Mini MK3"
             "It implements: LaunchpadMK3"
             "Skip the DAW port, prefer the MIDI port"
                                  ↓
    get_adapter("LaunchpadMK3") → (LaunchpadMK3Mapper, LaunchpadMK3Output)
                                  ↓
    GenericInput(mapper) + LaunchpadMK3Output(ports, config)

Adding a model means adding an entry to devices.json and, for a new
family, registering an adapter.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .config import DeviceConfig
from .schema import Device, DeviceFamily, DeviceRegistrySchema

if TYPE_CHECKING:
    from .input import GenericInput
    from .protocols import DeviceOutput, MidiSender

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """
    Registry of all supported MIDI devices.

    Loads device configurations from JSON using Pydantic validation
    and provides device detection and adapter instantiation.
    """

    def __init__(self, config_path: Path | None = None):
        """
        Args:
            config_path: Path to devices.json config file.
                        If None, uses the packaged file.
        """
        if config_path is None:
            config_path = Path(__file__).parent / "devices.json"

        self.config_path = config_path
        self.schema: DeviceRegistrySchema = self._load_schema()
        self.devices: list[DeviceConfig] = self._flatten_configs()

    def _load_schema(self) -> DeviceRegistrySchema:
        """Load and validate device registry schema from JSON."""
        try:
            schema = DeviceRegistrySchema.from_json_file(self.config_path)
            logger.info(f"Validated device registry from {self.config_path}")
            return schema
        except Exception as e:
            logger.error(f"Failed to load device config from {self.config_path}: {e}")
            raise

    def _flatten_configs(self) -> list[DeviceConfig]:
        """Flatten family + device configs into runtime DeviceConfigs."""
        configs = [
            self._merge_family_and_device(family, device)
            for family in self.schema.families
            for device in family.devices
        ]
        logger.info(f"Loaded {len(configs)} device configurations")
        return configs

    def _merge_family_and_device(self, family: DeviceFamily, device: Device) -> DeviceConfig:
        """Merge family defaults with device overrides."""
        patterns = family.detection_patterns + [
            p for p in device.detection_patterns if p not in family.detection_patterns
        ]

        return DeviceConfig(
            family=family.family,
            model=device.model,
            manufacturer=family.manufacturer,
            implements=family.implements,
            detection_patterns=patterns,
            port_selection=device.port_selection or family.port_selection,
            sysex_header=device.sysex_header,
        )

    def detect_device(self, port_name: str) -> DeviceConfig | None:
        """
        Detect which device config matches a port name.

        Returns:
            Matching DeviceConfig or None if no match found
        """
        for config in self.devices:
            if config.matches(port_name):
                logger.debug(f"Detected {config.model} from port: {port_name}")
                return config

        logger.debug(f"No device matched port: {port_name}")
        return None

    def detect_ports(
        self, input_names: list[str], output_names: list[str]
    ) -> tuple[DeviceConfig, str, str] | None:
        """
        Find the first supported device that has both an input and an output port.

        Args:
            input_names: Available MIDI input port names
            output_names: Available MIDI output port names

        Returns:
            (config, input_port, output_port) or None if no device is present
        """
        for config in self.devices:
            input_port = config.select_port(input_names)
            output_port = config.select_port(output_names)
            if input_port is not None and output_port is not None:
                logger.info(
                    f"Found {config.display_name}: in={input_port!r} out={output_port!r}"
                )
                return config, input_port, output_port

        return None

    def create_adapter(
        self, config: DeviceConfig, sender: "MidiSender"
    ) -> tuple["GenericInput", "DeviceOutput"]:
        """
        Build the input parser and output controller for a device.

        Raises:
            ValueError: If the adapter named by the config is not registered
        """
        from .adapters import get_adapter
        from .input import GenericInput

        adapter = get_adapter(config.implements)
        if adapter is None:
            raise ValueError(f"Unknown adapter: {config.implements}")

        MapperClass, OutputClass = adapter
        return GenericInput(MapperClass(config)), OutputClass(sender, config)


_registry: DeviceRegistry | None = None


def get_registry() -> DeviceRegistry:
    """Get singleton DeviceRegistry instance."""
    global _registry
    if _registry is None:
        _registry = DeviceRegistry()
    return _registry
