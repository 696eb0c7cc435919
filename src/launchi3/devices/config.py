"""Pydantic-based device configuration for runtime use.

DeviceConfig is the flattened representation created by merging family
defaults with device-specific overrides.
"""

from typing import Optional

from pydantic import BaseModel, Field

from .schema import PortSelectionRules


class DeviceConfig(BaseModel):
    """Flattened device configuration (family + device merged)."""

    family: str = Field(description="Device family identifier")
    model: str = Field(description="Device model name")
    manufacturer: str = Field(description="Manufacturer name")
    implements: str = Field(description="Adapter name for lookup")

    detection_patterns: list[str] = Field(
        default_factory=list,
        description="Patterns for detecting this device in port names"
    )
    port_selection: PortSelectionRules = Field(
        default_factory=PortSelectionRules,
        description="Port selection rules"
    )
    sysex_header: list[int] = Field(description="SysEx header bytes for device control")

    @property
    def display_name(self) -> str:
        """Human-readable device name."""
        return f"{self.manufacturer} {self.model}"

    def matches(self, port_name: str) -> bool:
        """Check if port name matches this device's detection patterns."""
        return any(pattern in port_name for pattern in self.detection_patterns)

    def select_port(self, port_names: list[str]) -> Optional[str]:
        """
        Pick the best port for this device.

        Ports that don't match detection or match an exclude pattern are
        skipped. Preferred patterns are tried in order; otherwise the first
        remaining port wins.

        Args:
            port_names: All available port names (input or output)

        Returns:
            Selected port name or None if nothing usable remains
        """
        rules = self.port_selection
        candidates = [
            port for port in port_names
            if self.matches(port) and not any(excl in port for excl in rules.exclude)
        ]
        if not candidates:
            return None

        for pattern in rules.prefer:
            for port in candidates:
                if pattern in port:
                    return port

        return candidates[0]
