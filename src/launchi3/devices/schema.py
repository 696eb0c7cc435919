"""Pydantic models for the devices.json registry file."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class PortSelectionRules(BaseModel):
    """Port selection rules among ports that matched detection."""

    prefer: list[str] = Field(
        default_factory=list, description="Port patterns to prefer in order of priority"
    )
    exclude: list[str] = Field(default_factory=list, description="Port patterns to exclude")


class Device(BaseModel):
    """Individual device configuration within a family."""

    model: str = Field(min_length=1, description="Device model name (e.g., 'Launchpad MK2')")
    detection_patterns: list[str] = Field(
        default_factory=list, description="Additional patterns for detecting this specific device"
    )
    sysex_header: list[int] = Field(
        min_length=1, description="SysEx header bytes for this device (excluding F0)"
    )
    port_selection: PortSelectionRules | None = Field(
        None, description="Overrides the family's port selection rules"
    )

    @field_validator("sysex_header")
    @classmethod
    def validate_sysex_header(cls, v: list[int]) -> list[int]:
        """Validate SysEx header bytes are in valid range."""
        for byte in v:
            if not 0 <= byte <= 127:
                raise ValueError(f"SysEx byte {byte} out of range (0-127)")
        return v


class DeviceFamily(BaseModel):
    """Device family configuration (e.g., Launchpad MK3 family)."""

    family: str = Field(min_length=1, description="Family identifier (e.g., 'launchpad_mk3')")
    manufacturer: str = Field(min_length=1, description="Manufacturer name (e.g., 'Novation')")
    implements: str = Field(
        min_length=1, description="Adapter name mapping to Python classes"
    )
    detection_patterns: list[str] = Field(
        default_factory=list, description="Common patterns for detecting any device in this family"
    )
    port_selection: PortSelectionRules = Field(
        default_factory=PortSelectionRules, description="Default port selection rules for family"
    )
    devices: list[Device] = Field(
        default_factory=list, description="List of specific devices in this family"
    )


class DeviceRegistrySchema(BaseModel):
    """Root schema for the devices.json configuration file."""

    families: list[DeviceFamily] = Field(
        default_factory=list, description="List of device families"
    )

    @classmethod
    def from_json_file(cls, path: Path) -> "DeviceRegistrySchema":
        """Load registry from JSON file with validation."""
        with open(path) as f:
            return cls.model_validate_json(f.read())
