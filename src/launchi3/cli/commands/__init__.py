"""CLI commands for launchi3."""

from .config import config_group
from .midi import midi_group

__all__ = ["config_group", "midi_group"]
