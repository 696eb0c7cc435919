"""MIDI management - generic MIDI functionality."""

from .ports import MidiPorts

__all__ = ["MidiPorts"]
