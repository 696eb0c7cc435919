"""Launchpad hardware exceptions."""

from typing import Optional

from .base import Launchi3Error


class HardwareError(Launchi3Error):
    """Base class for MIDI device errors."""

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        port_name: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            recovery_hint=recovery_hint,
        )
        self.port_name = port_name


class HardwareConnectError(HardwareError):
    """No supported device found, or its ports could not be opened."""

    def __init__(self, reason: str, port_name: Optional[str] = None, original_error: Optional[str] = None):
        """
        Initialize hardware connect error.

        Args:
            reason: Short description of what went wrong
            port_name: MIDI port involved, if any
            original_error: Message from the MIDI backend
        """
        technical = f"Launchpad connection failed: {reason}"
        if port_name:
            technical += f" (port {port_name})"
        if original_error:
            technical += f": {original_error}"

        super().__init__(
            user_message=f"Could not connect to Launchpad: {reason}",
            technical_message=technical,
            port_name=port_name,
            recovery_hint=(
                "Check that the Launchpad is plugged in and not used by another program.\n"
                "Run 'launchi3 midi list' to see available MIDI ports."
            ),
        )
        self.original_error = original_error


class HardwareIOError(HardwareError):
    """Reading from or writing to a connected device failed."""

    def __init__(self, operation: str, port_name: Optional[str] = None, original_error: Optional[str] = None):
        """
        Initialize hardware I/O error.

        Args:
            operation: What was being done ("poll", "light LEDs", ...)
            port_name: MIDI port involved, if any
            original_error: Message from the MIDI backend
        """
        super().__init__(
            user_message=f"Launchpad communication failed during {operation}",
            technical_message=f"MIDI {operation} failed on {port_name}: {original_error}",
            port_name=port_name,
            recovery_hint="The device may have been unplugged. Reconnect it and restart launchi3.",
        )
        self.operation = operation
        self.original_error = original_error
