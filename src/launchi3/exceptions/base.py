"""Root of the launchi3 error hierarchy.

The CLI catches Launchi3Error once and prints ``user_message`` with the
optional ``recovery_hint``; ``technical_message`` goes to the log file.
"""

from typing import Optional


class Launchi3Error(Exception):
    """
    Base exception for all launchi3 errors.

    Attributes:
        user_message: Short description shown in the error frame
        technical_message: Detailed description written to the log
        recovery_hint: What the user can change to make it work, if known
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
