"""Root of the colorbits exception tree."""

from typing import Optional


class ColorBitsError(Exception):
    """
    Base exception for colorbits.

    str() gives the short `user_message` that the CLI prints after "ERROR:".
    `technical_message` is what goes to the log. `recovery_hint`, when set,
    is printed on a second line telling the user what to change.
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """User message followed by the recovery hint, if any."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
