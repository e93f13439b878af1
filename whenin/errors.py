# whenin/errors.py
from __future__ import annotations

FORMAT_HINT = 'Monday, Aug 25 at midnight PT'

class ConversionError(ValueError):
    """A conversion attempt that ends in a user-facing message instead of a result."""
    message = "Conversion failed."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)

class EmptyInput(ConversionError):
    message = "Please enter a date and time."

class Unparseable(ConversionError):
    message = f"Couldn't understand that time. Try a format like \"{FORMAT_HINT}\""

class PastInstant(ConversionError):
    message = "The specified time is in the past."

class ConfigError(ValueError):
    pass
