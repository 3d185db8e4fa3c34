"""Custom exceptions for the exclusivity calculator."""


class ExclusivityError(Exception):
    """Base exception for all exclusivity calculator errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class AmountOutOfRangeError(ExclusivityError):
    """Raised when a calculation receives an amount validation should have rejected."""

    def __init__(self, amount: float, reason: str):
        message = f"Amount out of range: {amount} ({reason})"
        super().__init__(message, {"amount": amount, "reason": reason})
        self.amount = amount
        self.reason = reason


class ConfigurationError(ExclusivityError):
    """Raised when configuration is invalid or missing."""

    def __init__(self, config_key: str, message: str):
        full_message = f"Configuration error [{config_key}]: {message}"
        super().__init__(full_message, {"config_key": config_key})
        self.config_key = config_key
