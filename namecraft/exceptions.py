"""Exceptions raised by namecraft."""


class NamecraftError(Exception):
    """Base class for namecraft errors."""


class InvalidOptionsError(NamecraftError, ValueError):
    """Raised when generation options are out of range or unknown."""


class GenerationServiceError(NamecraftError):
    """Raised when the generation service returns no usable structured output."""
