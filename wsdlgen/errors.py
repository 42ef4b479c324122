from __future__ import annotations


class GenerationError(Exception):
    """Base error for all port type generation failures."""


class ConfigurationError(GenerationError):
    """Errors raised when required generator configuration is missing or invalid."""


class DefinitionError(GenerationError):
    """Errors raised while loading or mutating a WSDL definition."""


class ValidationError(GenerationError):
    """Errors raised while validating a generated port type."""
