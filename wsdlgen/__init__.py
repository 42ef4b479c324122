"""Port type generation for dynamically assembled WSDL 1.1 definitions."""

from .errors import ConfigurationError, DefinitionError, GenerationError, ValidationError
from .porttypes import PortTypeBuilder, PortTypeStrategy, operation_style

__all__ = [
    "ConfigurationError",
    "DefinitionError",
    "GenerationError",
    "PortTypeBuilder",
    "PortTypeStrategy",
    "ValidationError",
    "operation_style",
]
