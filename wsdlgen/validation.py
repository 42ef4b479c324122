from __future__ import annotations

from .errors import ValidationError
from .ir import PortType


def undefined_operations(port_type: PortType) -> list[str]:
    """Names of operations that carry neither an input nor an output."""
    return [name for name, operation in port_type.operations.items() if operation.style is None]


def validate_port_type(port_type: PortType) -> None:
    unresolved = [
        f"{port_type.qname}: operation '{name}' has neither input nor output"
        for name in undefined_operations(port_type)
    ]
    if unresolved:
        raise ValidationError("Validation failed:\n" + "\n".join(unresolved))
