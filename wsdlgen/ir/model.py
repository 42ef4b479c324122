"""Dataclasses for the WSDL port type model: messages, roles, operations."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, slots=True)
class QName:
    namespace: str
    local_part: str

    def __str__(self) -> str:
        if not self.namespace:
            return self.local_part
        return f"{{{self.namespace}}}{self.local_part}"


@dataclass(frozen=True, slots=True)
class MessagePart:
    name: str
    element: QName | None = None
    type: QName | None = None


@dataclass(frozen=True, slots=True)
class Message:
    """A named message declared in a definition. Never mutated by the builders."""
    qname: QName
    parts: tuple[MessagePart, ...] = ()


@dataclass(slots=True)
class Input:
    message: Message | None = None
    name: str | None = None


@dataclass(slots=True)
class Output:
    message: Message | None = None
    name: str | None = None


@dataclass(slots=True)
class Fault:
    message: Message | None = None
    name: str | None = None


class OperationStyle(str, Enum):
    """WSDL 1.1 transmission primitives."""

    ONE_WAY = "one-way"
    REQUEST_RESPONSE = "request-response"
    SOLICIT_RESPONSE = "solicit-response"
    NOTIFICATION = "notification"


@dataclass(slots=True)
class Operation:
    name: str | None = None
    input: Input | None = None
    output: Output | None = None
    faults: list[Fault] = field(default_factory=list)
    style: OperationStyle | None = None
    undefined: bool = True

    def add_fault(self, fault: Fault) -> None:
        self.faults.append(fault)


@dataclass(slots=True)
class PortType:
    qname: QName | None = None
    operations: dict[str, Operation] = field(default_factory=dict)  # keyed by operation name, insertion-ordered
    undefined: bool = True

    def add_operation(self, operation: Operation) -> None:
        if not operation.name:
            raise ValueError("Operation name must not be empty.")
        self.operations[operation.name] = operation

    def get_operation(self, name: str) -> Operation | None:
        return self.operations.get(name)
