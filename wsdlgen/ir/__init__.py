"""WSDL definition model shared by loaders, builders and the CLI."""

from .definition import Definition
from .model import (
    Fault,
    Input,
    Message,
    MessagePart,
    Operation,
    OperationStyle,
    Output,
    PortType,
    QName,
)

__all__ = [
    "Definition",
    "Fault",
    "Input",
    "Message",
    "MessagePart",
    "Operation",
    "OperationStyle",
    "Output",
    "PortType",
    "QName",
]
