from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..errors import DefinitionError
from .model import Fault, Input, Message, Operation, Output, PortType, QName


class Definition:
    """In-memory WSDL definition: declared messages plus the port types built from them."""

    __slots__ = ("target_namespace", "_messages", "_port_types")

    def __init__(self, target_namespace: str = "") -> None:
        self.target_namespace = target_namespace
        self._messages: dict[QName, Message] = {}
        self._port_types: dict[QName, PortType] = {}

    # -- factories ----------------------------------------------------------

    def create_port_type(self) -> PortType:
        return PortType()

    def create_operation(self) -> Operation:
        return Operation()

    def create_input(self) -> Input:
        return Input()

    def create_output(self) -> Output:
        return Output()

    def create_fault(self) -> Fault:
        return Fault()

    # -- mutators -----------------------------------------------------------

    def add_message(self, message: Message) -> None:
        if message.qname in self._messages:
            raise DefinitionError(f"Message '{message.qname}' already declared.")
        self._messages[message.qname] = message

    def add_port_type(self, port_type: PortType) -> None:
        if port_type.qname is None:
            raise DefinitionError("Cannot register a port type without a qualified name.")
        if port_type.qname in self._port_types:
            raise DefinitionError(f"Port type '{port_type.qname}' already registered.")
        self._port_types[port_type.qname] = port_type

    # -- queries ------------------------------------------------------------

    @property
    def messages(self) -> Mapping[QName, Message]:
        return MappingProxyType(self._messages)

    @property
    def port_types(self) -> Mapping[QName, PortType]:
        return MappingProxyType(self._port_types)

    def get_message(self, qname: QName) -> Message | None:
        return self._messages.get(qname)

    def get_port_type(self, qname: QName) -> PortType | None:
        return self._port_types.get(qname)
