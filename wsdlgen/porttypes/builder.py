"""Build a WSDL port type from the messages declared in a definition.

Messages are grouped into operations by the operation name the strategy
assigns them. Within an operation every message becomes the input, the output
or one of the faults, and the operation style follows from which of input and
output ended up present.
"""
from __future__ import annotations

import logging

from ..base import PortTypesProvider
from ..errors import ConfigurationError
from ..ir import Definition, Message, Operation, OperationStyle, PortType
from .strategy import PortTypeStrategy

logger = logging.getLogger(__name__)


def operation_style(operation: Operation) -> OperationStyle | None:
    """Infer the transmission primitive from input/output presence; faults are ignored."""
    has_input = operation.input is not None
    has_output = operation.output is not None
    if has_input and has_output:
        return OperationStyle.REQUEST_RESPONSE
    if has_input:
        return OperationStyle.ONE_WAY
    if has_output:
        return OperationStyle.NOTIFICATION
    return None


class PortTypeBuilder(PortTypesProvider):
    """Creates a single port type holding one operation per distinct operation name."""

    def __init__(self, strategy: PortTypeStrategy, port_type_name: str | None = None) -> None:
        self.strategy = strategy
        self.port_type_name = port_type_name

    def add_port_types(self, definition: Definition) -> PortType:
        port_type = self.build(definition)
        definition.add_port_type(port_type)
        return port_type

    def build(self, definition: Definition) -> PortType:
        if not self.port_type_name:
            raise ConfigurationError("'port_type_name' is required")

        port_type = definition.create_port_type()
        port_type.qname = self.strategy.name_port_type(definition, self.port_type_name)
        self._create_operations(definition, port_type)
        port_type.undefined = False
        logger.debug(
            "Built port type %s with %d operation(s)", port_type.qname, len(port_type.operations)
        )
        return port_type

    # -- grouping -----------------------------------------------------------

    def _group_messages(self, definition: Definition) -> dict[str, list[Message]]:
        grouped: dict[str, list[Message]] = {}
        for message in definition.messages.values():
            operation_name = self.strategy.operation_name(message)
            if not operation_name or not operation_name.strip():
                logger.debug("Message %s is not coupled to an operation", message.qname)
                continue
            grouped.setdefault(operation_name, []).append(message)
        return grouped

    def _create_operations(self, definition: Definition, port_type: PortType) -> None:
        for operation_name, messages in self._group_messages(definition).items():
            operation = definition.create_operation()
            operation.name = operation_name
            for message in messages:
                self._attach(definition, operation, message)
            operation.style = operation_style(operation)
            operation.undefined = False
            port_type.add_operation(operation)

    def _attach(self, definition: Definition, operation: Operation, message: Message) -> None:
        strategy = self.strategy
        if strategy.is_input(message):
            if operation.input is not None:
                logger.debug(
                    "Input %s of operation '%s' replaced by %s",
                    operation.input.message.qname if operation.input.message else None,
                    operation.name,
                    message.qname,
                )
            role = definition.create_input()
            role.message = message
            role.name = strategy.name_input(definition, message)
            operation.input = role
        elif strategy.is_output(message):
            if operation.output is not None:
                logger.debug(
                    "Output %s of operation '%s' replaced by %s",
                    operation.output.message.qname if operation.output.message else None,
                    operation.name,
                    message.qname,
                )
            role = definition.create_output()
            role.message = message
            role.name = strategy.name_output(definition, message)
            operation.output = role
        elif strategy.is_fault(message):
            fault = definition.create_fault()
            fault.message = message
            fault.name = strategy.name_fault(definition, message)
            operation.add_fault(fault)
        else:
            logger.debug(
                "Message %s of operation '%s' is neither input, output nor fault",
                message.qname,
                operation.name,
            )
