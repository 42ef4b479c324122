"""Pluggable decisions used by PortTypeBuilder to classify and name messages."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..ir import Definition, Message, QName


def message_local_name(definition: Definition, message: Message) -> str:
    """Default role name: the unqualified name of the attached message."""
    return message.qname.local_part


def target_namespace_qname(definition: Definition, port_type_name: str) -> QName:
    """Default port type name: the configured name in the definition's target namespace."""
    return QName(definition.target_namespace, port_type_name)


@dataclass(frozen=True, slots=True)
class PortTypeStrategy:
    """
    Capability set injected into PortTypeBuilder.

    ``operation_name`` returns ``None`` (or a blank string) for messages that
    belong to no operation. The three predicates are consulted in the order
    input, output, fault; the first that matches decides the message's role.
    """

    operation_name: Callable[[Message], str | None]
    is_input: Callable[[Message], bool]
    is_output: Callable[[Message], bool]
    is_fault: Callable[[Message], bool]
    name_input: Callable[[Definition, Message], str] = message_local_name
    name_output: Callable[[Definition, Message], str] = message_local_name
    name_fault: Callable[[Definition, Message], str] = message_local_name
    name_port_type: Callable[[Definition, str], QName] = target_namespace_qname
