"""Suffix-based port type strategy.

Messages whose local name ends with the request suffix become inputs, those
ending with the response suffix outputs and those ending with the fault
suffix faults. The operation name is the local name with the suffix removed,
so ``GetUserRequest`` and ``GetUserResponse`` form the ``GetUser`` operation.
"""
from __future__ import annotations

from ..config import (
    DEFAULT_FAULT_SUFFIX,
    DEFAULT_REQUEST_SUFFIX,
    DEFAULT_RESPONSE_SUFFIX,
    PortTypeConfig,
)
from ..errors import ConfigurationError
from ..ir import Message
from ..registry import register_strategy
from .strategy import PortTypeStrategy


def suffix_strategy(
    request_suffix: str = DEFAULT_REQUEST_SUFFIX,
    response_suffix: str = DEFAULT_RESPONSE_SUFFIX,
    fault_suffix: str = DEFAULT_FAULT_SUFFIX,
) -> PortTypeStrategy:
    for label, suffix in (
        ("request_suffix", request_suffix),
        ("response_suffix", response_suffix),
        ("fault_suffix", fault_suffix),
    ):
        if not suffix:
            raise ConfigurationError(f"'{label}' must not be empty")

    def operation_name(message: Message) -> str | None:
        local_part = message.qname.local_part
        for suffix in (request_suffix, response_suffix, fault_suffix):
            if local_part.endswith(suffix):
                return local_part[: -len(suffix)]
        return None

    def is_input(message: Message) -> bool:
        return message.qname.local_part.endswith(request_suffix)

    def is_output(message: Message) -> bool:
        return message.qname.local_part.endswith(response_suffix)

    def is_fault(message: Message) -> bool:
        return message.qname.local_part.endswith(fault_suffix)

    return PortTypeStrategy(
        operation_name=operation_name,
        is_input=is_input,
        is_output=is_output,
        is_fault=is_fault,
    )


@register_strategy("suffix")
def make_strategy(config: PortTypeConfig) -> PortTypeStrategy:
    return suffix_strategy(
        request_suffix=config.request_suffix,
        response_suffix=config.response_suffix,
        fault_suffix=config.fault_suffix,
    )
