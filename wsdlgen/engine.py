from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import PortTypeConfig
from .errors import GenerationError
from .ir import Definition, PortType
from .porttypes import PortTypeBuilder
from .registry import StrategyRegistry
from .validation import undefined_operations, validate_port_type

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class RunResult:
    definition: Definition
    port_type: PortType


def run_port_type_generation(
    *,
    registry: StrategyRegistry,
    definition: Definition,
    config: PortTypeConfig,
) -> RunResult:
    try:
        strategy = registry.create(config)
    except ValueError as exc:
        raise GenerationError(str(exc)) from exc

    builder = PortTypeBuilder(strategy, port_type_name=config.port_type_name)
    try:
        port_type = builder.build(definition)
    except GenerationError:
        raise
    except Exception as exc:  # pragma: no cover
        raise GenerationError(
            f"Strategy '{config.strategy}' failed while building port type "
            f"'{config.port_type_name}'"
        ) from exc

    if config.strict:
        validate_port_type(port_type)
    else:
        for name in undefined_operations(port_type):
            logger.warning(
                "Operation '%s' of port type %s has neither input nor output", name, port_type.qname
            )

    definition.add_port_type(port_type)
    return RunResult(definition=definition, port_type=port_type)
