from __future__ import annotations

from abc import ABC, abstractmethod

from .ir import Definition, PortType


class PortTypesProvider(ABC):
    """Base contract for components that add port types to a WSDL definition."""

    @abstractmethod
    def add_port_types(self, definition: Definition) -> PortType:
        """Build the provider's port type and register it on the definition."""
