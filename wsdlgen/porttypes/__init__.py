"""Port type construction: grouping messages into operations."""

from .builder import PortTypeBuilder, operation_style
from .strategy import PortTypeStrategy, message_local_name, target_namespace_qname

__all__ = [
    "PortTypeBuilder",
    "PortTypeStrategy",
    "message_local_name",
    "operation_style",
    "target_namespace_qname",
]
