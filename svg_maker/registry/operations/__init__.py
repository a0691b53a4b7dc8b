"""
Operation registrations for svg-maker-mcp.

Registers every advertised SVG tool with the registry and seals it.
"""

from typing import List, Optional

from ..operation_registry import OperationDescriptor, OperationRegistry, get_operation_registry
from .convert_operations import CONVERT_OPERATIONS
from .file_operations import SAVE_SVG, SVG_TO_PDF
from .inspect_operations import INSPECT_OPERATIONS
from .render_operations import RENDER_OPERATIONS
from .transform_operations import TRANSFORM_OPERATIONS


def all_operations() -> List[OperationDescriptor]:
    """Every advertised operation, in advertisement order."""
    return [
        *RENDER_OPERATIONS,
        SAVE_SVG,
        *TRANSFORM_OPERATIONS,
        *CONVERT_OPERATIONS,
        SVG_TO_PDF,
        *INSPECT_OPERATIONS,
    ]


def register_all_operations(registry: Optional[OperationRegistry] = None) -> OperationRegistry:
    """
    Register all operations and seal the registry.

    Args:
        registry: Target registry (default: process-wide singleton)

    Returns:
        The sealed registry. Already-sealed registries are returned unchanged.
    """
    if registry is None:
        registry = get_operation_registry()
    if registry.sealed:
        return registry

    registry.register_all(all_operations())
    registry.seal()
    return registry


__all__ = [
    'all_operations',
    'register_all_operations',
]
