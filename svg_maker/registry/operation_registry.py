"""
Operation Registry - Typed catalog of SVG tool operations.

Provides:
- Immutable operation descriptors with typed parameter contracts
- Request validation before any handler runs
- Discoverability via MCP tool listing and per-operation docs
- A sealed, process-wide registry built once at startup
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from mcp.types import Tool

from ..utils.response import ToolEnvelope
from .exceptions import (
    DuplicateOperation,
    InvalidOperationDescriptor,
    RegistrySealed,
    UnknownOperation,
)
from .parameters import JSONSchema, ParameterSpec, build_input_schema, validate_arguments

logger = logging.getLogger(__name__)

# Type aliases
OperationHandler = Callable[[Dict[str, Any]], Awaitable[ToolEnvelope]]


# ============================================================================
# Enums
# ============================================================================

class OperationCategory(Enum):
    """Operation categories."""
    RENDER = "render"       # Rasterization
    PERSIST = "persist"     # Writes files to disk
    TRANSFORM = "transform" # SVG in, SVG out
    CONVERT = "convert"     # SVG in, other format out
    INSPECT = "inspect"     # Read-only analysis


# ============================================================================
# Data Classes
# ============================================================================

@dataclass(frozen=True)
class OperationMetadata:
    """Additional operation metadata."""
    introduced: str = "1.0.0"                          # Version introduced
    tags: Tuple[str, ...] = ()                         # Searchable tags


@dataclass(frozen=True)
class OperationDescriptor:
    """
    Describes one advertised tool operation.

    Created during server initialization and never mutated afterwards.
    """
    name: str                              # Operation identifier (e.g., "render_svg")
    title: str                             # Display title (e.g., "Render SVG")
    description: str                       # Human-readable description
    category: OperationCategory
    parameters: Tuple[ParameterSpec, ...]  # Ordered input contract
    handler: OperationHandler
    version: str = "1.0.0"
    metadata: OperationMetadata = field(default_factory=OperationMetadata)

    @property
    def input_schema(self) -> JSONSchema:
        """JSON Schema generated from the parameter contract."""
        return build_input_schema(self.parameters)

    def to_tool(self) -> Tool:
        """MCP tool advertisement for this operation."""
        return Tool(
            name=self.name,
            title=self.title,
            description=self.description,
            inputSchema=self.input_schema,
        )


# ============================================================================
# Operation Registry
# ============================================================================

class OperationRegistry:
    """
    Central registry for tool operations.

    Maps a stable operation name to its descriptor. Dispatch is stateless:
    no retries and no caching between invocations.
    """

    def __init__(self):
        """Initialize registry."""
        self._operations: Dict[str, OperationDescriptor] = {}
        self._category_index: Dict[OperationCategory, List[str]] = {}
        self._sealed = False

        logger.info("OperationRegistry initialized")

    # ========================================================================
    # Registration
    # ========================================================================

    def register(self, operation: OperationDescriptor) -> None:
        """
        Register a new operation.

        Args:
            operation: Operation descriptor to register

        Raises:
            RegistrySealed: If the registry no longer accepts operations
            DuplicateOperation: If operation name already exists
            InvalidOperationDescriptor: If descriptor validation fails
        """
        if self._sealed:
            raise RegistrySealed(
                f"Cannot register '{operation.name}': registry is sealed"
            )

        self._validate_descriptor(operation)

        if operation.name in self._operations:
            raise DuplicateOperation(
                f"Operation '{operation.name}' already registered"
            )

        self._operations[operation.name] = operation
        self._category_index.setdefault(operation.category, []).append(operation.name)

        logger.info(
            f"Registered operation: {operation.name} "
            f"(category: {operation.category.value}, version: {operation.version})"
        )

    def register_all(self, operations: List[OperationDescriptor]) -> None:
        """Register multiple operations at once."""
        for operation in operations:
            self.register(operation)

    def seal(self) -> None:
        """Stop accepting registrations; the catalog is fixed from here on."""
        self._sealed = True
        logger.info(f"OperationRegistry sealed with {len(self._operations)} operations")

    @property
    def sealed(self) -> bool:
        return self._sealed

    # ========================================================================
    # Retrieval
    # ========================================================================

    def get(self, name: str) -> OperationDescriptor:
        """
        Retrieve an operation by name.

        Raises:
            UnknownOperation: If operation doesn't exist
        """
        if name not in self._operations:
            raise UnknownOperation(f"Operation '{name}' not found")

        return self._operations[name]

    def list(self, category: Optional[OperationCategory] = None) -> List[OperationDescriptor]:
        """
        List operations in registration order.

        Args:
            category: Filter by category

        Returns:
            List of operation descriptors
        """
        if category is None:
            return list(self._operations.values())
        return [self._operations[name] for name in self._category_index.get(category, [])]

    def names(self) -> List[str]:
        return list(self._operations.keys())

    def exists(self, name: str) -> bool:
        """Check if operation exists."""
        return name in self._operations

    # ========================================================================
    # Execution
    # ========================================================================

    async def dispatch(
        self,
        operation_name: str,
        arguments: Optional[Dict[str, Any]] = None
    ) -> ToolEnvelope:
        """
        Validate arguments and run an operation's handler.

        Args:
            operation_name: Name of operation to execute
            arguments: Supplied argument mapping

        Returns:
            The handler's ToolEnvelope (success or error)

        Raises:
            UnknownOperation: If operation doesn't exist
            MissingParameter: If a required parameter is absent
            TypeMismatch: If a parameter has the wrong type
        """
        operation = self.get(operation_name)

        params = validate_arguments(operation.parameters, arguments, operation_name)

        logger.debug(f"Dispatching {operation_name} with params {sorted(params)}")
        return await operation.handler(params)

    # ========================================================================
    # Discovery
    # ========================================================================

    def to_tools(self) -> List[Tool]:
        """MCP tool advertisements for every registered operation."""
        return [operation.to_tool() for operation in self._operations.values()]

    def get_operation_docs(self, operation_name: str) -> Dict[str, Any]:
        """
        Get documentation for an operation.

        Raises:
            UnknownOperation: If operation doesn't exist
        """
        operation = self.get(operation_name)

        return {
            "name": operation.name,
            "title": operation.title,
            "version": operation.version,
            "category": operation.category.value,
            "description": operation.description,
            "input_schema": operation.input_schema,
            "metadata": {
                "introduced": operation.metadata.introduced,
                "tags": list(operation.metadata.tags),
            }
        }

    # ========================================================================
    # Internal Helpers
    # ========================================================================

    def _validate_descriptor(self, operation: OperationDescriptor) -> None:
        """
        Validate operation descriptor.

        Raises:
            InvalidOperationDescriptor: If validation fails
        """
        if not operation.name:
            raise InvalidOperationDescriptor("Operation name is required")

        if not operation.description:
            raise InvalidOperationDescriptor("Operation description is required")

        if not operation.handler:
            raise InvalidOperationDescriptor("Operation handler is required")

        seen = set()
        for param in operation.parameters:
            if param.name in seen:
                raise InvalidOperationDescriptor(
                    f"Duplicate parameter '{param.name}' in operation '{operation.name}'"
                )
            seen.add(param.name)

        # Validate version format (simple semver check)
        version_parts = operation.version.split('.')
        if len(version_parts) != 3:
            raise InvalidOperationDescriptor(
                f"Invalid version format: {operation.version} (expected: X.Y.Z)"
            )


# ============================================================================
# Singleton
# ============================================================================

_registry_instance: Optional[OperationRegistry] = None


def get_operation_registry() -> OperationRegistry:
    """
    Get singleton instance of operation registry.

    Returns:
        OperationRegistry singleton
    """
    global _registry_instance

    if _registry_instance is None:
        _registry_instance = OperationRegistry()

    return _registry_instance


def reset_operation_registry() -> None:
    """Reset singleton (for testing)."""
    global _registry_instance
    _registry_instance = None
