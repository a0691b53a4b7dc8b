"""
Operation Registry for svg-maker-mcp.

Provides typed, discoverable catalog of SVG tool operations.
"""

from .exceptions import (
    OperationRegistryError,
    UnknownOperation,
    DuplicateOperation,
    InvalidOperationDescriptor,
    RegistrySealed,
    RequestValidationError,
    MissingParameter,
    TypeMismatch,
)
from .parameters import (
    ParameterSpec,
    ParameterType,
    validate_arguments,
)
from .operation_registry import (
    OperationRegistry,
    OperationDescriptor,
    OperationCategory,
    OperationMetadata,
    # Singleton
    get_operation_registry,
    reset_operation_registry,
)

__all__ = [
    'OperationRegistry',
    'OperationDescriptor',
    'OperationCategory',
    'OperationMetadata',
    'ParameterSpec',
    'ParameterType',
    'validate_arguments',
    # Exceptions
    'OperationRegistryError',
    'UnknownOperation',
    'DuplicateOperation',
    'InvalidOperationDescriptor',
    'RegistrySealed',
    'RequestValidationError',
    'MissingParameter',
    'TypeMismatch',
    # Singleton
    'get_operation_registry',
    'reset_operation_registry',
]
