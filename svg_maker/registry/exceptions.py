"""Exceptions raised by the operation registry and request validation."""


class OperationRegistryError(Exception):
    """Base exception for registry errors."""
    pass


class UnknownOperation(OperationRegistryError):
    """Operation not found in registry."""
    pass


class DuplicateOperation(OperationRegistryError):
    """Operation already registered."""
    pass


class InvalidOperationDescriptor(OperationRegistryError):
    """Invalid operation descriptor."""
    pass


class RegistrySealed(OperationRegistryError):
    """Registration attempted after the registry was sealed."""
    pass


class RequestValidationError(OperationRegistryError):
    """Invocation arguments do not satisfy the operation's contract."""

    def __init__(self, message: str, operation: str, parameter: str):
        super().__init__(message)
        self.operation = operation
        self.parameter = parameter


class MissingParameter(RequestValidationError):
    """A required parameter was not supplied."""
    pass


class TypeMismatch(RequestValidationError):
    """A parameter was supplied with the wrong semantic type."""
    pass
