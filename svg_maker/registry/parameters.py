"""
Parameter contracts and request validation for registered operations.

Each operation declares an ordered tuple of ParameterSpec. Incoming argument
mappings are checked against it before the handler runs:
- required and absent -> MissingParameter
- present with the wrong semantic type -> TypeMismatch
- optional and absent -> declared default (if any) is substituted
- unknown keys are ignored
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence

from .exceptions import MissingParameter, TypeMismatch

JSONSchema = Dict[str, Any]

_MISSING = object()


class ParameterType(Enum):
    """Semantic parameter types (JSON Schema type names)."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ParameterSpec:
    """One named parameter of an operation's input contract."""
    name: str
    type: ParameterType
    required: bool = True
    default: Any = _MISSING
    description: str = ""

    @property
    def has_default(self) -> bool:
        return self.default is not _MISSING

    def accepts(self, value: Any) -> bool:
        """Check the semantic type of a supplied value."""
        if self.type is ParameterType.STRING:
            return isinstance(value, str)
        if self.type is ParameterType.BOOLEAN:
            return isinstance(value, bool)
        # bool is an int subclass but never a number here
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def to_schema(self) -> JSONSchema:
        """JSON Schema fragment for this parameter."""
        schema: JSONSchema = {"type": self.type.value}
        if self.description:
            schema["description"] = self.description
        if self.has_default:
            schema["default"] = self.default
        return schema


def string_param(name: str, description: str = "", required: bool = True,
                 default: Any = _MISSING) -> ParameterSpec:
    return ParameterSpec(name, ParameterType.STRING, required, default, description)


def number_param(name: str, description: str = "", required: bool = True,
                 default: Any = _MISSING) -> ParameterSpec:
    return ParameterSpec(name, ParameterType.NUMBER, required, default, description)


def boolean_param(name: str, description: str = "", required: bool = True,
                  default: Any = _MISSING) -> ParameterSpec:
    return ParameterSpec(name, ParameterType.BOOLEAN, required, default, description)


def build_input_schema(parameters: Sequence[ParameterSpec]) -> JSONSchema:
    """
    Generate the JSON Schema advertised for an operation.

    Args:
        parameters: Ordered parameter contract

    Returns:
        JSON Schema object (additional properties allowed)
    """
    return {
        "type": "object",
        "properties": {p.name: p.to_schema() for p in parameters},
        "required": [p.name for p in parameters if p.required],
    }


def validate_arguments(
    parameters: Sequence[ParameterSpec],
    arguments: Optional[Dict[str, Any]],
    operation_name: str
) -> Dict[str, Any]:
    """
    Validate supplied arguments against a parameter contract.

    Args:
        parameters: Ordered parameter contract
        arguments: Supplied argument mapping (may be None)
        operation_name: Operation name (for error messages)

    Returns:
        New mapping of declared parameters with defaults substituted

    Raises:
        MissingParameter: If a required parameter is absent
        TypeMismatch: If a supplied value has the wrong semantic type
    """
    arguments = arguments or {}
    validated: Dict[str, Any] = {}

    for param in parameters:
        value = arguments.get(param.name)

        if value is None:
            if param.required:
                raise MissingParameter(
                    f"Missing required parameter '{param.name}' "
                    f"for operation '{operation_name}'",
                    operation=operation_name,
                    parameter=param.name,
                )
            if param.has_default:
                validated[param.name] = param.default
            continue

        if not param.accepts(value):
            raise TypeMismatch(
                f"Parameter '{param.name}' for operation '{operation_name}' "
                f"must be of type {param.type.value}, got {type(value).__name__}",
                operation=operation_name,
                parameter=param.name,
            )

        validated[param.name] = value

    return validated
