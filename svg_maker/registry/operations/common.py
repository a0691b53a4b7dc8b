"""Parameter definitions shared by several operations."""

from ..parameters import string_param

SVG_CODE = string_param("svg_code", "SVG source code")

COMPONENT_NAME = string_param(
    "component_name",
    "Name of the generated component",
    required=False,
    default="SvgComponent",
)
