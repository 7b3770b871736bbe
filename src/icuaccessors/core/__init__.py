"""Core utilities shared across syntax, resources and codegen layers.

Exports:
    DepthGuard: Context manager for sub-message recursion limiting
    to_python_identifier: Sanitize names into Python identifiers
    generated_identifier: Accessor and parameter names safe inside generated modules
    is_argument_name / is_argument_number: ICU reference grammar checks

Python 3.13+.
"""

from .depth_guard import DepthGuard
from .identifiers import (
    generated_identifier,
    is_argument_name,
    is_argument_number,
    numbered_parameter_name,
    to_python_identifier,
)

__all__ = [
    "DepthGuard",
    "generated_identifier",
    "is_argument_name",
    "is_argument_number",
    "numbered_parameter_name",
    "to_python_identifier",
]
