"""Code generation backends for merged resources.

Python 3.13+.
"""

from .writer import PYTHON_TYPES, AccessorWriter, write_accessors

__all__ = ["PYTHON_TYPES", "AccessorWriter", "write_accessors"]
