"""
Code generation backends.

Contains language-specific code generators.
"""

from __future__ import annotations

from .base import CodeBackend
from .python_backend import PythonBackend
from .rust_backend import RustBackend

BACKENDS: dict[str, type[CodeBackend]] = {
    "rust": RustBackend,
    "python": PythonBackend,
}

__all__ = [
    "BACKENDS",
    "CodeBackend",
    "PythonBackend",
    "RustBackend",
]
