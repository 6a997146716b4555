"""
TinyCalc Backend Package.

Contains code generation backends for different targets.

Author: xwest
"""

from .python_backend import PythonBackend, render
from .errors import CodegenError

__all__ = ['PythonBackend', 'render', 'CodegenError']
