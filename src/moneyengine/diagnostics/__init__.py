"""Diagnostic system for MoneyEngine errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DivisionByZeroError,
    InvalidLocaleError,
    InvalidRangeError,
    InvalidTemplateError,
    InvalidValueError,
    MoneyError,
    MoneyParseError,
)
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DivisionByZeroError",
    "ErrorTemplate",
    "InvalidLocaleError",
    "InvalidRangeError",
    "InvalidTemplateError",
    "InvalidValueError",
    "MoneyError",
    "MoneyParseError",
]
