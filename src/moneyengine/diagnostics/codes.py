"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Value errors (unparsable amounts, invalid locales)
        2000-2999: Arithmetic errors (division, ranges)
        3000-3999: Template errors (malformed templates)
        4000-4999: Parsing errors (formatted string -> Money)
    """

    # Value errors (1000-1999)
    INVALID_AMOUNT = 1001
    NON_FINITE_AMOUNT = 1002
    UNSUPPORTED_AMOUNT_TYPE = 1003
    INVALID_LOCALE = 1004
    INVALID_CURRENCY_CODE = 1005

    # Arithmetic errors (2000-2999)
    DIVISION_BY_ZERO = 2001
    DISCOUNT_OUT_OF_RANGE = 2002
    PRECISION_OUT_OF_RANGE = 2003

    # Template errors (3000-3999)
    TEMPLATE_UNKNOWN_TOKEN = 3001
    TEMPLATE_MISSING_INTEGER = 3002
    TEMPLATE_INVALID_PRECISION = 3003
    TEMPLATE_SEPARATOR_CONFLICT = 3004
    TEMPLATE_DUPLICATE_TOKEN = 3005

    # Parsing errors (4000-4999)
    PARSE_AMOUNT_FAILED = 4001
    PARSE_LOCALE_UNKNOWN = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[DIVISION_BY_ZERO]: Cannot divide 10 by zero
              = help: Check the divisor before dividing

        Control characters in the message are escaped so values taken from
        user input cannot forge extra log lines.
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
