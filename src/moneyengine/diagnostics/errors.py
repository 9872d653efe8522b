"""MoneyEngine exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.
Concrete errors also inherit the matching builtin (ValueError,
ZeroDivisionError) so callers can catch them without importing this package.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "DivisionByZeroError",
    "InvalidLocaleError",
    "InvalidRangeError",
    "InvalidTemplateError",
    "InvalidValueError",
    "MoneyError",
    "MoneyParseError",
]


class MoneyError(Exception):
    """Base exception for all MoneyEngine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MoneyError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidValueError(MoneyError, ValueError):
    """Amount cannot be represented as a finite decimal.

    Attributes:
        value: The offending input
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidLocaleError(InvalidValueError):
    """Locale identifier is not a syntactically valid language tag.

    Attributes:
        locale_code: The rejected locale string
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: object) -> None:
        super().__init__(message, value=locale_code)
        self.locale_code = locale_code


class InvalidTemplateError(InvalidValueError):
    """Template string cannot be parsed into a pattern.

    Attributes:
        template: The rejected template text
    """

    def __init__(self, message: str | Diagnostic, *, template: str) -> None:
        super().__init__(message, value=template)
        self.template = template


class DivisionByZeroError(MoneyError, ZeroDivisionError):
    """Divisor's decimal value is zero.

    Attributes:
        dividend: The value that was to be divided
    """

    def __init__(self, message: str | Diagnostic, *, dividend: object = None) -> None:
        super().__init__(message)
        self.dividend = dividend


class InvalidRangeError(MoneyError, ValueError):
    """Numeric argument lies outside its permitted range.

    Raised for discount rates outside [0, 100] and negative precisions.

    Attributes:
        value: The offending argument
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class MoneyParseError(MoneyError):
    """Formatted amount string could not be parsed.

    Returned (not raised) by parse_money(), consistent with the formatting
    API which reports problems as data.

    Attributes:
        input_value: The string that failed to parse
        locale_code: The locale used for parsing
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
    ) -> None:
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
