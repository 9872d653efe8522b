"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    # ------------------------------------------------------------------
    # Value errors
    # ------------------------------------------------------------------

    @staticmethod
    def invalid_amount(value: object, reason: str) -> Diagnostic:
        """Amount is not a valid decimal literal.

        Args:
            value: The rejected input
            reason: Why conversion failed

        Returns:
            Diagnostic for INVALID_AMOUNT
        """
        msg = f"Invalid money value: {value!r}. {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_AMOUNT,
            message=msg,
            hint="Pass an int, a finite float, a Decimal, or a decimal string like '12.50'",
        )

    @staticmethod
    def non_finite_amount(value: object) -> Diagnostic:
        """Amount is NaN or infinite."""
        msg = f"Invalid money value: {value!r}. Amount must be finite"
        return Diagnostic(
            code=DiagnosticCode.NON_FINITE_AMOUNT,
            message=msg,
            hint="NaN and Infinity cannot represent money; validate input upstream",
        )

    @staticmethod
    def unsupported_amount_type(value: object) -> Diagnostic:
        """Amount has a type that cannot be converted."""
        msg = f"Invalid money value: {value!r}. Unsupported type {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_AMOUNT_TYPE,
            message=msg,
            hint="Supported types: int, float, str, Decimal, Money",
        )

    @staticmethod
    def invalid_locale(locale_code: object) -> Diagnostic:
        """Locale string is not a valid language tag.

        Args:
            locale_code: The rejected locale

        Returns:
            Diagnostic for INVALID_LOCALE
        """
        msg = f"Invalid locale: {locale_code!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LOCALE,
            message=msg,
            hint="Use a BCP-47 tag ('tr-TR'), a POSIX id ('tr_TR'), a language ('tr') "
            "or a country code ('TR')",
        )

    @staticmethod
    def invalid_currency_code(currency: object) -> Diagnostic:
        """Currency code is not three ASCII letters."""
        msg = f"Invalid currency code: {currency!r}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CURRENCY_CODE,
            message=msg,
            hint="Currency codes are ISO 4217 alpha-3 codes such as 'USD' or 'EUR'",
        )

    # ------------------------------------------------------------------
    # Arithmetic errors
    # ------------------------------------------------------------------

    @staticmethod
    def division_by_zero(dividend: object) -> Diagnostic:
        """Divisor is zero.

        Args:
            dividend: The value being divided

        Returns:
            Diagnostic for DIVISION_BY_ZERO
        """
        msg = f"Division by zero is not allowed (dividend: {dividend})"
        return Diagnostic(
            code=DiagnosticCode.DIVISION_BY_ZERO,
            message=msg,
            hint="Check the divisor with is_zero() before dividing",
        )

    @staticmethod
    def discount_out_of_range(rate: object) -> Diagnostic:
        """Discount rate is outside [0, 100]."""
        msg = f"Discount rate {rate} is out of range"
        return Diagnostic(
            code=DiagnosticCode.DISCOUNT_OUT_OF_RANGE,
            message=msg,
            hint="Use a fraction in [0, 1] (0.1) or a percentage in [0, 100] (10)",
        )

    @staticmethod
    def precision_out_of_range(precision: object) -> Diagnostic:
        """Rounding precision is negative."""
        msg = f"Precision {precision} is out of range"
        return Diagnostic(
            code=DiagnosticCode.PRECISION_OUT_OF_RANGE,
            message=msg,
            hint="Precision is a count of decimal places and must be >= 0",
        )

    # ------------------------------------------------------------------
    # Template errors
    # ------------------------------------------------------------------

    @staticmethod
    def template_unknown_token(token: str, template: str) -> Diagnostic:
        """Directive template contains an unknown token type."""
        msg = f"Unknown template token '{{{token}}}' in {template!r}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_UNKNOWN_TOKEN,
            message=msg,
            hint="Known tokens: {integer|<group>}, {fraction|<decimal>|<digits>}, {currency}",
        )

    @staticmethod
    def template_missing_integer(template: str) -> Diagnostic:
        """Directive template has no integer token."""
        msg = f"Template {template!r} has no numeric example or {{integer}} token"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_MISSING_INTEGER,
            message=msg,
            hint="Add a numeric example ('{Symbol} 1,000.00') or an {integer|,} token",
        )

    @staticmethod
    def template_duplicate_token(token: str, template: str) -> Diagnostic:
        """Directive template repeats a token that may appear only once."""
        msg = f"Template {template!r} contains more than one {{{token}}} token"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_DUPLICATE_TOKEN,
            message=msg,
            hint="Each of {integer}, {fraction} and {currency} may appear at most once",
        )

    @staticmethod
    def template_invalid_precision(argument: str, template: str) -> Diagnostic:
        """Fraction token precision is not a non-negative integer."""
        msg = f"Invalid fraction precision {argument!r} in {template!r}"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_INVALID_PRECISION,
            message=msg,
            hint="Fraction precision must be a non-negative integer: {fraction|.|2}",
        )

    @staticmethod
    def template_separator_conflict(separator: str, template: str) -> Diagnostic:
        """Thousands and decimal separators are identical."""
        msg = f"Template {template!r} uses {separator!r} as both group and decimal separator"
        return Diagnostic(
            code=DiagnosticCode.TEMPLATE_SEPARATOR_CONFLICT,
            message=msg,
            hint="Pick distinct characters, e.g. {integer|.}{fraction|,}",
        )

    # ------------------------------------------------------------------
    # Parsing errors
    # ------------------------------------------------------------------

    @staticmethod
    def parse_amount_failed(value: str, locale_code: str, reason: str) -> Diagnostic:
        """Formatted amount could not be parsed.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_AMOUNT_FAILED
        """
        msg = f"Failed to parse amount '{value}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_FAILED,
            message=msg,
            hint="Check that the amount format matches the locale's conventions",
        )

    @staticmethod
    def parse_locale_unknown(locale_code: str) -> Diagnostic:
        """Locale for parsing is not known to CLDR."""
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LOCALE_UNKNOWN,
            message=msg,
            hint="Use a locale available in Babel's CLDR data",
        )
