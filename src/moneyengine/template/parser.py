"""Template parser: template string -> TemplatePattern.

Two template forms are understood.

Example form - a symbol token plus a literal numeric example:

    "{Symbol} 5.000.00,50"   -> prefix, thousands ".", decimal ",", 2 digits
    "1 000,00 {Symbol}"      -> suffix, thousands " ", decimal ",", 2 digits
    "{Symbol:TL} 100"        -> prefix, custom symbol "TL", 0 digits

Directive form - typed tokens, with any other text kept verbatim:

    "{integer|,}{fraction|.|2}{currency}"
    "Fiyat: {integer|.} {fraction|,|2} {currency} "

A bare {integer} groups with "."; a bare {fraction} is {fraction|,|2}.
{integer|} disables grouping.

The parser is a pure function of the template text; callers memoise it by
that text (see FormatterCache).

Python 3.13+. Zero external dependencies.
"""

import re

from moneyengine.constants import (
    DIRECTIVE_DECIMAL_SEPARATOR,
    DIRECTIVE_FRACTION_DIGITS,
    DIRECTIVE_GROUP_SEPARATOR,
    TEMPLATE_OPTIONS_DELIMITER,
)
from moneyengine.diagnostics import ErrorTemplate, InvalidTemplateError
from moneyengine.enums import SymbolPosition

from .pattern import NumberPattern, SegmentKind, TemplatePattern, TemplateSegment

__all__ = ["is_directive_template", "parse_template"]

# {Symbol}, {Symbol:TL}; {currency} is accepted as an alias
_SYMBOL_TOKEN = re.compile(r"\{(?:symbol|currency)(?::([^{}]*))?\}", re.IGNORECASE)

_DIRECTIVE_TOKEN = re.compile(r"\{([^{}]+)\}")

# First numeric run: digits possibly joined by separators or spaces
_NUMERIC_RUN = re.compile(r"\d(?:[\d., \u00a0\u202f]*\d)?")

_THOUSANDS_CANDIDATES = (".", ",", " ", "\u00a0", "\u202f")

_NUMBER_TOKENS = frozenset({"integer", "fraction"})
_SYMBOL_TOKENS = frozenset({"currency", "symbol"})


def is_directive_template(template: str) -> bool:
    """Whether the template uses {integer}/{fraction} directive tokens."""
    return any(
        _token_name(match.group(1)) in _NUMBER_TOKENS
        for match in _DIRECTIVE_TOKEN.finditer(template)
    )


def parse_template(template: str) -> TemplatePattern:
    """Parse a template string into a reusable pattern.

    Args:
        template: Example-form or directive-form template

    Returns:
        Immutable TemplatePattern

    Raises:
        InvalidTemplateError: If the template has no number placeholder,
            contains unknown or repeated directive tokens, a non-numeric
            fraction precision, or identical group and decimal separators

    Examples:
        >>> pattern = parse_template("{Symbol} 5.000.00,50")
        >>> pattern.thousands_separator, pattern.decimal_separator
        ('.', ',')
        >>> pattern.number_pattern.decimal_digits
        2
        >>> parse_template("{integer|,}{fraction|.|2} {currency}").symbol_position
        <SymbolPosition.SUFFIX: 'suffix'>
    """
    if is_directive_template(template):
        return _parse_directives(template)
    return _parse_example(template)


def _token_name(body: str) -> str:
    head = body.split(TEMPLATE_OPTIONS_DELIMITER, 1)[0]
    return head.partition(":")[0].strip().lower()


# ---------------------------------------------------------------------------
# Example form
# ---------------------------------------------------------------------------


def _detect_decimal_separator(run: str) -> str:
    last_dot = run.rfind(".")
    last_comma = run.rfind(",")
    if last_dot >= 0 and last_comma >= 0:
        return "." if last_dot > last_comma else ","
    if last_comma >= 0:
        return ","
    return "."


def _detect_thousands_separator(integer_text: str, decimal_separator: str) -> str:
    found = [
        (integer_text.find(candidate), candidate)
        for candidate in _THOUSANDS_CANDIDATES
        if candidate != decimal_separator and candidate in integer_text
    ]
    return min(found)[1] if found else ""


def _parse_example(template: str) -> TemplatePattern:
    token = _SYMBOL_TOKEN.search(template)

    # Mask the token so digits inside "{Symbol:R1}" never count as the example
    masked = template
    if token is not None:
        masked = template[: token.start()] + "\x00" * len(token.group(0)) + template[token.end() :]

    run = _NUMERIC_RUN.search(masked)
    if run is None:
        raise InvalidTemplateError(
            ErrorTemplate.template_missing_integer(template), template=template
        )

    number_text = run.group(0)
    decimal_separator = _detect_decimal_separator(number_text)
    if decimal_separator in number_text:
        split_at = number_text.rfind(decimal_separator)
        integer_text, fraction_text = number_text[:split_at], number_text[split_at + 1 :]
    else:
        integer_text, fraction_text = number_text, ""

    thousands_separator = _detect_thousands_separator(integer_text, decimal_separator)
    number_pattern = NumberPattern(
        integer_digits=sum(char.isdigit() for char in integer_text),
        decimal_digits=sum(char.isdigit() for char in fraction_text),
        has_grouping=bool(thousands_separator) and thousands_separator in integer_text,
    )

    markers: list[tuple[int, int, SegmentKind]] = [(run.start(), run.end(), SegmentKind.INTEGER)]
    if token is not None:
        markers.append((token.start(), token.end(), SegmentKind.SYMBOL))
    markers.sort()

    segments: list[TemplateSegment] = []
    cursor = 0
    for start, end, kind in markers:
        if start > cursor:
            segments.append(TemplateSegment(SegmentKind.LITERAL, template[cursor:start]))
        segments.append(TemplateSegment(kind))
        if kind is SegmentKind.INTEGER:
            segments.append(TemplateSegment(SegmentKind.FRACTION))
        cursor = end
    if cursor < len(template):
        segments.append(TemplateSegment(SegmentKind.LITERAL, template[cursor:]))

    if token is None:
        position = SymbolPosition.PREFIX
    elif token.start() < len(template) / 2:
        position = SymbolPosition.PREFIX
    else:
        position = SymbolPosition.SUFFIX

    return TemplatePattern(
        symbol_position=position,
        symbol_placeholder=token.group(0) if token is not None else "",
        custom_symbol=(token.group(1) or None) if token is not None else None,
        thousands_separator=thousands_separator,
        decimal_separator=decimal_separator,
        structure=template,
        number_pattern=number_pattern,
        segments=tuple(segments),
    )


# ---------------------------------------------------------------------------
# Directive form
# ---------------------------------------------------------------------------


def _parse_precision(argument: str, template: str) -> int:
    stripped = argument.strip()
    if not (stripped.isascii() and stripped.isdigit()):
        raise InvalidTemplateError(
            ErrorTemplate.template_invalid_precision(argument, template), template=template
        )
    return int(stripped)


def _parse_directives(template: str) -> TemplatePattern:  # noqa: PLR0912 - token dispatch
    segments: list[TemplateSegment] = []
    thousands_separator = ""
    decimal_separator = DIRECTIVE_DECIMAL_SEPARATOR
    decimal_digits = 0
    placeholder = ""
    custom_symbol: str | None = None
    seen: set[str] = set()

    cursor = 0
    for token in _DIRECTIVE_TOKEN.finditer(template):
        if token.start() > cursor:
            segments.append(TemplateSegment(SegmentKind.LITERAL, template[cursor : token.start()]))
        cursor = token.end()

        head, *args = token.group(1).split(TEMPLATE_OPTIONS_DELIMITER)
        raw_name, _, literal = head.partition(":")
        name = raw_name.strip().lower()
        if name in _SYMBOL_TOKENS:
            name = "currency"
        if name in seen:
            raise InvalidTemplateError(
                ErrorTemplate.template_duplicate_token(name, template), template=template
            )
        seen.add(name)

        match name:
            case "integer":
                thousands_separator = args[0] if args else DIRECTIVE_GROUP_SEPARATOR
                segments.append(TemplateSegment(SegmentKind.INTEGER))
            case "fraction":
                if args and args[0]:
                    decimal_separator = args[0]
                decimal_digits = (
                    _parse_precision(args[1], template)
                    if len(args) > 1
                    else DIRECTIVE_FRACTION_DIGITS
                )
                segments.append(TemplateSegment(SegmentKind.FRACTION))
            case "currency":
                placeholder = token.group(0)
                custom_symbol = literal or None
                segments.append(TemplateSegment(SegmentKind.SYMBOL))
            case _:
                raise InvalidTemplateError(
                    ErrorTemplate.template_unknown_token(token.group(1), template),
                    template=template,
                )

    if cursor < len(template):
        segments.append(TemplateSegment(SegmentKind.LITERAL, template[cursor:]))

    if "integer" not in seen:
        raise InvalidTemplateError(
            ErrorTemplate.template_missing_integer(template), template=template
        )
    if "fraction" not in seen and thousands_separator == decimal_separator:
        # Never rendered without a fraction token
        decimal_separator = "."
    if thousands_separator and thousands_separator == decimal_separator:
        raise InvalidTemplateError(
            ErrorTemplate.template_separator_conflict(thousands_separator, template),
            template=template,
        )

    kinds = [segment.kind for segment in segments]
    position = SymbolPosition.PREFIX
    if "currency" in seen and kinds.index(SegmentKind.SYMBOL) > kinds.index(SegmentKind.INTEGER):
        position = SymbolPosition.SUFFIX

    return TemplatePattern(
        symbol_position=position,
        symbol_placeholder=placeholder,
        custom_symbol=custom_symbol,
        thousands_separator=thousands_separator,
        decimal_separator=decimal_separator,
        structure=template,
        number_pattern=NumberPattern(
            integer_digits=0,
            decimal_digits=decimal_digits,
            has_grouping=bool(thousands_separator),
        ),
        segments=tuple(segments),
    )
