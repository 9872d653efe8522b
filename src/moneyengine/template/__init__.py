"""Template pattern language: parser and renderer.

    >>> from decimal import Decimal
    >>> from moneyengine.template import format_with_template, parse_template
    >>> format_with_template(Decimal("1000.50"), parse_template("{Symbol} 1,000.50"), "$")
    '$ 1,000.50'

Python 3.13+.
"""

from .parser import is_directive_template, parse_template
from .pattern import NumberPattern, SegmentKind, TemplatePattern, TemplateSegment
from .renderer import format_parts_with_template, format_with_template

__all__ = [
    "NumberPattern",
    "SegmentKind",
    "TemplatePattern",
    "TemplateSegment",
    "format_parts_with_template",
    "format_with_template",
    "is_directive_template",
    "parse_template",
]
