"""C-style text helpers: lenient integer parsing, field splitting and printf formatting."""

from __future__ import annotations

import operator
import re
import sys
from dataclasses import dataclass
from typing import Any, Iterator, Optional

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")

_CONVERSION = re.compile(
    r"%([-0+ #]*)(?![-0+ #])"
    r"(\*|[0-9]*)(?![0-9])"
    r"(?:\.(\*|[0-9]*)(?![0-9]))?"
    r"(.)",
    re.DOTALL,
)

_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way ``atoi`` does.

    Leading C whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits yields 0.
    """
    match = _INT_PREFIX.match(text)
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def split_fields(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [field for field in text.split(sep) if field]


@dataclass
class FormatSpec:
    """Flags, width and precision of one printf conversion."""

    left: bool = False
    zero: bool = False
    plus: bool = False
    space: bool = False
    alternate: bool = False
    width: int = 0
    precision: Optional[int] = None

    def _pad_text(self, text: str) -> str:
        return text.ljust(self.width) if self.left else text.rjust(self.width)

    def _pad_number(self, prefix: str, digits: str) -> str:
        prec_pad = 0
        if self.precision is not None:
            prec_pad = max(self.precision - len(digits), 0)
        pad = max(self.width - (len(prefix) + prec_pad + len(digits)), 0)
        zero_fill = not self.left and self.zero and self.precision is None
        body = prefix + "0" * (pad if zero_fill else 0) + "0" * prec_pad + digits
        if self.left:
            return body + " " * pad
        if zero_fill:
            return body
        return " " * pad + body


def _next_arg(values: Iterator[Any]) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _to_c_int(value: Any) -> int:
    wrapped = operator.index(value) & _UINT_MASK
    return wrapped - (1 << _INT_BITS) if wrapped >> (_INT_BITS - 1) else wrapped


def _build_spec(
    flags: str, width: str, precision: Optional[str], values: Iterator[Any]
) -> FormatSpec:
    spec = FormatSpec(
        left="-" in flags,
        zero="0" in flags,
        plus="+" in flags,
        space=" " in flags,
        alternate="#" in flags,
    )
    if width == "*":
        spec.width = _to_c_int(_next_arg(values))
        if spec.width < 0:
            spec.left = True
            spec.width = -spec.width
    elif width:
        spec.width = int(width)
    if precision == "*":
        requested = _to_c_int(_next_arg(values))
        spec.precision = requested if requested >= 0 else None
    elif precision is not None:
        spec.precision = int(precision) if precision else 0
    if spec.left:
        spec.zero = False
    if spec.plus:
        spec.space = False
    return spec


def _format_char(value: Any, spec: FormatSpec) -> str:
    if isinstance(value, str) and len(value) == 1:
        char = value
    else:
        char = chr(operator.index(value) & 0xFF)
    return spec._pad_text(char)


def _format_str(value: Any, spec: FormatSpec) -> str:
    text = "(null)" if value is None else str(value)
    if spec.precision is not None:
        text = text[: spec.precision]
    return spec._pad_text(text)


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return "0x" + format(address & _POINTER_MASK, "x")


def _format_signed(value: Any, spec: FormatSpec) -> str:
    number = _to_c_int(value)
    if number < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    return spec._pad_number(sign, str(abs(number)))


def _format_unsigned(value: Any, conversion: str, spec: FormatSpec) -> str:
    number = operator.index(value) & _UINT_MASK
    base = {"u": "d", "x": "x", "X": "X"}[conversion]
    prefix = ""
    if spec.alternate and number != 0 and conversion in "xX":
        prefix = "0" + conversion
    return spec._pad_number(prefix, format(number, base))


def _convert(conversion: str, spec: FormatSpec, values: Iterator[Any]) -> str:
    if conversion == "c":
        return _format_char(_next_arg(values), spec)
    if conversion == "s":
        return _format_str(_next_arg(values), spec)
    if conversion == "p":
        return _format_pointer(_next_arg(values))
    if conversion in ("d", "i"):
        return _format_signed(_next_arg(values), spec)
    if conversion in ("u", "x", "X"):
        return _format_unsigned(_next_arg(values), conversion, spec)
    if conversion == "%":
        return "%"
    return "%" + conversion


def format_printf(fmt: str, *args: Any) -> str:
    """Format ``args`` with a printf-style format string and return the text.

    Supports ``c s p d i u x X %`` with the ``- 0 + space #`` flags, width and
    precision (either of which may be ``*``). Unknown conversions are kept as
    written; a ``%`` ending the string is literal. Raises ``TypeError`` when
    the arguments run out.
    """
    values = iter(args)
    parts = []
    last = 0
    for match in _CONVERSION.finditer(fmt):
        parts.append(fmt[last : match.start()])
        flags, width, precision, conversion = match.groups()
        spec = _build_spec(flags, width, precision, values)
        parts.append(_convert(conversion, spec, values))
        last = match.end()
    parts.append(fmt[last:])
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write formatted text to standard output and return its length."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)