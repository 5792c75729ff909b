"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: numbers.py
@DateTime: 2026-10-19
@Docs: Canonical number rendering and strict number parsing.
数字的规范化渲染与严格解析。

Python's int() and float() accept surrounding whitespace, digit-group
underscores and non-ASCII digits. None of those are valid inside a field,
so every component is matched against an ASCII pattern before conversion.
Python 的 int()/float() 接受空白、下划线分组与非 ASCII 数字，字段内均不允许，
因此先用 ASCII 正则匹配再转换。
"""

import math
import operator
import re
import struct
from decimal import Decimal

from csv_field_extras.exceptions import InvalidNumberError

_SIGNED_INT_RE = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def format_int(value: int) -> str:
    """Render an integer in canonical decimal form.
    以规范十进制形式渲染整数。

    Raises:
        TypeError: The value is not an integer (floats are not truncated).
            值不是整数时抛出（不截断浮点数）。
    """
    return str(int(operator.index(value)))


def parse_int(text: str, *, signed: bool = True, bits: int | None = None) -> int:
    """Parse a decimal integer strictly.
    严格解析十进制整数。

    Args:
        text: Component text.
            分量文本。
        signed: Accept a leading minus sign.
            是否接受负号。
        bits: Unsigned bit width bound, if any.
            无符号位宽上限（可选）。

    Returns:
        int: Parsed value.
            解析结果。

    Raises:
        InvalidNumberError: Malformed text or value out of range.
            文本非法或超出范围时抛出。
    """
    pattern = _SIGNED_INT_RE if signed else _UNSIGNED_INT_RE
    if pattern.fullmatch(text) is None:
        raise InvalidNumberError(text=text)
    value = int(text)
    if bits is not None and not 0 <= value < (1 << bits):
        raise InvalidNumberError(text=text, details={"bits": bits})
    return value


def to_single(value: float) -> float:
    """Round a float to IEEE-754 single precision.
    将浮点数舍入为 IEEE-754 单精度。
    """
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _shortest_single(value: float) -> str:
    target = to_single(value)
    if not math.isfinite(target):
        return repr(target)
    for digits in range(1, 10):
        text = f"{target:.{digits}g}"
        if to_single(float(text)) == target:
            return text
    return repr(target)


def format_float(value: float, *, single_precision: bool = False) -> str:
    """Render a float as its shortest round-trippable positional decimal.
    以最短可往返的定点十进制形式渲染浮点数。

    Trailing fractional zeros and a trailing decimal point are removed, so
    ``-135.0`` renders as ``-135``. Non-finite values keep Python's text.
    去除小数末尾的 0 与小数点，如 ``-135.0`` 渲染为 ``-135``；非有限值保留 Python 原生文本。

    Args:
        value: Value to render.
            待渲染的值。
        single_precision: Render the shortest text that round-trips at
            single precision instead of double.
            是否按单精度求最短可往返文本。

    Returns:
        str: Rendered text.
            渲染结果。
    """
    value = float(value)
    text = _shortest_single(value) if single_precision else repr(value)
    if text in ("nan", "inf", "-inf"):
        return text
    rendered = format(Decimal(text), "f")
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")
    return rendered


def parse_float(text: str, *, single_precision: bool = False) -> float:
    """Parse a float literal strictly.
    严格解析浮点字面量。

    Raises:
        InvalidNumberError: Malformed text.
            文本非法时抛出。
    """
    if _FLOAT_RE.fullmatch(text) is None:
        raise InvalidNumberError(text=text)
    value = float(text)
    return to_single(value) if single_precision else value
