"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: locale_decimal.py
@DateTime: 2026-02-12
@Docs: Locale-aware decimal string codec.
区域感知的小数字符串编解码器。

`format_decimal` and `parse_decimal` are total: malformed input is returned
unchanged (as text for formatting) instead of raising. The strict variants
raise `FormatError` / `ParseError` and are what the total functions build on.
`format_decimal` 与 `parse_decimal` 是全函数：错误输入原样返回而不抛出异常。
严格版本抛出 `FormatError` / `ParseError`，全函数基于它们实现。

Precision is applied by truncation, never rounding:
精度通过截断实现，而非四舍五入：

    >>> from formatted_decimal.format_spec import FormatSpec
    >>> spec = FormatSpec(separator=",", delimiter="'", precision=2)
    >>> format_decimal(1234567.891, spec)
    "1'234'567,89"
    >>> parse_decimal("1'234'567,89", spec)
    Decimal('1234567.89')
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any

from formatted_decimal.codecs.base import Codec
from formatted_decimal.exceptions import FormatError, ParseError
from formatted_decimal.format_spec import DEFAULT_FORMAT_SPEC, FormatSpec

logger = logging.getLogger(__name__)

_PLAIN_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

# Widest plain rendering accepted before falling back to str().
MAX_PLAIN_DIGITS = 4096


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise FormatError(message="bool is not a decimal / bool 不是小数", details={"value": value})
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        # repr gives the shortest round-tripping digits, not the binary expansion.
        number = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation as exc:
            raise FormatError(message=f"Not a number / 不是数字: {value!r}", details={"value": value}) from exc
    else:
        raise FormatError(
            message=f"Unsupported type / 不支持的类型: {type(value).__name__}",
            details={"value": value},
        )
    if not number.is_finite():
        raise FormatError(message=f"Non-finite decimal / 非有限小数: {value!r}", details={"value": value})
    exponent = number.as_tuple().exponent
    if number.adjusted() > MAX_PLAIN_DIGITS or (isinstance(exponent, int) and -exponent > MAX_PLAIN_DIGITS):
        raise FormatError(
            message=f"Decimal too wide to render plainly / 小数过宽无法展开: {value!r}",
            details={"value": value, "limit": MAX_PLAIN_DIGITS},
        )
    return number


def _group(integer: str, delimiter: str) -> str:
    if not delimiter:
        return integer
    sign, digits = (integer[0], integer[1:]) if integer.startswith(("+", "-")) else ("", integer)
    if len(digits) <= 3:
        return integer
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i : i + 3] for i in range(head, len(digits), 3)]
    return sign + delimiter.join(groups)


def format_strict(value: Any, spec: FormatSpec) -> str:
    """Format a number with the given spec, raising on malformed input.

    按给定格式格式化数字，输入错误时抛出异常。

    Args:
        value: Decimal, int, float, or numeric string.
            Decimal、int、float 或数字字符串。
        spec: Target number format.
            目标数字格式。

    Returns:
        The formatted string.
            格式化后的字符串。

    Raises:
        FormatError: Value is not a finite number.
            值不是有限数字。
    """
    canonical = format(_to_decimal(value), "f")
    integer, _, fraction = canonical.partition(".")
    if spec.precision is not None:
        fraction = fraction[: spec.precision]
    integer = _group(integer, spec.delimiter)
    if not fraction:
        return integer
    return f"{integer}{spec.separator}{fraction}"


def parse_strict(text: Any, spec: FormatSpec) -> Decimal:
    """Parse formatted text with the given spec, raising on malformed input.

    按给定格式解析文本，输入错误时抛出异常。

    Args:
        text: Formatted number text.
            格式化后的数字文本。
        spec: Source number format.
            源数字格式。

    Returns:
        The exact Decimal value.
            精确的 Decimal 值。

    Raises:
        ParseError: Text is not a string or not a plain decimal after
            removing the locale markers.
            文本不是字符串，或去除区域标记后不是普通小数。
    """
    if not isinstance(text, str):
        raise ParseError(
            message=f"Expected text / 需要文本: {type(text).__name__}",
            details={"value": text},
        )
    integer, found, fraction = text.strip().partition(spec.separator)
    if spec.delimiter:
        integer = integer.replace(spec.delimiter, "")
    if found and spec.precision is not None:
        fraction = fraction[: spec.precision]
    canonical = f"{integer}.{fraction}" if found else integer
    if "." in integer or not _PLAIN_DECIMAL.fullmatch(canonical):
        raise ParseError(message=f"Not a number / 不是数字: {text!r}", details={"value": text})
    return Decimal(canonical)


def format_decimal(value: Any, spec: FormatSpec) -> str:
    """Format a number, returning `str(value)` when it cannot be formatted.

    格式化数字，无法格式化时返回 `str(value)`。

    None formats as an empty string.
    None 格式化为空字符串。
    """
    if value is None:
        return ""
    try:
        return format_strict(value, spec)
    except FormatError as exc:
        logger.debug("Formatting fell back to str(): %s", exc.message)
        return str(value)


def parse_decimal(text: Any, spec: FormatSpec) -> Any:
    """Parse formatted text, returning the input unchanged when it cannot be parsed.

    解析格式化文本，无法解析时原样返回输入。
    """
    try:
        return parse_strict(text, spec)
    except ParseError as exc:
        logger.debug("Parsing fell back to the raw input: %s", exc.message)
        return text


class DecimalCodec:
    """Stateless decimal codec over an explicit FormatSpec.
    基于显式 FormatSpec 的无状态小数编解码器。
    """

    format = staticmethod(format_decimal)
    parse = staticmethod(parse_decimal)
    format_strict = staticmethod(format_strict)
    parse_strict = staticmethod(parse_strict)


class LocaleDecimalCodec(Codec[Decimal]):
    """Codec for locale-formatted Decimal values.
    区域格式 Decimal 编解码器。

    Parsing follows `parse_decimal`: blank or malformed text is returned
    unchanged, or raises `ParseError` with `strict=True`.
    解析行为与 `parse_decimal` 一致：空白或错误文本原样返回；`strict=True` 时抛出 `ParseError`。
    """

    def __init__(self, spec: FormatSpec = DEFAULT_FORMAT_SPEC, *, strict: bool = False) -> None:
        self.spec = spec
        self.strict = strict

    def parse(self, value: str | None) -> Decimal | Any:
        if self.strict:
            return parse_strict(value, self.spec)
        return parse_decimal(value, self.spec)

    def format(self, value: Decimal | None) -> str:
        return format_decimal(value, self.spec)
