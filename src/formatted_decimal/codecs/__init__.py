"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-12
@Docs: Codecs for parsing/formatting locale decimals.
区域小数编解码器。
"""

from formatted_decimal.codecs.base import Codec
from formatted_decimal.codecs.locale_decimal import (
    DecimalCodec,
    LocaleDecimalCodec,
    format_decimal,
    format_strict,
    parse_decimal,
    parse_strict,
)

__all__ = [
    "Codec",
    "DecimalCodec",
    "LocaleDecimalCodec",
    "format_decimal",
    "format_strict",
    "parse_decimal",
    "parse_strict",
]
