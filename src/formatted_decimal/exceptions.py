"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-02-12
@Docs: Formatted decimal error hierarchy.
格式化小数异常体系。

The public codec and binder operations never raise these errors; they are
raised by the strict helpers and converted into fallback values at the edge.
公开的编解码与绑定操作不会抛出这些异常；它们由严格模式辅助函数抛出，并在边界处转换为回退值。
"""

from typing import Any


class FormattedDecimalError(Exception):
    """
    Formatted decimal errors.
    格式化小数异常。

    Attributes:
        message: Error message.
        message: 错误消息。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    default_error_code = "formatted_decimal_error"

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.error_code = error_code or self.default_error_code


class ConfigResolutionError(FormattedDecimalError):
    """
    Locale number format is missing or malformed.
    区域数字格式缺失或格式错误。
    """

    default_error_code = "config_resolution_failure"


class ParseError(FormattedDecimalError):
    """
    Formatted text cannot be parsed into a decimal.
    格式化文本无法解析为小数。
    """

    default_error_code = "malformed_numeric_input"


class FormatError(FormattedDecimalError):
    """
    Value cannot be rendered as a decimal string.
    值无法渲染为小数字符串。
    """

    default_error_code = "malformed_value"
