"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: base.py
@DateTime: 2026-02-12
@Docs: Codec protocol for locale-formatted field values.
区域格式字段值编解码器协议。
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Codec(Protocol[T]):
    """Codec protocol bound to one number format.
    绑定单个数字格式的编解码器协议。

    Lenient codecs hand malformed text back instead of raising, so `parse`
    may return the raw input.
    宽松编解码器会原样返回错误文本而不抛出异常，因此 `parse` 可能返回原始输入。
    """

    def parse(self, value: str | None) -> T | Any | None:
        """Parse locale-formatted text.
        解析区域格式文本。

        Returns:
            The parsed value, or the raw input (blank text and None
            included) when it cannot be parsed leniently.
                解析后的值；宽松模式下无法解析时（包括空白文本和 None）返回原始输入。
        """
        ...

    def format(self, value: T | None) -> str:
        """Render a value as locale-formatted text.
        将值渲染为区域格式文本。

        Returns:
            The formatted text, or an empty string for None.
                格式化后的文本，None 时返回空字符串。
        """
        ...
