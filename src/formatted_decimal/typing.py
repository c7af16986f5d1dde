"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: typing.py
@DateTime: 2026-02-12
@Docs: Shared protocols and types for formatted decimals.
格式化小数共享协议与类型。
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeAlias, runtime_checkable

from formatted_decimal.format_spec import FormatSpec

LocaleSource: TypeAlias = str | Callable[[], str | None] | None


@runtime_checkable
class ConfigProvider(Protocol):
    """
    Config provider protocol.
    配置提供者协议。

    Implementations must be total: missing or malformed locale data resolves
    to the default format instead of raising.
    实现必须是全函数：区域数据缺失或格式错误时返回默认格式，而不是抛出异常。
    """

    def resolve(self, locale: str | None = None) -> FormatSpec: ...


@runtime_checkable
class AttributeStore(Protocol):
    """
    Attribute store protocol.
    属性存储协议。

    Get/set access to named numeric attributes of a host object.
    对宿主对象命名数值属性的读写访问。
    """

    def get(self, name: str) -> Any: ...

    def set(self, name: str, value: Any) -> None: ...
