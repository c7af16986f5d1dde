"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: resource.py
@DateTime: 2026-02-12
@Docs: Host model glue registering formatted accessors as properties.
宿主模型胶水层：将格式化访问器注册为属性。

Usage / 用法:

    >>> from decimal import Decimal
    >>> @formatted_decimal("total", "sub_total", locale="it")
    ... class Invoice:
    ...     def __init__(self, total: Decimal, sub_total: Decimal) -> None:
    ...         self.total = total
    ...         self.sub_total = sub_total
    >>> invoice = Invoice(Decimal("1234.567"), Decimal("10"))
    >>> invoice.formatted_total
    "1'234,56"
    >>> invoice.formatted_sub_total = "20,5"
    >>> invoice.sub_total
    Decimal('20.5')
"""

from collections.abc import Callable, Iterable
from typing import Any, ClassVar, Self, TypeAlias

from pydantic import BaseModel, PrivateAttr

from formatted_decimal.binder import AttributeBinding, ObjectAttributeStore, bind_one, normalize_names
from formatted_decimal.config import resolve_config
from formatted_decimal.typing import ConfigProvider

InstanceLocale: TypeAlias = str | Callable[[Any], str | None] | None


def _instance_locale(obj: Any, locale: InstanceLocale) -> str | None:
    if callable(locale):
        return locale(obj)
    return locale


def _accessor_property(binding: AttributeBinding, config: ConfigProvider, locale: InstanceLocale) -> property:
    source = binding.source_name

    def fget(obj: Any) -> str:
        return bind_one(source, ObjectAttributeStore(obj), config, locale=_instance_locale(obj, locale)).get()

    def fset(obj: Any, value: Any) -> None:
        bind_one(source, ObjectAttributeStore(obj), config, locale=_instance_locale(obj, locale)).set(value)

    return property(fget, fset, doc=f"Locale-formatted view of `{source}`.")


def install_accessors(
    cls: type[Any],
    names: str | Iterable[str],
    config: ConfigProvider | None = None,
    *,
    locale: InstanceLocale = None,
) -> list[AttributeBinding]:
    """Register `formatted_<name>` properties on a class.

    在类上注册 `formatted_<name>` 属性。

    Args:
        cls: Host class.
            宿主类。
        names: Source attribute names.
            源属性名。
        config: Config provider; defaults to `resolve_config().provider()`.
            配置提供者；默认使用 `resolve_config().provider()`。
        locale: Locale name, or a callable receiving the instance.
            区域名称，或接收实例的可调用对象。

    Returns:
        list[AttributeBinding]: Installed bindings. Installing a name again
            replaces its property.
        list[AttributeBinding]: 已安装的绑定；重复安装会替换原属性。
    """
    provider = config if config is not None else resolve_config().provider()
    bindings = [AttributeBinding.for_name(name) for name in normalize_names(names)]
    for binding in bindings:
        setattr(cls, binding.formatted_name, _accessor_property(binding, provider, locale))
    return bindings


def formatted_decimal(
    *names: str,
    config: ConfigProvider | None = None,
    locale: InstanceLocale = None,
) -> Callable[[type[Any]], type[Any]]:
    """Class decorator form of `install_accessors`.

    `install_accessors` 的类装饰器形式。
    """

    def decorator(cls: type[Any]) -> type[Any]:
        install_accessors(cls, names, config, locale=locale)
        return cls

    return decorator


class FormattedDecimalModel(BaseModel):
    """
    FormattedDecimalModel
    格式化小数模型

    Pydantic base model exposing `formatted_<name>` views over decimal fields.
    暴露小数字段 `formatted_<name>` 视图的 Pydantic 基础模型。

    Notes:
        The locale is carried per instance (`with_locale`) and falls back to
        `default_locale`, then to the provider's default.
        区域按实例携带（`with_locale`），依次回退到 `default_locale` 与提供者默认值。
    """

    formatted_fields: ClassVar[tuple[str, ...]] = ()
    format_provider: ClassVar[ConfigProvider | None] = None
    default_locale: ClassVar[str | None] = None

    _locale: str | None = PrivateAttr(default=None)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if cls.formatted_fields:
            install_accessors(cls, cls.formatted_fields, cls.format_provider, locale=cls.format_locale)

    def format_locale(self) -> str | None:
        """Return the locale used by this instance's formatted fields.

        返回该实例格式化字段使用的区域。
        """
        return self._locale or self.default_locale

    def with_locale(self, locale: str | None) -> Self:
        """Set the instance locale and return the instance.

        设置实例区域并返回实例本身。
        """
        self._locale = locale
        return self
