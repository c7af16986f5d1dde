"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: binder.py
@DateTime: 2026-02-12
@Docs: Formatted accessor pairs over named numeric attributes.
命名数值属性的格式化访问器对。

`bind` is a pure factory: it returns getter/setter closures keyed by
`formatted_<name>` and leaves registering them to the host object model.
`bind` 是纯工厂：返回以 `formatted_<name>` 为键的读写闭包，由宿主对象模型负责注册。

Examples:
    >>> from decimal import Decimal
    >>> from formatted_decimal.config import resolve_config
    >>> row = {"total": Decimal("1234.5")}
    >>> pairs = bind({"total"}, MappingAttributeStore(row), resolve_config().provider(), locale="it")
    >>> pairs["formatted_total"].get()
    "1'234,5"
    >>> pairs["formatted_total"].set("2'000,75")
    >>> row["total"]
    Decimal('2000.75')
"""

from collections.abc import Callable, Iterable, MutableMapping
from dataclasses import dataclass
from typing import Any

from formatted_decimal.codecs import format_decimal, parse_decimal
from formatted_decimal.exceptions import FormattedDecimalError
from formatted_decimal.typing import AttributeStore, ConfigProvider, LocaleSource

FORMATTED_PREFIX = "formatted_"


@dataclass(frozen=True, slots=True)
class AttributeBinding:
    """Declaration of one formatted view over a source attribute.

    对源属性的格式化视图声明。

    Attributes:
        source_name: Underlying numeric attribute.
            底层数值属性名。
        formatted_name: Name of the formatted accessor.
            格式化访问器名称。
    """

    source_name: str
    formatted_name: str

    @classmethod
    def for_name(cls, name: str) -> "AttributeBinding":
        """Create the binding for `name`.

        为 `name` 创建绑定。

        Raises:
            FormattedDecimalError: Name is not a valid identifier.
                名称不是合法标识符。
        """
        source = str(name).strip()
        if not source.isidentifier():
            raise FormattedDecimalError(
                message=f"Invalid attribute name / 非法属性名: {name!r}",
                details={"name": name},
                error_code="invalid_attribute_name",
            )
        return cls(source_name=source, formatted_name=f"{FORMATTED_PREFIX}{source}")


@dataclass(frozen=True, slots=True)
class AccessorPair:
    """Getter/setter pair for one binding.

    单个绑定的读写函数对。

    Attributes:
        binding: The binding served by this pair.
            该函数对服务的绑定。
        get: `get(locale=None) -> str`.
        set: `set(value, locale=None) -> None`.
    """

    binding: AttributeBinding
    get: Callable[..., str]
    set: Callable[..., None]


class ObjectAttributeStore:
    """Attribute store over an object's attributes.
    基于对象属性的属性存储。
    """

    def __init__(self, obj: Any) -> None:
        self.obj = obj

    def get(self, name: str) -> Any:
        return getattr(self.obj, name)

    def set(self, name: str, value: Any) -> None:
        setattr(self.obj, name, value)


class MappingAttributeStore:
    """Attribute store over a mutable mapping.
    基于可变映射的属性存储。
    """

    def __init__(self, data: MutableMapping[str, Any]) -> None:
        self.data = data

    def get(self, name: str) -> Any:
        return self.data.get(name)

    def set(self, name: str, value: Any) -> None:
        self.data[name] = value


def _current_locale(locale: LocaleSource) -> str | None:
    if callable(locale):
        return locale()
    return locale


def normalize_names(names: str | Iterable[str]) -> list[str]:
    if isinstance(names, str):
        names = [names]
    seen: dict[str, None] = {}
    for name in names:
        seen.setdefault(str(name).strip(), None)
    return list(seen)


def bind_one(
    name: str,
    store: AttributeStore,
    config: ConfigProvider,
    *,
    locale: LocaleSource = None,
) -> AccessorPair:
    """Build the accessor pair for a single attribute.

    为单个属性构建访问器对。

    Args:
        name: Source attribute name.
            源属性名。
        store: Store holding the source attribute.
            持有源属性的存储。
        config: Provider resolving the number format.
            解析数字格式的提供者。
        locale: Locale name, or a callable returning it on every call.
            区域名称，或每次调用时返回区域名称的可调用对象。

    Returns:
        AccessorPair: Closures reading and writing through `store`.
        AccessorPair: 通过 `store` 读写的闭包。
    """
    binding = AttributeBinding.for_name(name)
    source = binding.source_name
    locale_source = locale

    def getter(locale: str | None = None) -> str:
        spec = config.resolve(locale or _current_locale(locale_source))
        return format_decimal(store.get(source), spec)

    def setter(value: Any, locale: str | None = None) -> None:
        spec = config.resolve(locale or _current_locale(locale_source))
        store.set(source, parse_decimal(value, spec))

    return AccessorPair(binding=binding, get=getter, set=setter)


def bind(
    names: str | Iterable[str],
    store: AttributeStore,
    config: ConfigProvider,
    *,
    locale: LocaleSource = None,
) -> dict[str, AccessorPair]:
    """Build formatted accessor pairs for several attributes.

    为多个属性构建格式化访问器对。

    Duplicate names collapse into one pair; `store` and `config` are only
    captured, never modified.
    重复名称合并为一个访问器对；`store` 与 `config` 只被捕获，不会被修改。

    Args:
        names: Source attribute names (a single string is one name).
            源属性名（单个字符串视为一个名称）。
        store: Store holding the source attributes.
            持有源属性的存储。
        config: Provider resolving the number format.
            解析数字格式的提供者。
        locale: Locale name, or a callable returning it on every call.
            区域名称，或每次调用时返回区域名称的可调用对象。

    Returns:
        dict[str, AccessorPair]: Mapping from formatted name to accessor pair.
        dict[str, AccessorPair]: 格式化名称到访问器对的映射。
    """
    pairs: dict[str, AccessorPair] = {}
    for name in normalize_names(names):
        pair = bind_one(name, store, config, locale=locale)
        pairs[pair.binding.formatted_name] = pair
    return pairs
