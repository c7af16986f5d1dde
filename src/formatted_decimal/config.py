"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-02-12
@Docs: Locale number format configuration.
区域数字格式配置。

This module resolves a `FormatSpec` for a locale from already-loaded locale
data. Loading locale files is left to the host application.
本模块从已加载的区域数据中解析 `FormatSpec`，区域文件的加载由宿主应用负责。

Locale data / 区域数据:
    Each locale maps either to a flat number format, or to the I18n-shaped
    structure used by Rails locale files:
    每个区域对应一个扁平的数字格式，或 Rails 区域文件使用的 I18n 结构：

        {"it": {"separator": ",", "delimiter": "'", "precision": 2}}
        {"it": {"number": {"format": {"separator": ",", "delimiter": "'", "precision": 2}}}}

Environment variables / 环境变量:
    - FORMATTED_DECIMAL_DEFAULT_LOCALE / FORMATTED_DECIMAL_LOCALE:
        Locale used when callers do not pass one (default: en).
        调用方未传入区域时使用的区域（默认 en）。

Examples:
    >>> from formatted_decimal.config import resolve_config
    >>> provider = resolve_config(default_locale="it").provider()
    >>> provider.resolve().separator
    ','
    >>> provider.resolve("xx").precision
    3
"""

import copy
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError

from formatted_decimal.exceptions import ConfigResolutionError
from formatted_decimal.format_spec import DEFAULT_FORMAT_SPEC, FormatSpec

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"

REQUIRED_KEYS = ("separator", "delimiter", "precision")

BUILTIN_LOCALES: Mapping[str, Mapping[str, Any]] = {
    "en": {"separator": ".", "delimiter": ",", "precision": 3},
    "de": {"separator": ",", "delimiter": ".", "precision": 3},
    "fr": {"separator": ",", "delimiter": " ", "precision": 3},
    "it": {"separator": ",", "delimiter": "'", "precision": 2},
    "de-CH": {"separator": ".", "delimiter": "'", "precision": 2},
}


def format_spec_from_data(data: Any) -> FormatSpec:
    """Build a FormatSpec from one locale's number format data.

    从单个区域的数字格式数据构建 FormatSpec。

    Every key is required; an explicit `precision: None` disables truncation.
    所有键均为必填；显式的 `precision: None` 表示不截断。

    Args:
        data: Flat `{separator, delimiter, precision}` mapping, or a mapping
            holding it under `number.format`.
            扁平映射，或在 `number.format` 下包含该映射的结构。

    Returns:
        The validated FormatSpec.
            校验后的 FormatSpec。

    Raises:
        ConfigResolutionError: Data is not a mapping, misses a key, or fails
            validation.
            数据不是映射、缺少键或校验失败。
    """
    if isinstance(data, Mapping) and "number" in data:
        number = data["number"]
        data = number.get("format") if isinstance(number, Mapping) else None
    if not isinstance(data, Mapping):
        raise ConfigResolutionError(
            message="Number format must be a mapping / 数字格式必须是映射",
            details={"type": type(data).__name__},
        )
    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise ConfigResolutionError(
            message=f"Number format misses keys / 数字格式缺少键: {missing}",
            details={"missing": missing},
        )
    try:
        return FormatSpec.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigResolutionError(
            message="Malformed number format / 数字格式错误",
            details={"error": str(exc)},
        ) from exc


class LocaleConfigProvider:
    """
    Config provider over an in-memory locale table.
    基于内存区域表的配置提供者。

    `resolve` never raises: unknown locales and malformed data resolve to
    `DEFAULT_FORMAT_SPEC`.
    `resolve` 不会抛出异常：未知区域与错误数据均解析为 `DEFAULT_FORMAT_SPEC`。
    """

    def __init__(self, locales: Mapping[str, Any], *, default_locale: str | None = None) -> None:
        self._locales: dict[str, Any] = {str(k): copy.deepcopy(v) for k, v in locales.items()}
        self.default_locale = default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        """Return the known locale names.

        返回已知区域名称。
        """
        return tuple(sorted(self._locales))

    def resolve_strict(self, locale: str | None = None) -> FormatSpec:
        """Resolve a locale, raising on missing or malformed data.

        解析区域，数据缺失或错误时抛出异常。

        Raises:
            ConfigResolutionError: Locale unknown or data malformed.
                区域未知或数据错误。
        """
        key = locale or self.default_locale
        if not isinstance(key, str) or not key or key not in self._locales:
            raise ConfigResolutionError(
                message=f"Unknown locale / 未知区域: {key}",
                details={"locale": key},
            )
        return format_spec_from_data(self._locales[key])

    def resolve(self, locale: str | None = None) -> FormatSpec:
        """Resolve a locale, degrading to the default format.

        解析区域，失败时降级为默认格式。

        Args:
            locale: Locale name; None uses `default_locale`.
                区域名称；None 时使用 `default_locale`。

        Returns:
            The locale's FormatSpec, or DEFAULT_FORMAT_SPEC.
                区域的 FormatSpec，或 DEFAULT_FORMAT_SPEC。
        """
        try:
            return self.resolve_strict(locale)
        except ConfigResolutionError as exc:
            logger.debug("Falling back to default number format for %r: %s", locale, exc.message)
            return DEFAULT_FORMAT_SPEC


@dataclass(frozen=True, slots=True)
class FormattedDecimalConfig:
    """Formatted decimal settings.

    格式化小数设置。

    Attributes:
        default_locale: Locale used when callers pass none.
            调用方未传入区域时使用的区域。
        locales: Locale table, see module docs.
            区域表，参见模块文档。
    """

    default_locale: str = DEFAULT_LOCALE
    locales: Mapping[str, Any] = field(default_factory=lambda: dict(BUILTIN_LOCALES))

    def provider(self) -> LocaleConfigProvider:
        """Return a config provider for these settings.

        返回对应该设置的配置提供者。
        """
        return LocaleConfigProvider(self.locales, default_locale=self.default_locale)


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def resolve_config(
    *,
    default_locale: str | None = None,
    locales: Mapping[str, Any] | None = None,
    env_prefix: str = "FORMATTED_DECIMAL",
) -> FormattedDecimalConfig:
    """Resolve settings from parameters and environment variables.

    从参数和环境变量解析设置。

    Resolution order / 解析优先级:
        1) `default_locale` parameter / 函数参数 default_locale
        2) env: `{env_prefix}_DEFAULT_LOCALE` or `{env_prefix}_LOCALE`
           环境变量：`{env_prefix}_DEFAULT_LOCALE` 或 `{env_prefix}_LOCALE`
        3) `en`

    Args:
        default_locale: Default locale name.
            默认区域名称。
        locales: Locale table; defaults to `BUILTIN_LOCALES`.
            区域表；默认使用 `BUILTIN_LOCALES`。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 FORMATTED_DECIMAL）。

    Returns:
        A FormattedDecimalConfig instance.
            返回 FormattedDecimalConfig 配置实例。
    """
    env_locale = _env_get(f"{env_prefix}_DEFAULT_LOCALE", f"{env_prefix}_LOCALE")
    return FormattedDecimalConfig(
        default_locale=default_locale or env_locale or DEFAULT_LOCALE,
        locales=dict(locales) if locales is not None else dict(BUILTIN_LOCALES),
    )
