"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-12
@Docs: Package exports for formatted_decimal.
formatted_decimal 包导出定义。
"""

from formatted_decimal.binder import (
    AccessorPair,
    AttributeBinding,
    MappingAttributeStore,
    ObjectAttributeStore,
    bind,
    bind_one,
)
from formatted_decimal.codecs import (
    Codec,
    DecimalCodec,
    LocaleDecimalCodec,
    format_decimal,
    format_strict,
    parse_decimal,
    parse_strict,
)
from formatted_decimal.config import (
    BUILTIN_LOCALES,
    FormattedDecimalConfig,
    LocaleConfigProvider,
    format_spec_from_data,
    resolve_config,
)
from formatted_decimal.exceptions import ConfigResolutionError, FormatError, FormattedDecimalError, ParseError
from formatted_decimal.format_spec import DEFAULT_FORMAT_SPEC, FormatSpec
from formatted_decimal.resource import FormattedDecimalModel, formatted_decimal, install_accessors
from formatted_decimal.typing import AttributeStore, ConfigProvider

__all__ = [
    "FormatSpec",
    "DEFAULT_FORMAT_SPEC",
    "ConfigProvider",
    "AttributeStore",
    "LocaleConfigProvider",
    "FormattedDecimalConfig",
    "BUILTIN_LOCALES",
    "format_spec_from_data",
    "resolve_config",
    "Codec",
    "DecimalCodec",
    "LocaleDecimalCodec",
    "format_decimal",
    "format_strict",
    "parse_decimal",
    "parse_strict",
    "AccessorPair",
    "AttributeBinding",
    "MappingAttributeStore",
    "ObjectAttributeStore",
    "bind",
    "bind_one",
    "FormattedDecimalModel",
    "formatted_decimal",
    "install_accessors",
    "FormattedDecimalError",
    "ConfigResolutionError",
    "ParseError",
    "FormatError",
]
