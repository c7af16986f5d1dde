"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_config.py
@DateTime: 2026-02-12
@Docs: Tests for config.py module.
config.py 模块测试。
"""

import os
from unittest.mock import patch

import pytest

from formatted_decimal.config import (
    BUILTIN_LOCALES,
    DEFAULT_LOCALE,
    FormattedDecimalConfig,
    LocaleConfigProvider,
    _env_get,
    format_spec_from_data,
    resolve_config,
)
from formatted_decimal.exceptions import ConfigResolutionError
from formatted_decimal.format_spec import DEFAULT_FORMAT_SPEC, FormatSpec
from formatted_decimal.typing import ConfigProvider


class TestEnvGet:
    """Tests for _env_get helper.
    _env_get 辅助函数测试。
    """

    def test_returns_first_nonempty(self) -> None:
        """Return first non-empty env var / 返回第一个非空环境变量。"""
        with patch.dict(os.environ, {"A": "", "B": "hello"}):
            assert _env_get("A", "B") == "hello"

    def test_returns_none_when_all_empty(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _env_get("NONEXISTENT_1", "NONEXISTENT_2") is None

    def test_strips_whitespace(self) -> None:
        with patch.dict(os.environ, {"X": "  val  "}):
            assert _env_get("X") == "val"


class TestFormatSpecFromData:
    """Tests for format_spec_from_data.
    format_spec_from_data 测试。
    """

    def test_flat_mapping(self) -> None:
        spec = format_spec_from_data({"separator": ",", "delimiter": "'", "precision": 2})
        assert spec == FormatSpec(separator=",", delimiter="'", precision=2)

    def test_i18n_shaped_mapping(self) -> None:
        """Rails-style `number.format` nesting / Rails 风格 `number.format` 嵌套。"""
        data = {"number": {"format": {"separator": ",", "delimiter": "'", "precision": 2}}}
        assert format_spec_from_data(data) == FormatSpec(separator=",", delimiter="'", precision=2)

    def test_explicit_none_precision_disables_truncation(self) -> None:
        data = {"separator": ",", "delimiter": ".", "precision": None}
        assert format_spec_from_data(data).precision is None

    @pytest.mark.parametrize(
        ("data", "missing"),
        [
            ({"separator": ",", "delimiter": "."}, ["precision"]),
            ({"delimiter": ".", "precision": 2}, ["separator"]),
            ({"number": {"format": {"separator": ","}}}, ["delimiter", "precision"]),
        ],
    )
    def test_missing_key_raises(self, data: dict, missing: list[str]) -> None:
        """Every key is required / 所有键均为必填。"""
        with pytest.raises(ConfigResolutionError) as exc_info:
            format_spec_from_data(data)
        assert exc_info.value.details == {"missing": missing}

    @pytest.mark.parametrize(
        "data",
        [
            None,
            "oops",
            {"number": "oops"},
            {"number": {"currency": {}}},
            {"separator": ","},
            {"separator": ",", "delimiter": ",", "precision": 2},
        ],
    )
    def test_malformed_raises(self, data: object) -> None:
        with pytest.raises(ConfigResolutionError) as exc_info:
            format_spec_from_data(data)
        assert exc_info.value.error_code == "config_resolution_failure"


class TestLocaleConfigProvider:
    """Tests for LocaleConfigProvider.
    LocaleConfigProvider 测试。
    """

    def test_known_locale(self, provider: LocaleConfigProvider) -> None:
        assert provider.resolve("it") == FormatSpec(separator=",", delimiter="'", precision=2)
        assert provider.resolve("de") == FormatSpec(separator=",", delimiter=".", precision=3)

    def test_unknown_locale_falls_back(self, provider: LocaleConfigProvider) -> None:
        """Unknown locale resolves to the default / 未知区域解析为默认格式。"""
        assert provider.resolve("xx") == FormatSpec(separator=".", delimiter="", precision=3)

    def test_none_uses_default_locale(self, provider: LocaleConfigProvider) -> None:
        assert provider.resolve() == provider.resolve("it")

    def test_no_default_locale(self) -> None:
        provider = LocaleConfigProvider(BUILTIN_LOCALES)
        assert provider.resolve() is DEFAULT_FORMAT_SPEC

    def test_malformed_locale_falls_back(self) -> None:
        provider = LocaleConfigProvider({"bad": {"separator": "", "delimiter": ",", "precision": 2}, "odd": 42})
        assert provider.resolve("bad") is DEFAULT_FORMAT_SPEC
        assert provider.resolve("odd") is DEFAULT_FORMAT_SPEC

    def test_missing_precision_falls_back(self) -> None:
        """A partial locale resolves to the default / 不完整的区域解析为默认格式。"""
        provider = LocaleConfigProvider({"it": {"separator": ",", "delimiter": "'"}})
        assert provider.resolve("it") is DEFAULT_FORMAT_SPEC
        with pytest.raises(ConfigResolutionError):
            provider.resolve_strict("it")

    def test_non_string_locale_falls_back(self, provider: LocaleConfigProvider) -> None:
        assert provider.resolve(["it"]) is DEFAULT_FORMAT_SPEC  # type: ignore[arg-type]
        assert provider.resolve({"it": 1}) is DEFAULT_FORMAT_SPEC  # type: ignore[arg-type]
        with pytest.raises(ConfigResolutionError):
            provider.resolve_strict(["it"])  # type: ignore[arg-type]

    def test_resolve_strict_raises(self, provider: LocaleConfigProvider) -> None:
        with pytest.raises(ConfigResolutionError) as exc_info:
            provider.resolve_strict("xx")
        assert exc_info.value.details == {"locale": "xx"}

    def test_input_is_copied(self) -> None:
        """Later changes to the source table are not seen / 之后对源表的修改不可见。"""
        locales = {"it": {"separator": ",", "delimiter": "'", "precision": 2}}
        provider = LocaleConfigProvider(locales)
        locales["it"]["precision"] = 5
        locales["fr"] = {"separator": ",", "delimiter": " ", "precision": 3}
        assert provider.resolve("it").precision == 2
        assert provider.locales == ("it",)

    def test_locales_sorted(self, provider: LocaleConfigProvider) -> None:
        assert provider.locales == ("de", "de-CH", "en", "fr", "it")

    def test_satisfies_protocol(self, provider: LocaleConfigProvider) -> None:
        assert isinstance(provider, ConfigProvider)


class TestResolveConfig:
    """Tests for resolve_config.
    resolve_config 测试。
    """

    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = resolve_config()
        assert cfg.default_locale == DEFAULT_LOCALE
        assert dict(cfg.locales) == dict(BUILTIN_LOCALES)

    def test_env_default_locale(self) -> None:
        with patch.dict(os.environ, {"FORMATTED_DECIMAL_DEFAULT_LOCALE": "de"}, clear=True):
            assert resolve_config().default_locale == "de"

    def test_env_locale_alias(self) -> None:
        with patch.dict(os.environ, {"FORMATTED_DECIMAL_LOCALE": "fr"}, clear=True):
            assert resolve_config().default_locale == "fr"

    def test_custom_env_prefix(self) -> None:
        with patch.dict(os.environ, {"APP_NUM_DEFAULT_LOCALE": "it"}, clear=True):
            assert resolve_config(env_prefix="APP_NUM").default_locale == "it"

    def test_parameter_wins(self) -> None:
        with patch.dict(os.environ, {"FORMATTED_DECIMAL_DEFAULT_LOCALE": "de"}, clear=True):
            assert resolve_config(default_locale="it").default_locale == "it"

    def test_custom_locales(self) -> None:
        locales = {"xx": {"separator": "!", "delimiter": "_", "precision": None}}
        cfg = resolve_config(default_locale="xx", locales=locales)
        assert cfg.provider().resolve() == FormatSpec(separator="!", delimiter="_")

    def test_provider(self) -> None:
        provider = FormattedDecimalConfig(default_locale="it").provider()
        assert provider.default_locale == "it"
        assert provider.resolve().separator == ","
