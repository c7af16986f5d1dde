"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-02-12
@Docs: Shared test fixtures for the formatted-decimal test suite.
测试套件的公共 fixtures。
"""

from decimal import Decimal
from typing import Any

import pytest

from formatted_decimal.config import BUILTIN_LOCALES, LocaleConfigProvider
from formatted_decimal.format_spec import FormatSpec


@pytest.fixture
def it_spec() -> FormatSpec:
    """Swiss-Italian style format: `1'234'567,89`.
    瑞士意大利风格格式：`1'234'567,89`。
    """
    return FormatSpec(separator=",", delimiter="'", precision=2)


@pytest.fixture
def provider() -> LocaleConfigProvider:
    """Provider over the built-in locales, defaulting to `it`.
    基于内置区域表的提供者，默认区域为 `it`。
    """
    return LocaleConfigProvider(BUILTIN_LOCALES, default_locale="it")


@pytest.fixture
def invoice_row() -> dict[str, Any]:
    """A mutable row holding two decimal attributes.
    包含两个小数属性的可变行。
    """
    return {"total": Decimal("1234.5"), "sub_total": Decimal("1000")}
