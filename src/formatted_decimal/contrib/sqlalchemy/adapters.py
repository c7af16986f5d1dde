"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: adapters.py
@DateTime: 2026-02-12
@Docs: SQLAlchemy adapter helpers.
SQLAlchemy 适配器辅助函数。
"""

from typing import Any

from formatted_decimal.binder import AttributeBinding
from formatted_decimal.exceptions import FormattedDecimalError
from formatted_decimal.resource import InstanceLocale, install_accessors
from formatted_decimal.typing import ConfigProvider


def _require_sqlalchemy() -> Any:
    try:
        import sqlalchemy as sa

        return sa
    except Exception as exc:  # pragma: no cover
        raise FormattedDecimalError(
            message="Missing optional dependency: sqlalchemy / 缺少可选依赖: sqlalchemy",
            details={"error": str(exc)},
            error_code="missing_dependency",
        ) from exc


def decimal_columns(model: Any) -> list[str]:
    """List the model's columns that hold Decimal values.

    列出模型中保存 Decimal 值的列。

    `Numeric(asdecimal=False)` and `Float` columns are skipped.
    跳过 `Numeric(asdecimal=False)` 与 `Float` 列。

    Raises:
        FormattedDecimalError: Model has no `__table__`.
            模型缺少 `__table__`。
    """
    sa = _require_sqlalchemy()
    table = getattr(model, "__table__", None)
    if table is None:
        raise FormattedDecimalError(
            message="SQLAlchemy model missing __table__ / 模型缺少 __table__",
            error_code="invalid_model",
        )
    names: list[str] = []
    for col in list(table.columns):
        col_type = col.type
        if not isinstance(col_type, sa.Numeric) or isinstance(col_type, sa.Float):
            continue
        if not getattr(col_type, "asdecimal", True):
            continue
        names.append(str(col.key))
    return names


def formatted_columns(
    model: Any,
    *names: str,
    config: ConfigProvider | None = None,
    locale: InstanceLocale = None,
) -> list[AttributeBinding]:
    """Install `formatted_<column>` properties on a declarative model.

    在声明式模型上安装 `formatted_<column>` 属性。

    Args:
        model: SQLAlchemy declarative model class.
            SQLAlchemy 声明式模型类。
        *names: Column attribute names; all decimal columns when omitted.
            列属性名；省略时使用全部小数列。
        config: Config provider.
            配置提供者。
        locale: Locale name, or a callable receiving the instance.
            区域名称，或接收实例的可调用对象。

    Returns:
        list[AttributeBinding]: Installed bindings.
        list[AttributeBinding]: 已安装的绑定。
    """
    selected = list(names) if names else decimal_columns(model)
    return install_accessors(model, selected, config, locale=locale)
