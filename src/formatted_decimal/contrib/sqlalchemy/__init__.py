"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-12
@Docs: SQLAlchemy contrib adapters.
SQLAlchemy 贡献适配层。
"""

from formatted_decimal.contrib.sqlalchemy.adapters import decimal_columns, formatted_columns

__all__ = ["decimal_columns", "formatted_columns"]
