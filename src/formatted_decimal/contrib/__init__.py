"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-02-12
@Docs: Optional integrations with third-party model frameworks.
可选的第三方模型框架集成。
"""
