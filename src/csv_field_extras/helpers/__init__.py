"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Helper utilities.
辅助工具。
"""

from csv_field_extras.helpers.rows import format_rows, iter_rows, parse_rows

__all__ = ["format_rows", "iter_rows", "parse_rows"]
