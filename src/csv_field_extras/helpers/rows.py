"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: rows.py
@DateTime: 2026-10-19
@Docs: Helpers to apply field codecs to rows without exposing Polars details.
按行应用字段编解码器（隐藏 Polars 细节）。
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from structlog import get_logger

from csv_field_extras.codecs import Codec
from csv_field_extras.exceptions import DecodeError, FieldDecodeError

logger = get_logger()


def iter_rows(data: Any) -> Iterator[dict[str, Any]]:
    """Iterate rows as dictionaries.
    以字典形式迭代行。

    Args:
        data: Polars DataFrame, iterable of mappings, or mapping.
            Polars DataFrame、映射行可迭代对象或单个映射。
    """
    if _is_polars_df(data):
        yield from data.to_dicts()
        return
    if isinstance(data, Mapping):
        yield dict(data)
        return
    if isinstance(data, (str, bytes)):
        raise TypeError("rows must be iterable mappings / 行数据必须是可迭代的映射")
    if isinstance(data, Iterable):
        for row in data:
            yield dict(row)
        return
    raise TypeError("rows must be iterable mappings / 行数据必须是可迭代的映射")


def format_rows(data: Any, codecs: Mapping[str, Codec[Any]]) -> list[dict[str, Any]]:
    """Encode the codec fields of every row.
    编码每行中的 codec 字段。

    Args:
        data: Polars DataFrame, iterable of mappings, or mapping.
            Polars DataFrame、映射行可迭代对象或单个映射。
        codecs: Mapping from field name to codec. Other fields pass through.
            字段名到编解码器的映射，其余字段原样保留。
    Returns:
        list[dict[str, Any]]: Encoded rows.
            编码后的行。
    """
    rows = []
    for row in iter_rows(data):
        for name, codec in codecs.items():
            if name in row:
                row[name] = codec.format(row[name])
        rows.append(row)
    return rows


def parse_rows(data: Any, codecs: Mapping[str, Codec[Any]]) -> list[dict[str, Any]]:
    """Decode the codec fields of every row.
    解码每行中的 codec 字段。

    A None cell (e.g. an empty CSV cell read by Polars) is decoded as the
    empty text.
    None 单元格（如 Polars 读取的空 CSV 单元格）按空文本解码。

    Args:
        data: Polars DataFrame, iterable of mappings, or mapping.
            Polars DataFrame、映射行可迭代对象或单个映射。
        codecs: Mapping from field name to codec. Other fields pass through.
            字段名到编解码器的映射，其余字段原样保留。
    Returns:
        list[dict[str, Any]]: Decoded rows.
            解码后的行。
    Raises:
        FieldDecodeError: A field failed to decode.
            字段解码失败时抛出。
    """
    rows = []
    for index, row in enumerate(iter_rows(data)):
        for name, codec in codecs.items():
            if name not in row:
                continue
            try:
                row[name] = codec.parse(row[name] or "")
            except DecodeError as exc:
                logger.debug("row decode failed", row=index, field=name, error_code=exc.error_code)
                raise FieldDecodeError(field=name, cause=exc) from exc
        rows.append(row)
    return rows


def _is_polars_df(value: Any) -> bool:
    """Return True if the value is a Polars DataFrame.
    如果值是 Polars DataFrame 则返回 True。

    This helper avoids importing polars at module import time by importing
    lazily on demand.
    该助手通过按需延迟导入 polars 来避免在模块导入时立即导入该库。
    """
    try:
        import polars as pl  # type: ignore
    except ImportError:
        return False
    return isinstance(value, pl.DataFrame)
