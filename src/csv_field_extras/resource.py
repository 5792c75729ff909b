"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: resource.py
@DateTime: 2026-10-19
@Docs: Resource base model with explicit per-field codecs.
带显式字段编解码器的资源基类。
"""

from collections.abc import Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict
from structlog import get_logger

from csv_field_extras.codecs import Codec
from csv_field_extras.exceptions import DecodeError, FieldDecodeError

logger = get_logger()


class Resource(BaseModel):
    """
    Resource
    资源模型

    A record whose fields are turned into field texts one by one. Fields
    listed in ``field_codecs`` go through their codec; the others are
    rendered with ``str()`` and left to pydantic on the way back.
    逐字段转换为字段文本的记录。``field_codecs`` 中的字段走编解码器，其余字段用 ``str()``
    渲染，解析时交由 pydantic 处理。

    Notes:
        Record framing (quoting, line endings, headers) stays with the CSV
        writer/reader.
        记录框架（引号、换行、表头）由 CSV 读写器负责。
    """

    model_config = ConfigDict(extra="ignore")

    field_codecs: ClassVar[dict[str, Codec[Any]]] = {}

    @classmethod
    def field_order(cls) -> list[str]:
        """
        Return the declared field order.
        返回声明的字段顺序。

        Returns:
            list[str]: List of field names in order.
            list[str]: 按顺序的字段名列表。
        """
        return list(cls.model_fields.keys())

    def format_fields(self) -> dict[str, str]:
        """
        Encode every field into its text form.
        将每个字段编码为文本。

        Returns:
            dict[str, str]: Mapping from field name to field text, in field order.
            dict[str, str]: 字段名到字段文本的映射（按字段顺序）。
        """
        row: dict[str, str] = {}
        for name in self.field_order():
            value = getattr(self, name)
            codec = self.field_codecs.get(name)
            if codec is not None:
                row[name] = codec.format(value)
            else:
                row[name] = "" if value is None else str(value)
        return row

    @classmethod
    def parse_fields(cls, row: Mapping[str, str | None]) -> Self:
        """
        Decode a mapping of field texts into a resource.
        将字段文本映射解码为资源实例。

        Args:
            row: Mapping from field name to field text. Missing or None
                values are treated as the empty text for codec fields.
                字段名到字段文本的映射；codec 字段缺失或为 None 时视为空文本。

        Returns:
            Resource instance.
                资源实例。

        Raises:
            FieldDecodeError: A codec field failed to decode.
                codec 字段解码失败时抛出。
        """
        data: dict[str, Any] = dict(row)
        for name, codec in cls.field_codecs.items():
            text = row.get(name)
            try:
                data[name] = codec.parse(text or "")
            except DecodeError as exc:
                logger.debug("field decode failed", resource=cls.__name__, field=name, error_code=exc.error_code)
                raise FieldDecodeError(field=name, cause=exc) from exc
        return cls.model_validate(data)
