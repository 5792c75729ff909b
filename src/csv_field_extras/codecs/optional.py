"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: optional.py
@DateTime: 2026-10-19
@Docs: Optional value adapter for any codec.
为任意编解码器添加“缺失值”处理的适配器。
"""

from typing import TypeVar

from csv_field_extras.codecs.base import Codec, FieldCodec
from csv_field_extras.codecs.pairs import ImageSizeCodec, LatLonCodec
from csv_field_extras.config import CodecConfig

T = TypeVar("T")


class OptionalCodec(FieldCodec[T | None]):
    """Codec mapping None to the empty text.
    将 None 映射为空文本的编解码器。

    Notes:
        NumberListCodec and NumberMatrixCodec already read the empty text as
        an empty collection. Wrapping them here makes the empty text decode
        to None, so an empty collection comes back as None.
        NumberListCodec/NumberMatrixCodec 已将空文本视为空集合；在其外层包装后空文本
        将解码为 None，空集合无法往返。
    """

    def __init__(self, inner: Codec[T], *, config: CodecConfig | None = None) -> None:
        super().__init__(config=config)
        self.inner = inner

    def parse(self, value: str) -> T | None:
        text = self.config.prepare(value)
        if not text:
            return None
        return self.inner.parse(text)

    def format(self, value: T | None) -> str:
        if value is None:
            return ""
        return self.inner.format(value)


maybe_image_size: OptionalCodec[tuple[int, int]] = OptionalCodec(ImageSizeCodec())
maybe_lat_lon: OptionalCodec[tuple[float, float]] = OptionalCodec(LatLonCodec())
