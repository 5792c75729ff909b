"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Codecs for compound field values.
复合字段值编解码器。
"""

from csv_field_extras.codecs.base import Codec, FieldCodec
from csv_field_extras.codecs.optional import OptionalCodec, maybe_image_size, maybe_lat_lon
from csv_field_extras.codecs.pairs import GEO_SEPARATOR, SIZE_SEPARATOR, FixedPairCodec, ImageSizeCodec, LatLonCodec
from csv_field_extras.codecs.sequences import (
    LIST_SEPARATOR,
    ROW_SEPARATOR,
    NumberListCodec,
    NumberMatrixCodec,
    vec_num,
    vec_vec_num,
)

__all__ = [
    "Codec",
    "FieldCodec",
    "FixedPairCodec",
    "GEO_SEPARATOR",
    "ImageSizeCodec",
    "LIST_SEPARATOR",
    "LatLonCodec",
    "NumberListCodec",
    "NumberMatrixCodec",
    "OptionalCodec",
    "ROW_SEPARATOR",
    "SIZE_SEPARATOR",
    "maybe_image_size",
    "maybe_lat_lon",
    "vec_num",
    "vec_vec_num",
]
