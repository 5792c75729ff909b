"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Package exports for csv_field_extras.
csv_field_extras 包导出定义。
"""

from csv_field_extras.codecs import (
    GEO_SEPARATOR,
    LIST_SEPARATOR,
    ROW_SEPARATOR,
    SIZE_SEPARATOR,
    Codec,
    FieldCodec,
    FixedPairCodec,
    ImageSizeCodec,
    LatLonCodec,
    NumberListCodec,
    NumberMatrixCodec,
    OptionalCodec,
    maybe_image_size,
    maybe_lat_lon,
    vec_num,
    vec_vec_num,
)
from csv_field_extras.config import CodecConfig, resolve_config
from csv_field_extras.exceptions import (
    DecodeError,
    FieldCodecError,
    FieldDecodeError,
    InvalidNumberError,
    InvalidPairError,
    InvalidRowError,
)
from csv_field_extras.fields import ImageSize, MaybeImageSize, MaybeLatLon, NumList, NumMatrix, codec_field
from csv_field_extras.helpers import format_rows, iter_rows, parse_rows
from csv_field_extras.resource import Resource

__all__ = [
    "Codec",
    "FieldCodec",
    "NumberListCodec",
    "NumberMatrixCodec",
    "FixedPairCodec",
    "ImageSizeCodec",
    "LatLonCodec",
    "OptionalCodec",
    "vec_num",
    "vec_vec_num",
    "maybe_image_size",
    "maybe_lat_lon",
    "LIST_SEPARATOR",
    "ROW_SEPARATOR",
    "SIZE_SEPARATOR",
    "GEO_SEPARATOR",
    "CodecConfig",
    "resolve_config",
    "FieldCodecError",
    "DecodeError",
    "InvalidNumberError",
    "InvalidRowError",
    "InvalidPairError",
    "FieldDecodeError",
    "ImageSize",
    "NumList",
    "NumMatrix",
    "MaybeImageSize",
    "MaybeLatLon",
    "codec_field",
    "Resource",
    "iter_rows",
    "format_rows",
    "parse_rows",
]
