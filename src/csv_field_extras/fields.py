"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: fields.py
@DateTime: 2026-10-19
@Docs: Pydantic field types backed by field codecs.
基于字段编解码器的 pydantic 字段类型。

Usage / 用法:

    >>> from pydantic import BaseModel
    >>> from csv_field_extras.fields import MaybeImageSize, MaybeLatLon, NumList, NumMatrix
    >>> class Foo(BaseModel):
    ...     list: NumList
    ...     matrix: NumMatrix
    ...     image_size: MaybeImageSize = None
    ...     geo: MaybeLatLon = None
    >>> Foo(list=[-1, 1], matrix=[[-1, 1], [1, -1]], image_size=(16, 1024)).model_dump()["matrix"]
    '-1_1|1_-1'
"""

from typing import Annotated, Any

from pydantic import Field
from pydantic.functional_serializers import PlainSerializer
from pydantic.functional_validators import BeforeValidator

from csv_field_extras.codecs import Codec, maybe_image_size, maybe_lat_lon, vec_num, vec_vec_num


def codec_field(codec: Codec[Any]) -> tuple[BeforeValidator, PlainSerializer]:
    """Build the pydantic hooks for a codec.
    为编解码器构建 pydantic 钩子。

    Text input is decoded with the codec; any other input is left to the
    regular validation of the annotated type. Serialization always yields
    the field text.
    文本输入经编解码器解码，其他输入交由类型本身校验；序列化总是输出字段文本。

    Args:
        codec: Field codec.
            字段编解码器。

    Returns:
        tuple[BeforeValidator, PlainSerializer]: Metadata for ``Annotated``.
            用于 ``Annotated`` 的元数据。
    """

    def _decode(value: Any) -> Any:
        if isinstance(value, str):
            return codec.parse(value)
        return value

    return BeforeValidator(_decode), PlainSerializer(codec.format, return_type=str)


_vec_num_decode, _vec_num_encode = codec_field(vec_num)
_vec_vec_num_decode, _vec_vec_num_encode = codec_field(vec_vec_num)
_image_size_decode, _image_size_encode = codec_field(maybe_image_size)
_lat_lon_decode, _lat_lon_encode = codec_field(maybe_lat_lon)

# Bounds match the widths ImageSizeCodec accepts on decode.
ImageWidth = Annotated[int, Field(ge=0, lt=1 << 8)]
ImageHeight = Annotated[int, Field(ge=0, lt=1 << 16)]
ImageSize = tuple[ImageWidth, ImageHeight]

NumList = Annotated[list[int], _vec_num_decode, _vec_num_encode]
NumMatrix = Annotated[list[list[int]], _vec_vec_num_decode, _vec_vec_num_encode]
MaybeImageSize = Annotated[ImageSize | None, _image_size_decode, _image_size_encode]
MaybeLatLon = Annotated[tuple[float, float] | None, _lat_lon_decode, _lat_lon_encode]
