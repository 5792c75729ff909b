"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-19
@Docs: Shared test fixtures for the csv-field-extras test suite.
测试套件的公共 fixtures。
"""

from typing import Any

import pytest
from pydantic import BaseModel

from csv_field_extras.codecs import Codec, maybe_image_size, maybe_lat_lon, vec_num, vec_vec_num
from csv_field_extras.fields import ImageSize, MaybeImageSize, MaybeLatLon, NumList, NumMatrix
from csv_field_extras.resource import Resource

FIELDNAMES = ["list", "matrix", "image_size", "geo"]


class Foo(BaseModel):
    """Reference record using the pydantic field types.
    使用 pydantic 字段类型的参考记录。
    """

    list: NumList
    matrix: NumMatrix
    image_size: MaybeImageSize = None
    geo: MaybeLatLon = None


class FooResource(Resource):
    """Reference record using explicit field codecs.
    使用显式字段编解码器的参考记录。
    """

    list: list[int]
    matrix: list[list[int]]
    image_size: ImageSize | None = None
    geo: tuple[float, float] | None = None

    field_codecs = {
        "list": vec_num,
        "matrix": vec_vec_num,
        "image_size": maybe_image_size,
        "geo": maybe_lat_lon,
    }


@pytest.fixture
def full_values() -> dict[str, Any]:
    """Field values of the populated reference record.
    填充完整的参考记录字段值。
    """
    return {
        "list": [-1, 1],
        "matrix": [[-1, 1], [1, -1]],
        "image_size": (16, 1024),
        "geo": (84.99, -135.00),
    }


@pytest.fixture
def empty_values() -> dict[str, Any]:
    """Field values of the empty reference record.
    空参考记录字段值。
    """
    return {"list": [], "matrix": [], "image_size": None, "geo": None}


@pytest.fixture
def field_codecs() -> dict[str, Codec[Any]]:
    """Codec per reference field.
    参考字段对应的编解码器。
    """
    return dict(FooResource.field_codecs)
