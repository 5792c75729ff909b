"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_helpers_rows.py
@DateTime: 2026-10-19
@Docs: Tests for row helpers.
行辅助函数测试。
"""

from typing import Any

import polars as pl
import pytest

from csv_field_extras.codecs import Codec
from csv_field_extras.exceptions import FieldDecodeError, InvalidNumberError
from csv_field_extras.helpers import format_rows, iter_rows, parse_rows


def test_iter_rows_polars() -> None:
    df = pl.DataFrame({"a": [1], "b": ["x"]})
    rows = list(iter_rows(df))
    assert rows == [{"a": 1, "b": "x"}]


def test_iter_rows_mapping() -> None:
    rows = list(iter_rows({"a": 1}))
    assert rows == [{"a": 1}]


def test_iter_rows_rejects_text() -> None:
    with pytest.raises(TypeError):
        list(iter_rows("a,b"))


def test_format_rows(full_values: dict[str, Any], field_codecs: dict[str, Codec[Any]]) -> None:
    rows = format_rows([dict(full_values, id=7)], field_codecs)
    assert rows == [
        {"list": "-1_1", "matrix": "-1_1|1_-1", "image_size": "16x1024", "geo": "84.99;-135", "id": 7},
    ]


def test_format_rows_polars(field_codecs: dict[str, Codec[Any]]) -> None:
    df = pl.DataFrame({"list": [[-1, 1], []], "matrix": [[[-1, 1], [1, -1]], []]})
    rows = format_rows(df, field_codecs)
    assert rows == [{"list": "-1_1", "matrix": "-1_1|1_-1"}, {"list": "", "matrix": ""}]


def test_parse_rows(full_values: dict[str, Any], field_codecs: dict[str, Codec[Any]]) -> None:
    rows = parse_rows([{"list": "-1_1", "matrix": "-1_1|1_-1", "image_size": "16x1024", "geo": "84.99;-135"}], field_codecs)
    assert rows == [full_values]


def test_parse_rows_polars_null_cells(field_codecs: dict[str, Codec[Any]]) -> None:
    df = pl.DataFrame({"list": ["1_2", None], "image_size": [None, "1x2"]})
    rows = parse_rows(df, field_codecs)
    assert rows == [{"list": [1, 2], "image_size": None}, {"list": [], "image_size": (1, 2)}]


def test_parse_rows_error(field_codecs: dict[str, Codec[Any]]) -> None:
    with pytest.raises(FieldDecodeError) as exc_info:
        parse_rows([{"list": "1"}, {"list": "a_1"}], field_codecs)
    assert exc_info.value.field == "list"
    assert isinstance(exc_info.value.cause, InvalidNumberError)
