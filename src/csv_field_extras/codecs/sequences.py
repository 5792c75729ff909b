"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: sequences.py
@DateTime: 2026-10-19
@Docs: Codecs for integer lists and integer matrices.
整数列表与整数矩阵编解码器。

``[-1, 1]`` <--> ``-1_1`` and ``[[-1, 1], [1, -1]]`` <--> ``-1_1|1_-1``.
"""

from collections.abc import Iterable

from csv_field_extras.codecs.base import FieldCodec
from csv_field_extras.codecs.numbers import format_int, parse_int
from csv_field_extras.config import CodecConfig
from csv_field_extras.exceptions import InvalidNumberError, InvalidRowError

LIST_SEPARATOR = "_"
ROW_SEPARATOR = "|"


class NumberListCodec(FieldCodec[list[int]]):
    """Codec for a list of signed integers.
    有符号整数列表编解码器。

    An empty list is the empty text, and the empty text is an empty list.
    空列表对应空文本，反之亦然。
    """

    def parse(self, value: str) -> list[int]:
        text = self.config.prepare(value)
        if not text:
            return []
        return [parse_int(part) for part in text.split(LIST_SEPARATOR)]

    def format(self, value: Iterable[int]) -> str:
        return LIST_SEPARATOR.join(format_int(item) for item in value)


class NumberMatrixCodec(FieldCodec[list[list[int]]]):
    """Codec for a list of integer lists.
    整数列表的列表编解码器。

    The empty text decodes to zero rows, never to one empty row. A matrix
    holding a single empty row therefore encodes to the same empty text and
    does not survive a round trip.
    空文本解码为零行而非一个空行；因此仅含一个空行的矩阵无法往返。
    """

    def __init__(self, *, config: CodecConfig | None = None) -> None:
        super().__init__(config=config)
        self._rows = NumberListCodec(config=self.config)

    def parse(self, value: str) -> list[list[int]]:
        text = self.config.prepare(value)
        if not text:
            return []
        rows: list[list[int]] = []
        for index, part in enumerate(text.split(ROW_SEPARATOR)):
            try:
                rows.append(self._rows.parse(part))
            except InvalidNumberError as exc:
                raise InvalidRowError(text=part, row=index, cause=exc) from exc
        return rows

    def format(self, value: Iterable[Iterable[int]]) -> str:
        return ROW_SEPARATOR.join(self._rows.format(row) for row in value)


vec_num = NumberListCodec()
vec_vec_num = NumberMatrixCodec()
