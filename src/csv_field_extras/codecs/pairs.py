"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: pairs.py
@DateTime: 2026-10-19
@Docs: Codecs for fixed two-component numeric pairs.
定长二元数值组编解码器。

``(128, 64)`` <--> ``128x64`` and ``(84.99, -135.0)`` <--> ``84.99;-135``.
"""

import abc
from typing import ClassVar, TypeVar

from csv_field_extras.codecs.base import FieldCodec
from csv_field_extras.codecs.numbers import format_float, format_int, parse_float, parse_int
from csv_field_extras.config import CodecConfig
from csv_field_extras.exceptions import InvalidNumberError, InvalidPairError

SIZE_SEPARATOR = "x"
GEO_SEPARATOR = ";"

A = TypeVar("A")
B = TypeVar("B")


class FixedPairCodec(FieldCodec[tuple[A, B]]):
    """Base codec for a pair rendered as ``<first><separator><second>``.
    以 ``<第一分量><分隔符><第二分量>`` 渲染的二元组编解码器基类。

    The text is split on the first separator. A missing separator or a
    component that fails to parse raises InvalidPairError. There is no
    absent form; wrap the codec in OptionalCodec for that.
    在第一个分隔符处拆分；缺少分隔符或分量解析失败时抛出 InvalidPairError。
    本身没有“缺失”表示，需要时使用 OptionalCodec 包装。
    """

    separator: ClassVar[str]

    def parse(self, value: str) -> tuple[A, B]:
        text = self.config.prepare(value)
        first, sep, second = text.partition(self.separator)
        if not sep:
            raise InvalidPairError(text=text, reason=f"missing separator {self.separator!r}")
        try:
            return self._parse_first(first), self._parse_second(second)
        except InvalidNumberError as exc:
            raise InvalidPairError(text=text, reason=exc.message) from exc

    def format(self, value: tuple[A, B]) -> str:
        first, second = value
        return f"{self._format_first(first)}{self.separator}{self._format_second(second)}"

    @abc.abstractmethod
    def _parse_first(self, text: str) -> A:
        raise NotImplementedError

    @abc.abstractmethod
    def _parse_second(self, text: str) -> B:
        raise NotImplementedError

    @abc.abstractmethod
    def _format_first(self, value: A) -> str:
        raise NotImplementedError

    @abc.abstractmethod
    def _format_second(self, value: B) -> str:
        raise NotImplementedError


class ImageSizeCodec(FixedPairCodec[int, int]):
    """Codec for an unsigned ``(width, height)`` pair.
    无符号 ``(宽, 高)`` 二元组编解码器。

    Decoding rejects components that do not fit the declared bit widths.
    Encoding does not check them.
    解码时校验位宽，编码时不校验。
    """

    separator = SIZE_SEPARATOR

    def __init__(self, *, width_bits: int = 8, height_bits: int = 16, config: CodecConfig | None = None) -> None:
        super().__init__(config=config)
        self.width_bits = width_bits
        self.height_bits = height_bits

    def _parse_first(self, text: str) -> int:
        return parse_int(text, signed=False, bits=self.width_bits)

    def _parse_second(self, text: str) -> int:
        return parse_int(text, signed=False, bits=self.height_bits)

    def _format_first(self, value: int) -> str:
        return format_int(value)

    def _format_second(self, value: int) -> str:
        return format_int(value)


class LatLonCodec(FixedPairCodec[float, float]):
    """Codec for a ``(lat, lon)`` float pair.
    ``(纬度, 经度)`` 浮点二元组编解码器。

    No range check is made on either component.
    不校验分量范围。
    """

    separator = GEO_SEPARATOR

    def __init__(self, *, single_precision: bool | None = None, config: CodecConfig | None = None) -> None:
        super().__init__(config=config)
        self.single_precision = self.config.single_precision if single_precision is None else single_precision

    def _parse_first(self, text: str) -> float:
        return parse_float(text, single_precision=self.single_precision)

    _parse_second = _parse_first

    def _format_first(self, value: float) -> str:
        return format_float(value, single_precision=self.single_precision)

    _format_second = _format_first
