"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: base.py
@DateTime: 2026-10-19
@Docs: Codec protocol for parsing/formatting field values.
字段值编解码器协议。
"""

from typing import Protocol, TypeVar

from csv_field_extras.config import DEFAULT_CONFIG, CodecConfig

T = TypeVar("T")


class Codec(Protocol[T]):
    """Codec protocol for parsing and formatting values.
    用于解析与格式化值的协议。
    """

    def parse(self, value: str) -> T:
        """Parse a field text into a typed value.
        将字段文本解析为类型化的值。

        Args:
            value: The field text to parse.
                要解析的字段文本。
        Returns:
            The parsed value of type T.
                解析后的类型化值。
        Raises:
            DecodeError: If the text is not a valid encoding.
                文本不是合法编码时抛出。
        """
        ...

    def format(self, value: T) -> str:
        """Format a typed value into a field text.
        将类型化的值格式化为字段文本。

        Args:
            value: The typed value to format.
                要格式化的类型化值。
        Returns:
            The field text. Never fails for in-range values.
                字段文本；合法值不会失败。
        """
        ...


class FieldCodec(Codec[T]):
    """Shared base of the built-in codecs.
    内置编解码器的公共基类。

    ``encode``/``decode`` are aliases of ``format``/``parse``.
    ``encode``/``decode`` 分别是 ``format``/``parse`` 的别名。
    """

    def __init__(self, *, config: CodecConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def encode(self, value: T) -> str:
        return self.format(value)

    def decode(self, text: str) -> T:
        return self.parse(text)
