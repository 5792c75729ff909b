"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: exceptions.py
@DateTime: 2026-10-19
@Docs: Field codec error hierarchy.
字段编解码异常体系。
"""

from typing import Any


class FieldCodecError(ValueError):
    """
    Field codec error.
    字段编解码异常。

    Base class for every error raised by the field codecs. It derives from
    ValueError so that validation frameworks (pydantic) report it as a
    regular validation failure.
    所有字段编解码异常的基类。继承 ValueError，便于 pydantic 等校验框架将其视为普通校验失败。

    Attributes:
        message: Error message.
        message: 错误消息。
        details: Error details.
        details: 错误详情。
        error_code: Stable error code.
        error_code: 稳定错误码。
    """

    def __init__(
        self,
        *,
        message: str,
        details: Any | None = None,
        error_code: str = "field_codec_error",
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.error_code = error_code

    def __str__(self) -> str:
        return self.message


class DecodeError(FieldCodecError):
    """
    Decode error.
    解码错误。

    Attributes:
        text: The field text that failed to decode.
        text: 解码失败的字段文本。
    """

    def __init__(
        self,
        *,
        message: str,
        text: str,
        details: Any | None = None,
        error_code: str = "decode_error",
    ) -> None:
        super().__init__(message=message, details=details, error_code=error_code)
        self.text = text


class InvalidNumberError(DecodeError):
    """
    A sequence element is not a well-formed number.
    序列元素不是合法数字。
    """

    def __init__(self, *, text: str, details: Any | None = None) -> None:
        super().__init__(
            message=f"Invalid number: {text!r} / 非法数字",
            text=text,
            details=details,
            error_code="invalid_number",
        )


class InvalidRowError(DecodeError):
    """
    A matrix row failed to decode.
    矩阵行解码失败。

    Attributes:
        row: Zero-based index of the failing row.
        row: 失败行的下标（从 0 开始）。
        cause: The underlying number error.
        cause: 底层数字错误。
    """

    def __init__(self, *, text: str, row: int, cause: InvalidNumberError) -> None:
        super().__init__(
            message=f"Invalid row {row}: {cause.message}",
            text=text,
            details={"row": row, "value": cause.text},
            error_code="invalid_row",
        )
        self.row = row
        self.cause = cause


class InvalidPairError(DecodeError):
    """
    A fixed pair does not split into exactly two well-formed components.
    定长二元组无法拆分为两个合法分量。
    """

    def __init__(self, *, text: str, reason: str) -> None:
        super().__init__(
            message=f"Invalid pair {text!r}: {reason}",
            text=text,
            details={"reason": reason},
            error_code="invalid_pair",
        )


class FieldDecodeError(DecodeError):
    """
    A named record field failed to decode.
    记录中指定字段解码失败。

    Attributes:
        field: Field name.
        field: 字段名。
    """

    def __init__(self, *, field: str, cause: DecodeError) -> None:
        super().__init__(
            message=f"Field {field!r}: {cause.message}",
            text=cause.text,
            details={"field": field, "error_code": cause.error_code},
            error_code="invalid_field",
        )
        self.field = field
        self.cause = cause
