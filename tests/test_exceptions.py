"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_exceptions.py
@DateTime: 2026-10-19
@Docs: Tests for exceptions.py module.
exceptions.py 模块测试。
"""

from csv_field_extras.exceptions import (
    DecodeError,
    FieldCodecError,
    FieldDecodeError,
    InvalidNumberError,
    InvalidPairError,
    InvalidRowError,
)


class TestFieldCodecError:
    """Tests for FieldCodecError.
    FieldCodecError 测试。
    """

    def test_attributes(self) -> None:
        """All attributes assigned correctly / 所有属性正确赋值。"""
        exc = FieldCodecError(message="test error", details={"key": "val"}, error_code="custom_error")
        assert exc.message == "test error"
        assert exc.details == {"key": "val"}
        assert exc.error_code == "custom_error"

    def test_defaults(self) -> None:
        exc = FieldCodecError(message="msg")
        assert exc.error_code == "field_codec_error"
        assert exc.details is None

    def test_str_returns_message(self) -> None:
        """str(exc) returns message / str(exc) 返回 message 内容。"""
        assert str(FieldCodecError(message="hello world")) == "hello world"

    def test_is_value_error(self) -> None:
        """Validation frameworks treat it as ValueError / 校验框架将其视为 ValueError。"""
        assert issubclass(FieldCodecError, ValueError)


class TestSubclasses:
    """Tests for exception subclasses.
    异常子类测试。
    """

    def test_hierarchy(self) -> None:
        for cls in (InvalidNumberError, InvalidRowError, InvalidPairError, FieldDecodeError):
            assert issubclass(cls, DecodeError)
        assert issubclass(DecodeError, FieldCodecError)

    def test_invalid_number(self) -> None:
        exc = InvalidNumberError(text="a")
        assert exc.text == "a"
        assert exc.error_code == "invalid_number"
        assert "'a'" in exc.message

    def test_invalid_row_wraps_number(self) -> None:
        cause = InvalidNumberError(text="a")
        exc = InvalidRowError(text="1_a", row=3, cause=cause)
        assert exc.row == 3
        assert exc.cause is cause
        assert exc.details == {"row": 3, "value": "a"}
        assert exc.error_code == "invalid_row"

    def test_invalid_pair(self) -> None:
        exc = InvalidPairError(text="12x", reason="bad")
        assert exc.details == {"reason": "bad"}
        assert exc.error_code == "invalid_pair"

    def test_field_decode_error(self) -> None:
        cause = InvalidPairError(text="12x", reason="bad")
        exc = FieldDecodeError(field="image_size", cause=cause)
        assert exc.field == "image_size"
        assert exc.text == "12x"
        assert exc.details == {"field": "image_size", "error_code": "invalid_pair"}

    def test_catchable_as_base(self) -> None:
        """InvalidPairError can be caught as FieldCodecError / 可被基类捕获。"""
        try:
            raise InvalidPairError(text="x", reason="missing")
        except FieldCodecError as exc:
            assert exc.error_code == "invalid_pair"
