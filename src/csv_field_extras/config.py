"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-19
@Docs: Field codec configuration helpers.
字段编解码配置助手。

Configuration helpers for the field codecs.
字段编解码器的配置助手。

The reserved separators (``_``, ``|``, ``x``, ``;``) are part of the wire
format and are never configurable. Only decoding leniency and float
precision can be tuned, via function parameters or environment variables.
保留分隔符属于线格式，不可配置；仅解码宽松度与浮点精度可通过参数或环境变量调整。

Environment variables / 环境变量:
        - CSV_FIELD_EXTRAS_STRIP_WHITESPACE:
            Strip surrounding whitespace before decoding (default: false).
            解码前去除首尾空白（默认 false）。
        - CSV_FIELD_EXTRAS_SINGLE_PRECISION:
            Encode/decode coordinates at single precision (default: false).
            坐标按单精度编解码（默认 false）。

Examples:
        >>> from csv_field_extras.config import resolve_config
        >>> cfg = resolve_config(strip_whitespace=True)
        >>> cfg.strip_whitespace
        True
"""

import os
from dataclasses import dataclass

TRUTHY_VALUES = frozenset({"1", "true", "yes", "y", "t", "on"})


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Field codec configuration.

    字段编解码配置。

    Attributes:
        strip_whitespace: Strip surrounding whitespace of the field text
            before decoding.
            解码前去除字段文本首尾空白。
        single_precision: Default precision of coordinate codecs.
            坐标编解码器的默认精度。
    """

    strip_whitespace: bool = False
    single_precision: bool = False

    def prepare(self, text: str) -> str:
        """Return the field text as the decoders should see it.

        返回解码器实际处理的字段文本。
        """
        return text.strip() if self.strip_whitespace else text


DEFAULT_CONFIG = CodecConfig()


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _env_flag(name: str) -> bool | None:
    """
    Read a boolean flag from the environment.
    从环境变量读取布尔开关。

    Returns:
        bool | None: Parsed flag, or None when the variable is unset.
        bool | None: 解析结果；未设置时返回 None。
    """
    value = _env_get(name)
    if value is None:
        return None
    return value.lower() in TRUTHY_VALUES


def resolve_config(
    *,
    strip_whitespace: bool | None = None,
    single_precision: bool | None = None,
    env_prefix: str = "CSV_FIELD_EXTRAS",
) -> CodecConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

     Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_STRIP_WHITESPACE`, `{env_prefix}_SINGLE_PRECISION`
           环境变量
        3) defaults (False) / 默认值（False）

    Args:
        strip_whitespace: Strip surrounding whitespace before decoding.
            解码前去除首尾空白。
        single_precision: Coordinate precision.
            坐标精度。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 CSV_FIELD_EXTRAS）。

    Returns:
        A CodecConfig instance.
            返回 CodecConfig 配置实例。
    """
    if strip_whitespace is None:
        strip_whitespace = _env_flag(f"{env_prefix}_STRIP_WHITESPACE") or False
    if single_precision is None:
        single_precision = _env_flag(f"{env_prefix}_SINGLE_PRECISION") or False
    return CodecConfig(strip_whitespace=strip_whitespace, single_precision=single_precision)
