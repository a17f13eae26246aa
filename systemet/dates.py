"""Systembolaget API の日付フォーマット変換モジュール.

API の日付は常に "YYYY-MM-DDTHH:MM:SS" (UTC) 形式で、時刻部分は意味を持たない。
読み込み時は時刻を捨てて date に、書き出し時は 00:00:00 固定で文字列にする。
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, PlainSerializer

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# 古い書き出し側が未設定値として出していた文字列
_LEGACY_NULL = "null"


def format_date(value: date) -> str:
    """date を API の日付文字列に変換する (時刻は 00:00:00 固定)."""
    # strftime の %Y は 1000 年未満をゼロ埋めしない環境があるため isoformat を使う
    return datetime(value.year, value.month, value.day).isoformat()


def parse_date(value: Any) -> date:
    """API の日付文字列を date に変換する.

    Raises:
        ValueError: 文字列が日付フォーマットに一致しない、または文字列でない場合
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"日付文字列ではありません: {value!r}")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ValueError(
            f"日付フォーマット {DATE_FORMAT} に一致しません: {value!r}"
        ) from None


def format_optional_date(value: Optional[date]) -> Optional[str]:
    """未設定 (None) は JSON の null として書き出す."""
    if value is None:
        return None
    return format_date(value)


def parse_optional_date(value: Any) -> Optional[date]:
    """null (および旧形式の文字列 "null") は None として読み込む."""
    if value is None or value == _LEGACY_NULL:
        return None
    return parse_date(value)


# pydantic モデルのフィールド型として使う
WireDate = Annotated[
    date,
    BeforeValidator(parse_date),
    PlainSerializer(format_date, return_type=str),
]
OptionalWireDate = Annotated[
    Optional[date],
    BeforeValidator(parse_optional_date),
    PlainSerializer(format_optional_date, return_type=Optional[str]),
]
