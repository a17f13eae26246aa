"""レスポンス本文の判別モジュール.

成功レスポンスとエラーレスポンスには区別用のフィールドがないため、
どちらの型として解釈できるかで判別する:
  1. 期待する型として解釈（主戦略）
  2. ApiError の配列として解釈（フォールバック）
  3. どちらも失敗したら ParseError
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from systemet.errors import ApiResponseError, ParseError
from systemet.models import ApiError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def classify_response(body: str, response_type: type[T]) -> T:
    """レスポンス本文を期待する型に変換する.

    Args:
        body: レスポンス本文（テキスト）
        response_type: 成功時の型 (例: Product, list[Product])

    Returns:
        response_type として解釈した値

    Raises:
        ApiResponseError: 本文が ApiError の配列だった場合
        ParseError: どちらの型にも一致しなかった場合
    """
    try:
        return _adapter(response_type).validate_json(body)
    except ValidationError as e:
        parse_error = e

    try:
        api_errors = _adapter(list[ApiError]).validate_json(body)
    except ValidationError:
        logger.error("レスポンスのパースに失敗しました: %s", parse_error)
        raise ParseError(parse_error, body) from parse_error

    logger.warning("API エラーレスポンス: %d 件", len(api_errors))
    raise ApiResponseError(api_errors)
