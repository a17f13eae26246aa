"""API クライアントの例外定義.

失敗は次の3種類で、互いに重ならない:
  - TransportError: 通信そのものの失敗 (接続・タイムアウト・TLS・DNS)
  - ApiResponseError: API がエラー配列を返した
  - ParseError: レスポンスが期待した型にもエラー配列にも一致しなかった
"""

from __future__ import annotations

from typing import Optional, Sequence

from systemet.models import ApiError


class SystemetError(Exception):
    """全例外の基底クラス."""

    cause: Optional[BaseException] = None


class TransportError(SystemetError):
    """requests の例外をラップする."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"Network error: {self.cause}"


class ApiResponseError(SystemetError):
    """API から返されたエラーの一覧 (順序・件数はそのまま保持)."""

    def __init__(self, errors: Sequence[ApiError]) -> None:
        super().__init__(list(errors))
        self.errors: list[ApiError] = list(errors)

    def __str__(self) -> str:
        if not self.errors:
            return "API error: Got error response from API, but no error code or message"
        if len(self.errors) == 1:
            return f"API error: {self.errors[0]}"
        message = ", ".join(f"({error})" for error in self.errors)
        return f"API errors: {message}"


class ParseError(SystemetError):
    """レスポンスを解釈できなかった. 調査用に生のレスポンスを保持する."""

    def __init__(self, cause: BaseException, body: str) -> None:
        super().__init__(cause, body)
        self.cause = cause
        self.__cause__ = cause
        self.body = body

    def __str__(self) -> str:
        return f"Serialization/deserialization error: {self.cause}. Response body: '{self.body}'"
