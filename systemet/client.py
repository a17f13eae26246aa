"""Systembolaget 商品 API クライアント."""

from __future__ import annotations

import logging
from typing import Optional, TypeVar
from urllib.parse import quote

import requests
from requests.utils import check_header_validity

from systemet.config import (
    ALL_PRODUCTS_ENDPOINT,
    API_KEY_HEADER,
    PRODUCT_ENDPOINT,
    PRODUCTS_WITH_STORE_ENDPOINT,
    REQUEST_TIMEOUT,
    SEARCH_ENDPOINT,
)
from systemet.dispatch import classify_response
from systemet.errors import TransportError
from systemet.models import Product, ProductsWithStore
from systemet.search import SearchRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _validate_api_key(api_key: str) -> None:
    """API キーがヘッダー値として送れるか確認する.

    Raises:
        ValueError: ヘッダー値として不正な場合（設定ミスとして扱う）
    """
    if not isinstance(api_key, str) or not api_key:
        raise ValueError("API キーが指定されていません")
    try:
        api_key.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ValueError("API キーをヘッダー値にエンコードできません") from e
    # 改行や先頭空白を含む場合は InvalidHeader (ValueError のサブクラス)
    check_header_validity((API_KEY_HEADER, api_key))


class Systemet:
    """4つのエンドポイントを呼び出すクライアント.

    1回の呼び出しにつき GET を1回だけ送る。リトライはしない。
    セッションは固定ヘッダーしか持たないので、スレッド間で共有してよい。
    """

    def __init__(
        self,
        api_key: str,
        *,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        _validate_api_key(api_key)
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers[API_KEY_HEADER] = api_key

    def __enter__(self) -> Systemet:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def get_product(self, product_id: str) -> Product:
        """商品IDで1件取得する."""
        url = PRODUCT_ENDPOINT + quote(str(product_id), safe="")
        return self._send_request(url, Product)

    # TODO: ページングに対応してイテレータで返す
    def get_all_products(self) -> list[Product]:
        """全商品を取得する（1ページ分のみ）."""
        return self._send_request(ALL_PRODUCTS_ENDPOINT, list[Product])

    def get_products_with_store(self) -> list[ProductsWithStore]:
        """店舗ごとの取扱商品を取得する."""
        return self._send_request(PRODUCTS_WITH_STORE_ENDPOINT, list[ProductsWithStore])

    def search(self, request: SearchRequest) -> list[Product]:
        """検索条件に一致する商品を取得する.

        Raises:
            ValueError: 検索条件が1つも設定されていない場合（送信しない）
        """
        if not request.is_valid():
            raise ValueError("検索条件が指定されていません")
        return self._send_request(SEARCH_ENDPOINT, list[Product], body=request.to_json())

    def _send_request(self, url: str, response_type: type[T], body: Optional[str] = None) -> T:
        """GET を送り、レスポンス本文を response_type として返す.

        HTTP ステータスに関わらず本文を判別に回す（エラー本文は 4xx で返るため）。
        """
        headers = {"Content-Type": "application/json"} if body is not None else None
        logger.info("GET %s", url)
        try:
            resp = self.session.get(url, data=body, headers=headers, timeout=self.timeout)
            text = resp.text
        except requests.RequestException as e:
            logger.error("リクエスト失敗: url=%s, error=%s", url, e)
            raise TransportError(e) from e

        logger.debug("レスポンス: status=%s, %d 文字", resp.status_code, len(text))
        return classify_response(text, response_type)
