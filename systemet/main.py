"""Systembolaget 商品 API — コマンドラインエントリーポイント.

使い方:
  systemet product <id>
  systemet products
  systemet stores
  systemet search --query "Rioja" --price-max 200 --sort-by price
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Optional

from systemet.client import Systemet
from systemet.config import LOG_DIR, SYSTEMET_API_KEY
from systemet.errors import SystemetError
from systemet.models import SortDirection, SortKey
from systemet.search import SearchRequest

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO) -> None:
    """ロギングの初期設定."""
    LOG_DIR.mkdir(exist_ok=True)
    log_file = LOG_DIR / f"systemet_{datetime.now().strftime('%Y%m%d')}.log"
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="systemet", description="Systembolaget 商品 API クライアント")
    parser.add_argument("-v", "--verbose", action="store_true", help="DEBUG ログを出力する")
    sub = parser.add_subparsers(dest="command", required=True)

    product = sub.add_parser("product", help="商品を1件取得する")
    product.add_argument("product_id")

    sub.add_parser("products", help="全商品を取得する（1ページ分）")
    sub.add_parser("stores", help="店舗ごとの取扱商品を取得する")

    search = sub.add_parser("search", help="商品を検索する")
    search.add_argument("--query", dest="search_query")
    search.add_argument("--country")
    search.add_argument("--price-min", type=float)
    search.add_argument("--price-max", type=float)
    search.add_argument(
        "--sort-by",
        choices=[key.name.lower() for key in SortKey],
    )
    search.add_argument("--descending", action="store_true")
    search.add_argument("--page", type=int)

    return parser.parse_args(argv)


def build_search_request(args: argparse.Namespace) -> SearchRequest:
    """コマンドライン引数から検索条件を組み立てる."""
    sort_by = SortKey[args.sort_by.upper()] if args.sort_by else None
    direction = SortDirection.DESCENDING if args.descending else None
    return (
        SearchRequest()
        .with_search_query(args.search_query)
        .with_country(args.country)
        .with_price_min(args.price_min)
        .with_price_max(args.price_max)
        .with_sort_by(sort_by)
        .with_sort_direction(direction)
        .with_page(args.page)
    )


def run(client: Systemet, args: argparse.Namespace) -> str:
    """サブコマンドを実行し、結果を API と同じ形式の JSON 文字列で返す."""
    if args.command == "product":
        return client.get_product(args.product_id).to_json()

    if args.command == "products":
        result = client.get_all_products()
    elif args.command == "stores":
        result = client.get_products_with_store()
    else:
        result = client.search(build_search_request(args))

    data = [item.model_dump(mode="json", by_alias=True) for item in result]
    return json.dumps(data, ensure_ascii=False)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if not SYSTEMET_API_KEY:
        logger.error("環境変数 SYSTEMET_API_KEY が設定されていません")
        return 1

    with Systemet(SYSTEMET_API_KEY) as client:
        try:
            output = run(client, args)
        except SystemetError as e:
            logger.error("%s", e)
            return 1
        except ValueError as e:
            logger.error("入力エラー: %s", e)
            return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
