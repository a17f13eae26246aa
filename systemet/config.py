"""設定モジュール — Systembolaget API のエンドポイント・環境変数."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- API キー ---
# ライブラリとして import する場合は未設定でもよい。CLI では必須。
SYSTEMET_API_KEY: str | None = os.getenv("SYSTEMET_API_KEY")

# --- エンドポイント ---
BASE_URL = "https://api-extern.systembolaget.se"
PRODUCT_ENDPOINT = f"{BASE_URL}/product/v1/product/"
ALL_PRODUCTS_ENDPOINT = f"{BASE_URL}/product/v1/product"
PRODUCTS_WITH_STORE_ENDPOINT = f"{BASE_URL}/product/v1/getproductswithstore"
SEARCH_ENDPOINT = f"{BASE_URL}/product/v1/search"

API_KEY_HEADER = "Ocp-Apim-Subscription-Key"

# --- リクエスト設定 ---
REQUEST_TIMEOUT = float(os.getenv("SYSTEMET_REQUEST_TIMEOUT", "15"))  # 秒

# --- ログ ---
LOG_DIR = _PROJECT_ROOT / "logs"
