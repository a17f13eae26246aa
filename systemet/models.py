"""データモデル定義.

API 上のフィールド名は PascalCase (例: ProductId)、Python 側は snake_case。
変換は alias_generator で行い、"Type" だけは明示的に kind へ割り当てる。
"""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

from systemet.dates import WireDate


class WireModel(BaseModel):
    """API レスポンスのレコード共通設定."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
    )

    def to_json(self) -> str:
        """API と同じ PascalCase の JSON 文字列を返す."""
        return self.model_dump_json(by_alias=True)


class SortKey(IntEnum):
    """検索結果の並び順キー. 値は API 上の整数値そのもの."""

    PRICE = 0
    NAME = 1
    VOLUME = 2
    VINTAGE = 3
    RANK = 4
    CITY = 5
    SELL_START_DATE = 6
    DISPLAY_NAME = 7


class SortDirection(IntEnum):
    """検索結果の並び方向."""

    ASCENDING = 0
    DESCENDING = 1


class Product(WireModel):
    """商品1件を表す."""

    alcohol_percentage: float
    assortment: Optional[str] = None
    assortment_text: Optional[str] = None
    beverage_description_short: Optional[str] = None
    bottle_text_short: Optional[str] = None
    category: Optional[str] = None
    country: Optional[str] = None
    ethical_label: Optional[str] = None
    is_completely_out_of_stock: bool
    is_ethical: bool
    is_in_store_search_assortment: Optional[str] = None
    is_kosher: bool
    is_manufacturing_country: bool
    is_news: bool
    is_organic: bool
    is_regional_restricted: bool
    is_temporarily_out_of_stock: Optional[bool] = None
    is_web_launch: bool
    # API 上は "Type"
    kind: Optional[str] = Field(default=None, alias="Type")
    origin_level_1: Optional[str] = None
    origin_level_2: Optional[str] = None
    price: float
    producer_name: Optional[str] = None
    product_id: str
    product_name_bold: str
    product_name_thin: Optional[str] = None
    product_number_short: Optional[str] = None
    product_number: str
    recycle_fee: float
    restricted_parcel_quantity: int
    seal: Optional[str] = None
    sell_start_date: WireDate
    style: Optional[str] = None
    sub_category: Optional[str] = None
    supplier_name: Optional[str] = None
    taste: Optional[str] = None
    usage: Optional[str] = None
    vintage: int
    volume: float  # ml


class ApiError(WireModel):
    """API が返すエラー1件 (エラーコード + メッセージ)."""

    error: str
    message: str

    def __str__(self) -> str:
        return f"error code: {self.error}, message: {self.message}"


class ProductWithStore(WireModel):
    """店舗在庫に含まれる商品の識別子のみ."""

    product_id: str
    product_number: str


class ProductsWithStore(WireModel):
    """店舗 (site) ごとの取扱商品リスト."""

    site_id: str
    products: list[ProductWithStore]
