"""検索リクエストの組み立てモジュール.

全フィールドが任意指定。with_* メソッドは指定フィールドだけを差し替えた
新しい SearchRequest を返すので、任意の順序・任意の組み合わせで連結できる:

    request = (
        SearchRequest()
        .with_country("Frankrike")
        .with_price_max(200)
        .with_sort_by(SortKey.PRICE)
    )
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from systemet.dates import OptionalWireDate
from systemet.models import SortDirection, SortKey


class SearchRequest(BaseModel):
    """検索条件. キー名は snake_case のまま送る (kind のみ "type")."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    alcohol_percentage_max: Optional[float] = None
    alcohol_percentage_min: Optional[float] = None
    assortment_text: Optional[str] = None
    bottle_type_group: Optional[str] = None
    country: Optional[str] = None
    csr: Optional[str] = None
    # API 上は "type"
    kind: Optional[str] = Field(default=None, alias="type")
    news: Optional[str] = None
    origin_level_1: Optional[str] = None
    origin_level_2: Optional[str] = None
    other_selections: Optional[str] = None
    page: Optional[int] = None
    price_max: Optional[float] = None
    price_min: Optional[float] = None
    seal: Optional[str] = None
    search_query: Optional[str] = None
    sell_start_date_from: OptionalWireDate = None
    sell_start_date_to: OptionalWireDate = None
    sort_by: Optional[SortKey] = None
    sort_direction: Optional[SortDirection] = None
    style: Optional[str] = None
    sub_category: Optional[str] = None
    vintage: Optional[str] = None

    def is_valid(self) -> bool:
        """条件が1つでも設定されていれば True (空の検索は送らない)."""
        return self != type(self)()

    def to_json(self) -> str:
        """全フィールドを JSON 化する. 未設定は null として残す."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, text: str) -> SearchRequest:
        return cls.model_validate_json(text)

    def _with(self, **changes: Any) -> SearchRequest:
        # コンストラクタを通して変更後の値も検証する
        return type(self)(**{**dict(self), **changes})

    def with_alcohol_percentage_max(self, value: Optional[float]) -> SearchRequest:
        return self._with(alcohol_percentage_max=value)

    def with_alcohol_percentage_min(self, value: Optional[float]) -> SearchRequest:
        return self._with(alcohol_percentage_min=value)

    def with_assortment_text(self, value: Optional[str]) -> SearchRequest:
        return self._with(assortment_text=value)

    def with_bottle_type_group(self, value: Optional[str]) -> SearchRequest:
        return self._with(bottle_type_group=value)

    def with_country(self, value: Optional[str]) -> SearchRequest:
        return self._with(country=value)

    def with_csr(self, value: Optional[str]) -> SearchRequest:
        return self._with(csr=value)

    def with_kind(self, value: Optional[str]) -> SearchRequest:
        """商品タイプ (API 上の "type") を指定する."""
        return self._with(kind=value)

    def with_news(self, value: Optional[str]) -> SearchRequest:
        return self._with(news=value)

    def with_origin_level_1(self, value: Optional[str]) -> SearchRequest:
        return self._with(origin_level_1=value)

    def with_origin_level_2(self, value: Optional[str]) -> SearchRequest:
        return self._with(origin_level_2=value)

    def with_other_selections(self, value: Optional[str]) -> SearchRequest:
        return self._with(other_selections=value)

    def with_page(self, value: Optional[int]) -> SearchRequest:
        return self._with(page=value)

    def with_price_max(self, value: Optional[float]) -> SearchRequest:
        return self._with(price_max=value)

    def with_price_min(self, value: Optional[float]) -> SearchRequest:
        return self._with(price_min=value)

    def with_seal(self, value: Optional[str]) -> SearchRequest:
        return self._with(seal=value)

    def with_search_query(self, value: Optional[str]) -> SearchRequest:
        """フリーテキスト検索."""
        return self._with(search_query=value)

    def with_sell_start_date_from(self, value: Optional[date]) -> SearchRequest:
        return self._with(sell_start_date_from=value)

    def with_sell_start_date_to(self, value: Optional[date]) -> SearchRequest:
        return self._with(sell_start_date_to=value)

    def with_sort_by(self, value: Optional[SortKey]) -> SearchRequest:
        return self._with(sort_by=value)

    def with_sort_direction(self, value: Optional[SortDirection]) -> SearchRequest:
        return self._with(sort_direction=value)

    def with_style(self, value: Optional[str]) -> SearchRequest:
        return self._with(style=value)

    def with_sub_category(self, value: Optional[str]) -> SearchRequest:
        return self._with(sub_category=value)

    def with_vintage(self, value: Optional[str]) -> SearchRequest:
        return self._with(vintage=value)
