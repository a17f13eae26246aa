"""models モジュールのユニットテスト."""

import json
from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from systemet.models import (
    ApiError,
    Product,
    ProductsWithStore,
    SortDirection,
    SortKey,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _load_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


class TestProduct:
    """Product のテスト."""

    def test_parse_minimal(self):
        """必須フィールドのみの JSON から正しくパースできること."""
        product = Product.model_validate_json(_load_fixture("product.json"))

        assert product.product_id == "1"
        assert product.product_name_bold == "Test"
        assert product.price == 99.0
        assert product.alcohol_percentage == 12.5
        assert product.sell_start_date == date(2020, 1, 1)
        assert product.is_manufacturing_country is True

    def test_missing_optional_fields_are_none(self):
        product = Product.model_validate_json(_load_fixture("product.json"))

        assert product.kind is None
        assert product.taste is None
        assert product.is_temporarily_out_of_stock is None

    def test_unknown_keys_ignored(self):
        """未知のキーがあってもエラーにならないこと."""
        products = json.loads(_load_fixture("products.json"))
        product = Product.model_validate(products[0])

        assert product.product_id == "508393"
        assert not hasattr(product, "random_unknown_field")

    def test_pascal_case_mapping(self):
        products = json.loads(_load_fixture("products.json"))
        product = Product.model_validate(products[0])

        assert product.origin_level_1 == "Rioja"
        assert product.origin_level_2 is None
        assert product.product_number_short == "74242"
        assert product.bottle_text_short == "Flaska"

    def test_type_maps_to_kind(self):
        """"Type" キーが kind に入ること."""
        products = json.loads(_load_fixture("products.json"))
        product = Product.model_validate(products[0])

        assert product.kind == "Rött vin"

    def test_kind_serialized_as_type(self):
        """書き出し時は kind ではなく "Type" になること."""
        products = json.loads(_load_fixture("products.json"))
        product = Product.model_validate(products[0])

        data = json.loads(product.to_json())
        assert data["Type"] == "Rött vin"
        assert "kind" not in data
        assert "Kind" not in data

    def test_serialized_keys_and_date(self):
        product = Product.model_validate_json(_load_fixture("product.json"))

        data = json.loads(product.to_json())
        assert data["ProductId"] == "1"
        assert data["SellStartDate"] == "2020-01-01T00:00:00"
        assert data["OriginLevel1"] is None

    def test_round_trip(self):
        product = Product.model_validate_json(_load_fixture("product.json"))

        assert Product.model_validate_json(product.to_json()) == product

    def test_missing_required_field(self):
        """必須フィールドが欠けていればパース失敗すること."""
        data = json.loads(_load_fixture("product.json"))
        del data["Price"]

        with pytest.raises(ValidationError):
            Product.model_validate(data)

    def test_invalid_sell_start_date(self):
        data = json.loads(_load_fixture("product.json"))
        data["SellStartDate"] = "2020-01-01"

        with pytest.raises(ValidationError, match="2020-01-01"):
            Product.model_validate(data)

    def test_frozen(self):
        product = Product.model_validate_json(_load_fixture("product.json"))

        with pytest.raises(ValidationError):
            product.price = 1.0


class TestApiError:
    """ApiError のテスト."""

    def test_parse(self):
        errors = json.loads(_load_fixture("api_errors.json"))
        error = ApiError.model_validate(errors[0])

        assert error.error == "404"
        assert error.message == "Product not found"

    def test_str(self):
        error = ApiError(error="E", message="M")
        assert str(error) == "error code: E, message: M"


class TestProductsWithStore:
    """ProductsWithStore のテスト."""

    def test_parse(self):
        stores = [
            ProductsWithStore.model_validate(s)
            for s in json.loads(_load_fixture("products_with_store.json"))
        ]

        assert stores[0].site_id == "0102"
        assert [p.product_id for p in stores[0].products] == ["508393", "1004489"]
        assert stores[0].products[1].product_number == "1101"
        assert stores[1].products == []


class TestSortEnums:
    """SortKey / SortDirection の整数値のテスト."""

    def test_sort_key_values(self):
        assert [(k.name, int(k)) for k in SortKey] == [
            ("PRICE", 0),
            ("NAME", 1),
            ("VOLUME", 2),
            ("VINTAGE", 3),
            ("RANK", 4),
            ("CITY", 5),
            ("SELL_START_DATE", 6),
            ("DISPLAY_NAME", 7),
        ]

    def test_sort_direction_values(self):
        assert SortDirection.ASCENDING == 0
        assert SortDirection.DESCENDING == 1
