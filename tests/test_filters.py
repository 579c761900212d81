"""
Unit tests for the product search query builder.
"""

from catalog_api.dao.filters import build_products_filter_query, SELECT_PRODUCTS
from catalog_api.schemas.product_schemas import ProductSearchFilter


class TestProductsFilterQuery:
    """Sparse filters become ANDed, bound predicates"""

    def test_empty_filter_selects_everything(self):
        query = build_products_filter_query(ProductSearchFilter())
        assert query.sql == SELECT_PRODUCTS
        assert query.params == {}

    def test_empty_strings_count_as_absent(self):
        query = build_products_filter_query(ProductSearchFilter(title="", description=""))
        assert query.sql == SELECT_PRODUCTS
        assert query.params == {}

    def test_title_only(self):
        query = build_products_filter_query(ProductSearchFilter(title="lamp"))
        assert query.sql == "SELECT * FROM products WHERE lower(title) LIKE lower(:title)"
        assert query.params == {"title": "%lamp%"}

    def test_price_range(self):
        query = build_products_filter_query(ProductSearchFilter(price_from=10, price_to=99.5))
        assert query.sql == "SELECT * FROM products WHERE price >= :price_from AND price <= :price_to"
        assert query.params == {"price_from": 10, "price_to": 99.5}

    def test_zero_price_is_a_set_value(self):
        query = build_products_filter_query(ProductSearchFilter(price_from=0))
        assert "price >= :price_from" in query.sql
        assert query.params == {"price_from": 0}

    def test_aliases_populate_fields(self):
        search_filter = ProductSearchFilter.model_validate({"priceFrom": 5, "priceTo": 7})
        query = build_products_filter_query(search_filter)
        assert query.params == {"price_from": 5, "price_to": 7}

    def test_all_fields_in_fixed_order(self):
        query = build_products_filter_query(ProductSearchFilter(
            title="lamp", description="warm", price_from=1, price_to=2,
        ))
        assert query.sql == (
            "SELECT * FROM products WHERE lower(title) LIKE lower(:title) AND lower(description) LIKE lower(:description)"
            " AND price >= :price_from AND price <= :price_to"
        )

    def test_every_present_field_appears_once(self):
        query = build_products_filter_query(ProductSearchFilter(description="oak", price_to=300))
        assert query.sql.count(":description") == 1
        assert query.sql.count(":price_to") == 1
        assert ":title" not in query.sql
        assert ":price_from" not in query.sql
        assert set(query.params) == {"description", "price_to"}

    def test_values_are_never_interpolated(self):
        query = build_products_filter_query(ProductSearchFilter(title="x' OR '1'='1"))
        assert "OR '1'='1" not in query.sql
        assert query.params["title"] == "%x' OR '1'='1%"
