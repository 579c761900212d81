from typing import Any, Dict, List, NamedTuple
from catalog_api.schemas.product_schemas import ProductSearchFilter

SELECT_PRODUCTS = "SELECT * FROM products"


class FilterQuery(NamedTuple):
    sql: str
    params: Dict[str, Any]


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def build_products_filter_query(search_filter: ProductSearchFilter) -> FilterQuery:
    """
    Build the product search statement for a sparse filter.

    Every set field adds one ANDed predicate, always in the order title,
    description, priceFrom, priceTo. Values are bound, never interpolated.
    With nothing set the statement selects every product.
    """
    predicates: List[str] = []
    params: Dict[str, Any] = {}

    if _is_set(search_filter.title):
        predicates.append("lower(title) LIKE lower(:title)")
        params["title"] = f"%{search_filter.title}%"

    if _is_set(search_filter.description):
        predicates.append("lower(description) LIKE lower(:description)")
        params["description"] = f"%{search_filter.description}%"

    if _is_set(search_filter.price_from):
        predicates.append("price >= :price_from")
        params["price_from"] = search_filter.price_from

    if _is_set(search_filter.price_to):
        predicates.append("price <= :price_to")
        params["price_to"] = search_filter.price_to

    if not predicates:
        return FilterQuery(SELECT_PRODUCTS, params)

    return FilterQuery(f"{SELECT_PRODUCTS} WHERE " + " AND ".join(predicates), params)
