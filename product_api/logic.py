import math
import uuid
from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Any, Dict, List, Optional, Union

from .core import coerce_positive_int, sanitize_product
from .database import PRODUCTS
from .errors import NotFoundError, ValidationError
from .models import ProductIn

# This file contains the core logic for all API endpoints.

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# wide enough for the exact sum of any float-sized prices
_STATS_CONTEXT = Context(prec=800, rounding=ROUND_HALF_UP)


def _average_price(prices: List[Union[int, float]]) -> float:
    """Mean rounded half-up to 2 decimals, computed exactly so large sums cannot overflow."""
    with localcontext(_STATS_CONTEXT):
        mean = sum(Decimal(p) for p in prices) / len(prices)
        return float(mean.quantize(Decimal("0.01")))


def _not_found(product_id: str) -> NotFoundError:
    return NotFoundError(f"Product with ID {product_id} not found")

# Read endpoints
async def list_products_logic(
    category: Optional[str] = None,
    in_stock: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    out = PRODUCTS.all()
    if category:
        wanted = category.lower()
        out = [p for p in out if p["category"].lower() == wanted]
    if in_stock is not None:
        wanted_flag = in_stock == "true"
        out = [p for p in out if p["inStock"] == wanted_flag]

    page_no = coerce_positive_int(page, DEFAULT_PAGE)
    per_page = coerce_positive_int(limit, DEFAULT_LIMIT)
    start = (page_no - 1) * per_page

    return {
        "products": out[start:start + per_page],
        "pagination": {
            "currentPage": page_no,
            "totalPages": math.ceil(len(out) / per_page),
            "totalProducts": len(out),
            "productsPerPage": per_page,
        },
    }

async def search_products_logic(q: Optional[str]) -> Dict[str, Any]:
    if not q:
        raise ValidationError('Search query parameter "q" is required')
    term = q.lower()
    results = [
        p for p in PRODUCTS.all()
        if term in p["name"].lower() or term in p["description"].lower()
    ]
    return {"query": q, "results": results, "count": len(results)}

async def product_stats_logic() -> Dict[str, Any]:
    products = PRODUCTS.all()
    category_counts: Dict[str, int] = {}
    for p in products:
        category_counts[p["category"]] = category_counts.get(p["category"], 0) + 1

    stats: Dict[str, Any] = {
        "totalProducts": len(products),
        "inStockCount": sum(1 for p in products if p["inStock"]),
        "outOfStockCount": sum(1 for p in products if not p["inStock"]),
        "categoryCounts": category_counts,
        "averagePrice": 0,
        "priceRange": {"min": 0, "max": 0},
    }
    if products:
        prices = [p["price"] for p in products]
        stats["averagePrice"] = _average_price(prices)
        stats["priceRange"] = {"min": min(prices), "max": max(prices)}
    return stats

async def get_product_logic(product_id: str) -> Dict[str, Any]:
    p = PRODUCTS.find(product_id)
    if p is None:
        raise _not_found(product_id)
    return p

# Write endpoints (payload already authenticated and validated)
async def create_product_logic(payload: ProductIn) -> Dict[str, Any]:
    product = sanitize_product(payload, uuid.uuid4().hex)
    PRODUCTS.append(product)
    return product

async def update_product_logic(product_id: str, payload: ProductIn) -> Dict[str, Any]:
    idx = PRODUCTS.index_of(product_id)
    if idx == -1:
        raise _not_found(product_id)
    product = sanitize_product(payload, product_id)
    PRODUCTS.replace(idx, product)
    return product

async def delete_product_logic(product_id: str) -> Dict[str, Any]:
    idx = PRODUCTS.index_of(product_id)
    if idx == -1:
        raise _not_found(product_id)
    return PRODUCTS.pop(idx)
