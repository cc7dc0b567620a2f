# product_api/models.py
import math
from pydantic import BaseModel, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator
from typing import Dict, List, Union

class ProductIn(BaseModel):
    name: StrictStr
    description: StrictStr
    price: Union[StrictInt, StrictFloat]
    category: StrictStr
    inStock: StrictBool

    @field_validator("name", "description", "category")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("price")
    @classmethod
    def non_negative_finite(cls, v: Union[int, float]) -> Union[int, float]:
        # prices must fit a float; huge JSON integers do not
        try:
            as_float = float(v)
        except OverflowError:
            raise ValueError("must be a finite number")
        if not math.isfinite(as_float) or v < 0:
            raise ValueError("must be a non-negative number")
        return v

class Product(BaseModel):
    id: str
    name: str
    description: str
    price: Union[int, float]
    category: str
    inStock: bool

class ProductEnvelope(BaseModel):
    message: str
    product: Product

class Pagination(BaseModel):
    currentPage: int
    totalPages: int
    totalProducts: int
    productsPerPage: int

class ProductPage(BaseModel):
    products: List[Product]
    pagination: Pagination

class SearchResult(BaseModel):
    query: str
    results: List[Product]
    count: int

class PriceRange(BaseModel):
    min: Union[int, float] = 0
    max: Union[int, float] = 0

class ProductStats(BaseModel):
    totalProducts: int
    inStockCount: int
    outOfStockCount: int
    categoryCounts: Dict[str, int]
    averagePrice: Union[int, float]
    priceRange: PriceRange

class ErrorBody(BaseModel):
    error: str
    message: str
    statusCode: int
