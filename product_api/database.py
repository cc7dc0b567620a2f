from typing import Any, Dict, List, Optional

# This file holds the in-memory product store. Order is insertion order.

Record = Dict[str, Any]

SEED_PRODUCTS: List[Record] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance laptop with 16GB RAM",
        "price": 1200,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Smartphone",
        "description": "Latest model with 128GB storage",
        "price": 800,
        "category": "electronics",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Coffee Maker",
        "description": "Programmable coffee maker with timer",
        "price": 50,
        "category": "kitchen",
        "inStock": False,
    },
]


class ProductStore:
    """Ordered, process-local collection of validated product records."""

    def __init__(self, seed: Optional[List[Record]] = None):
        self._items: List[Record] = [dict(p) for p in (seed or [])]

    def __len__(self) -> int:
        return len(self._items)

    def all(self) -> List[Record]:
        return list(self._items)

    def find(self, product_id: str) -> Optional[Record]:
        for p in self._items:
            if p["id"] == product_id:
                return p
        return None

    def index_of(self, product_id: str) -> int:
        for i, p in enumerate(self._items):
            if p["id"] == product_id:
                return i
        return -1

    def append(self, record: Record) -> None:
        self._items.append(record)

    def replace(self, index: int, record: Record) -> None:
        self._items[index] = record

    def pop(self, index: int) -> Record:
        return self._items.pop(index)

    def reset(self) -> None:
        self._items = [dict(p) for p in SEED_PRODUCTS]


PRODUCTS = ProductStore(SEED_PRODUCTS)
