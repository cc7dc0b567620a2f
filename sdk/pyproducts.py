# sdk/pyproducts.py
import requests
import httpx
from typing import Any, Dict, Optional

API_KEY_HEADER = "x-api-key"

class ProductClient:
    def __init__(self, base_url: str = "http://localhost:3000", api_key: Optional[str] = None,
                 timeout: int = 10, session: Optional[Any] = None,
                 async_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.async_transport = async_transport
        if api_key:
            self.session.headers.update({API_KEY_HEADER: api_key})

    @staticmethod
    def _product_body(name: str, description: str, price: float, category: str, in_stock: bool) -> Dict[str, Any]:
        return {
            "name": name, "description": description, "price": price,
            "category": category, "inStock": in_stock,
        }

    # Reads
    def list_products(self, category: Optional[str] = None, in_stock: Optional[bool] = None,
                      page: Optional[int] = None, limit: Optional[int] = None):
        params: Dict[str, Any] = {}
        if category:
            params["category"] = category
        if in_stock is not None:
            params["inStock"] = "true" if in_stock else "false"
        if page is not None:
            params["page"] = page
        if limit is not None:
            params["limit"] = limit
        r = self.session.get(f"{self.base_url}/api/products", params=params, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def search_products(self, q: str):
        r = self.session.get(f"{self.base_url}/api/products/search", params={"q": q}, timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def stats(self):
        r = self.session.get(f"{self.base_url}/api/products/stats", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def get_product(self, product_id: str):
        r = self.session.get(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    # Writes (need api_key)
    def create_product(self, name: str, description: str, price: float, category: str, in_stock: bool = True):
        r = self.session.post(f"{self.base_url}/api/products",
                              json=self._product_body(name, description, price, category, in_stock),
                              timeout=self.timeout)
        r.raise_for_status()
        return r.json()["product"]

    def update_product(self, product_id: str, name: str, description: str, price: float,
                       category: str, in_stock: bool):
        r = self.session.put(f"{self.base_url}/api/products/{product_id}",
                             json=self._product_body(name, description, price, category, in_stock),
                             timeout=self.timeout)
        r.raise_for_status()
        return r.json()["product"]

    def delete_product(self, product_id: str):
        r = self.session.delete(f"{self.base_url}/api/products/{product_id}", timeout=self.timeout)
        r.raise_for_status()
        return r.json()["product"]

    # Async create (example)
    async def create_product_async(self, name: str, description: str, price: float, category: str,
                                   in_stock: bool = True):
        headers = {API_KEY_HEADER: self.api_key} if self.api_key else {}
        async with httpx.AsyncClient(transport=self.async_transport, timeout=self.timeout) as client:
            r = await client.post(f"{self.base_url}/api/products",
                                  json=self._product_body(name, description, price, category, in_stock),
                                  headers=headers)
            # do not raise_for_status() here, callers may want to inspect 400/401
            return r


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "y")


if __name__ == "__main__":
    import argparse
    import os
    from rich import print

    parser = argparse.ArgumentParser(description="Product API CLI")
    parser.add_argument("--base-url", default=os.environ.get("PRODUCT_API_URL", "http://127.0.0.1:3000"))
    parser.add_argument("--api-key", default=os.environ.get("PRODUCT_API_KEY"))
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ---------------------------
    # Read commands
    # ---------------------------
    lp = subparsers.add_parser("list-products", help="List products")
    lp.add_argument("--category", help="Filter products by category")
    lp.add_argument("--in-stock", type=_parse_bool, help="Filter by stock status (true/false)")
    lp.add_argument("--page", type=int)
    lp.add_argument("--limit", type=int)

    sp = subparsers.add_parser("search", help="Search products by name or description")
    sp.add_argument("--q", required=True, help="Search text")

    subparsers.add_parser("stats", help="Show product statistics")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", required=True, help="ID of the product")

    # ---------------------------
    # Write commands
    # ---------------------------
    for cmd, help_text in (("create-product", "Create a new product"), ("update-product", "Replace a product")):
        wp = subparsers.add_parser(cmd, help=help_text)
        if cmd == "update-product":
            wp.add_argument("--product-id", required=True, help="ID of the product")
        wp.add_argument("--name", required=True)
        wp.add_argument("--description", required=True)
        wp.add_argument("--price", type=float, required=True)
        wp.add_argument("--category", required=True)
        wp.add_argument("--in-stock", type=_parse_bool, default=True)

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", required=True, help="ID of the product")

    # ---------------------------
    # Parse and execute
    # ---------------------------
    args = parser.parse_args()
    c = ProductClient(base_url=args.base_url, api_key=args.api_key)

    if args.command == "list-products":
        print(c.list_products(args.category, args.in_stock, args.page, args.limit))
    elif args.command == "search":
        print(c.search_products(args.q))
    elif args.command == "stats":
        print(c.stats())
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "create-product":
        print(c.create_product(args.name, args.description, args.price, args.category, args.in_stock))
    elif args.command == "update-product":
        print(c.update_product(args.product_id, args.name, args.description, args.price,
                               args.category, args.in_stock))
    elif args.command == "delete-product":
        print(c.delete_product(args.product_id))
