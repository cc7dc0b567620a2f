#!/usr/bin/env python
import os

from sdk.pyproducts import ProductClient

def main():
    c = ProductClient(
        base_url=os.environ.get("PRODUCT_API_URL", "http://127.0.0.1:3000"),
        api_key=os.environ.get("PRODUCT_API_KEY", "your-secret-api-key"),
    )

    # -----------------------------
    # Browse the seeded catalogue
    # -----------------------------
    print("Listing products...")
    print(c.list_products())

    print("\nElectronics in stock...")
    print(c.list_products(category="Electronics", in_stock=True))

    print("\nSearching for 'coffee'...")
    print(c.search_products("coffee"))

    # -----------------------------
    # Create, update, delete
    # -----------------------------
    print("\nCreating a product...")
    kettle = c.create_product("  Kettle ", "Electric kettle, 1.7L", 35, " Kitchen ", True)
    print(kettle)

    print("\nMarking it out of stock...")
    print(c.update_product(kettle["id"], "Kettle", "Electric kettle, 1.7L", 29.99, "kitchen", False))

    print("\nStatistics...")
    print(c.stats())

    print("\nDeleting it again...")
    print(c.delete_product(kettle["id"]))

if __name__ == "__main__":
    main()
