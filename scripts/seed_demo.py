"""Seed demo products by calling the catalog HTTP API.

Best-effort: if the API is not running the script prints the error and exits
with status 1.

Usage:
    python scripts/seed_demo.py

The script reads CATALOG_URL from the environment; default matches the
service's default port.
"""
import os
import sys
from pathlib import Path

import httpx

# Ensure project root is on sys.path so we can import the app package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.client import CatalogClient

CATALOG_URL = os.environ.get("CATALOG_URL", "http://localhost:3001/products")

DEMO_PRODUCTS = [
    ("Manzana", 1.5),
    ("Pan integral", 2.25),
    ("Leche entera 1L", 0.99),
    ("Café molido 250g", 4.8),
    ("Aceite de oliva 500ml", 6.4),
]


def seed(client: CatalogClient) -> int:
    existing = {p["name"] for p in client.list_products()}
    created = 0
    for name, price in DEMO_PRODUCTS:
        if name in existing:
            continue
        product = client.create_product(name, price)
        print(f"Created product {product['id']}: {product['name']} (${product['price']})")
        created += 1
    return created


def main():
    print("Seeding demo products, CATALOG_URL=", CATALOG_URL)
    client = CatalogClient(base_url=CATALOG_URL)
    try:
        created = seed(client)
    except httpx.HTTPError as e:
        print(f"Catalog API unavailable: {e}")
        sys.exit(1)

    print(f"Seeded {created} new products")
    for p in client.list_products():
        print(p)


if __name__ == "__main__":
    main()
