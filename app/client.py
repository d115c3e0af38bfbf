"""Small HTTP client for the catalog API.

Used by ``scripts/seed_demo.py``. Any ``httpx.Client`` works as transport,
including FastAPI's ``TestClient``.
"""
from typing import List, Optional

import httpx

API_URL = "http://localhost:3001/products"


class CatalogClient:
    def __init__(self, http: Optional[httpx.Client] = None, base_url: str = API_URL, timeout: float = 5.0):
        self.http = http or httpx.Client(timeout=timeout)
        self.base_url = base_url.rstrip("/")

    def list_products(self) -> List[dict]:
        r = self.http.get(self.base_url)
        r.raise_for_status()
        return r.json()["products"]

    def create_product(self, name: str, price: float) -> dict:
        r = self.http.post(self.base_url, json={"name": name, "price": price})
        r.raise_for_status()
        return r.json()["product"]

    def get_product(self, product_id: int) -> Optional[dict]:
        r = self.http.get(f"{self.base_url}/{product_id}")
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()["product"]

    def update_product(self, product_id: int, name: str, price: float) -> Optional[dict]:
        r = self.http.put(f"{self.base_url}/{product_id}", json={"name": name, "price": price})
        if r.status_code == 404:
            return None
        r.raise_for_status()
        return r.json()["product"]

    def delete_product(self, product_id: int) -> bool:
        r = self.http.delete(f"{self.base_url}/{product_id}")
        if r.status_code == 404:
            return False
        r.raise_for_status()
        return True
