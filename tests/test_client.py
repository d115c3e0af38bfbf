from app.client import CatalogClient


def make_catalog(client):
    return CatalogClient(http=client, base_url="/products")


def test_client_create_and_list(client):
    catalog = make_catalog(client)
    created = catalog.create_product("Manzana", 1.5)
    assert created == {"id": 1, "name": "Manzana", "price": 1.5}
    assert catalog.list_products() == [created]


def test_client_get_update_delete(client):
    catalog = make_catalog(client)
    created = catalog.create_product("Leche", 0.99)

    assert catalog.get_product(created["id"]) == created
    updated = catalog.update_product(created["id"], "Leche entera", 1.09)
    assert updated == {"id": created["id"], "name": "Leche entera", "price": 1.09}

    assert catalog.delete_product(created["id"]) is True
    assert catalog.delete_product(created["id"]) is False
    assert catalog.get_product(created["id"]) is None
    assert catalog.update_product(created["id"], "x", 1.0) is None


def test_client_strips_trailing_slash(client):
    catalog = CatalogClient(http=client, base_url="/products/")
    assert catalog.base_url == "/products"
    assert catalog.list_products() == []
