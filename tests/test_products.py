# tests/test_products.py
import json
from unittest.mock import MagicMock

from catalog_admin.api.deps import get_db
from catalog_admin.config import settings
from catalog_admin.main import app


def _search(**criteria):
    return json.dumps(criteria)


def test_list_active_widgets_second_page(client, make_category, make_product):
    widgets = make_category("Widgets")
    gadgets = make_category("Gadgets")
    for i in range(12):
        make_product(f"Widget {i}", category=widgets)
    make_product("Old widget", category=widgets, status="inactive")
    make_product("Gone widget", category=widgets, status="deleted")
    make_product("Gadget", category=gadgets)

    resp = client.get("/products", params={"search": _search(status="active", category="Widgets"), "page": 2, "limit": 5})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["total"] == 12
    assert body["page"] == 2
    assert body["pages"] == 3
    assert len(body["products"]) == 5
    # sorted by productId: page 2 holds the 6th..10th widgets
    assert [p["name"] for p in body["products"]] == [f"Widget {i}" for i in range(5, 10)]
    assert all(p["category"] == {"name": "Widgets"} for p in body["products"])


def test_default_listing_hides_deleted(client, make_category, make_product):
    widgets = make_category("Widgets")
    make_product("Lamp", category=widgets)
    make_product("Lamp shade", category=widgets, status="inactive")
    make_product("Lamp post", category=widgets, status="deleted")

    resp = client.get("/products")
    assert resp.status_code == 200, resp.text
    names = {p["name"] for p in resp.json()["products"]}
    assert names == {"Lamp", "Lamp shade"}

    resp = client.get("/products", params={"search": _search(name="LAMP", category="Widgets")})
    names = {p["name"] for p in resp.json()["products"]}
    assert names == {"Lamp", "Lamp shade"}

    resp = client.get("/products", params={"search": _search(status="deleted")})
    assert [p["name"] for p in resp.json()["products"]] == ["Lamp post"]


def test_empty_result_has_zero_pages(client):
    resp = client.get("/products", params={"search": _search(name="nothing")})
    assert resp.status_code == 200, resp.text
    assert resp.json() == {"products": [], "total": 0, "page": 1, "pages": 0}


def test_listing_shape_and_image_url(client, make_category, make_product):
    widgets = make_category("Widgets")
    make_product("Bowl", category=widgets, image="bowl-1.jpg", price=12.5)
    make_product("Spoon", category=widgets)

    resp = client.get("/products")
    assert resp.status_code == 200, resp.text
    bowl, spoon = resp.json()["products"]
    assert bowl["imageUrl"] == "http://testserver/uploads/bowl-1.jpg"
    assert bowl["price"] == 12.5
    assert bowl["productId"] == 1
    assert isinstance(bowl["_id"], str)
    assert spoon["imageUrl"] is None


def test_filter_by_product_id(client, make_product):
    make_product("A")
    make_product("B")
    resp = client.get("/products", params={"search": _search(productId="2")})
    assert [p["name"] for p in resp.json()["products"]] == ["B"]


def test_invalid_product_id_and_status(client):
    resp = client.get("/products", params={"search": _search(productId="two")})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid productId. Must be a number."}

    resp = client.get("/products", params={"search": _search(status="archived")})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid status. Must be 'active', 'inactive', or 'deleted'."}


def test_non_string_status_is_an_invalid_status(client):
    for status in [1, True, ["active"], {"$ne": "deleted"}]:
        resp = client.get("/products", params={"search": json.dumps({"status": status})})
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid status. Must be 'active', 'inactive', or 'deleted'."}


def test_page_beyond_int64_offset_is_empty(client, make_product):
    make_product("Only")
    resp = client.get("/products", params={"page": "99999999999999999999", "limit": "5"})
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["products"] == []
    assert body["total"] == 1
    assert body["pages"] == 1


def test_malformed_search_never_reaches_store(client):
    store = MagicMock()
    app.dependency_overrides[get_db] = lambda: store
    for raw in ["{bad json", "[]", '{"unknown": 1}']:
        resp = client.get("/products", params={"search": raw})
        assert resp.status_code == 400
        assert resp.json() == {"message": "Invalid search query format. Must be valid JSON."}
    store.products.aggregate.assert_not_called()


def test_non_numeric_paging_falls_back_to_defaults(client, make_product):
    for i in range(12):
        make_product(f"P{i}")
    resp = client.get("/products", params={"page": "first", "limit": "many"})
    body = resp.json()
    assert body["page"] == 1
    assert len(body["products"]) == 10
    assert body["pages"] == 2


def test_configured_max_limit(client, make_product, monkeypatch):
    monkeypatch.setattr(settings, "MAX_PAGE_LIMIT", 3)
    for i in range(5):
        make_product(f"P{i}")
    body = client.get("/products", params={"limit": 50}).json()
    assert len(body["products"]) == 3
    assert body["pages"] == 2


def test_store_failure_is_reported_generically(client):
    store = MagicMock()
    store.products.aggregate.side_effect = RuntimeError("connection refused")
    app.dependency_overrides[get_db] = lambda: store
    resp = client.get("/products")
    assert resp.status_code == 500
    assert resp.json() == {"message": "An unexpected error occurred."}
