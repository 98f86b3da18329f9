# tests/conftest.py
import os
import sys
import io
from PIL import Image

import mongomock
import pytest
from fastapi.testclient import TestClient

# ensure project root is importable
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from catalog_admin.config import settings  # noqa: E402
from catalog_admin.database import CatalogDB  # noqa: E402
from catalog_admin.api.deps import get_db  # noqa: E402
from catalog_admin.main import app  # noqa: E402


@pytest.fixture
def catalog_db():
    """In-memory catalog store backed by mongomock."""
    return CatalogDB(client=mongomock.MongoClient(), db_name="catalog_test")


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    """
    Point settings.UPLOAD_DIR to a temp directory for the duration of a test.
    Returns the directory path.
    """
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(path), raising=False)
    monkeypatch.setattr(settings, "BASE_URL", "http://cdn.example.test", raising=False)
    return path


@pytest.fixture
def client(catalog_db, upload_dir):
    app.dependency_overrides[get_db] = lambda: catalog_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def make_category(catalog_db):
    """
    Insert a category and return its document.
    Usage: cat = make_category("Widgets", status="deleted")
    """
    def _fn(name="Widgets", status="active"):
        doc = {"name": name, "status": status}
        catalog_db.categories.insert_one(doc)
        return doc
    return _fn


@pytest.fixture
def make_product(catalog_db):
    """
    Insert a product directly into the store (bypassing the upload flow).
    productId defaults to the next counter value.
    """
    def _fn(name="Product", category=None, status="active", price=10.0, image=None, product_id=None):
        doc = {
            "name": name,
            "description": f"{name} description",
            "price": price,
            "status": status,
            "productId": product_id if product_id is not None else catalog_db.next_product_id(),
        }
        if category is not None:
            doc["category"] = category["_id"]
        if image is not None:
            doc["image"] = image
        catalog_db.products.insert_one(doc)
        return doc
    return _fn


@pytest.fixture
def make_sample_jpeg_bytes():
    """
    Return a callable that generates JPEG bytes for tests that need image uploads.
    Usage: jpg = make_sample_jpeg_bytes(size=(200,200))
    """
    def _fn(size=(200, 200), color=(180, 120, 60)):
        bio = io.BytesIO()
        im = Image.new("RGB", size, color)
        im.save(bio, format="JPEG", quality=85)
        bio.seek(0)
        return bio.read()
    return _fn
