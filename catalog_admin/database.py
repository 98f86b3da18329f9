# catalog_admin/database.py
"""
MongoDB access layer for the catalog. Holds a lazily created client and exposes
the collections used by the product services.

Usage:
    from catalog_admin.database import db
    db.products.find_one({"productId": 12})
    db.categories.find_one({"name": "Widgets"})
    db.next_product_id()
"""

from typing import Optional
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.database import Database
from catalog_admin.config import settings


class CatalogDB:
    """
    Thin wrapper around a pymongo database. A client may be injected (tests pass a
    mongomock client); otherwise one is created on first use from settings.MONGO_URL.
    """

    def __init__(self, client: Optional[MongoClient] = None, db_name: Optional[str] = None):
        self._client = client
        self.db_name = db_name or settings.MONGO_DB

    @property
    def client(self) -> MongoClient:
        if self._client is None:
            self._client = MongoClient(settings.MONGO_URL, tz_aware=True)
        return self._client

    @property
    def database(self) -> Database:
        return self.client[self.db_name]

    @property
    def products(self) -> Collection:
        return self.database["products"]

    @property
    def categories(self) -> Collection:
        return self.database["categories"]

    @property
    def counters(self) -> Collection:
        return self.database["counters"]

    def next_product_id(self) -> int:
        """
        Allocate the next human-facing productId. The counter document is created
        on first use; $inc keeps allocation atomic across concurrent creations.
        """
        doc = self.counters.find_one_and_update(
            {"_id": "productId"},
            {"$inc": {"seq": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(doc["seq"])

    def ensure_indexes(self) -> None:
        self.products.create_index("productId", unique=True)
        self.products.create_index("status")
        self.categories.create_index("name")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


# module-level singleton for convenience
db = CatalogDB()
