# path: geojson-mock-api/app/services/mock_store.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Any, Callable, Dict, Generic, Hashable, List, Optional, TypeVar

from app.models.geojson_models import GeometryCollection, GeoJsonObject
from app.models.marketplace_models import Order, OrderLine, Product
from app.models.petstore_models import Category, Pet, StoreOrder, Tag, User
from app.models.task_models import Task
from app.utils.geo import compute_bbox


V = TypeVar("V")


class RecordStore(Generic[V]):
    """
    In-process record table for the mock routes. Handlers run in FastAPI's
    thread pool, so every access goes through one lock.
    """

    def __init__(self, records: Optional[Dict[Hashable, V]] = None):
        self._lock = Lock()
        self._records: Dict[Hashable, V] = dict(records or {})

    def values(self) -> List[V]:
        with self._lock:
            return list(self._records.values())

    def get(self, key: Hashable) -> Optional[V]:
        with self._lock:
            return self._records.get(key)

    def put(self, key: Hashable, value: V) -> V:
        with self._lock:
            self._records[key] = value
        return value

    def pop(self, key: Hashable) -> Optional[V]:
        with self._lock:
            return self._records.pop(key, None)

    def update(self, key: Hashable, fn: Callable[[V], V]) -> Optional[V]:
        with self._lock:
            current = self._records.get(key)
            if current is None:
                return None
            self._records[key] = fn(current)
            return self._records[key]

    def next_int_key(self) -> int:
        with self._lock:
            ints = [k for k in self._records if isinstance(k, int)]
            return max(ints, default=0) + 1


class GeometryStore:
    """
    Geometries accepted by POST /geometry, served back as collections.

    Unbounded: the list grows until the app restarts, and every GET recomputes
    the collection bboxes.
    """

    def __init__(self):
        self._lock = Lock()
        self._items: List[GeoJsonObject] = []

    def add(self, geometry: GeoJsonObject) -> GeoJsonObject:
        with self._lock:
            self._items.append(geometry)
        return geometry

    def collections(self) -> List[GeometryCollection]:
        with self._lock:
            items = list(self._items)

        collections = [g for g in items if isinstance(g, GeometryCollection)]
        singles = [g for g in items if not isinstance(g, GeometryCollection)]
        if singles:
            collections.append(GeometryCollection.model_construct(type="GeometryCollection", geometries=singles))

        out = []
        for collection in collections:
            bbox = collection.bbox or compute_bbox([collection])
            values: Dict[str, Any] = {
                "type": "GeometryCollection",
                "geometries": collection.geometries,
                **(collection.model_extra or {}),
            }
            if bbox is not None:
                values["bbox"] = bbox
            # Already validated; skip re-validation so nesting accepted in
            # non-strict mode is served unchanged.
            out.append(GeometryCollection.model_construct(**values))
        return out


@dataclass
class MockStores:
    tasks: RecordStore[Task] = field(default_factory=RecordStore)
    products: RecordStore[Product] = field(default_factory=RecordStore)
    orders: RecordStore[Order] = field(default_factory=RecordStore)
    pets: RecordStore[Pet] = field(default_factory=RecordStore)
    store_orders: RecordStore[StoreOrder] = field(default_factory=RecordStore)
    users: RecordStore[User] = field(default_factory=RecordStore)
    geometries: GeometryStore = field(default_factory=GeometryStore)


def build_mock_stores() -> MockStores:
    """Fresh stores seeded with the documented example records."""
    stores = MockStores()
    stores.tasks.put(
        "12345",
        Task(id="12345", title="Buy groceries", description="Milk, Bread, Butter", completed=False),
    )
    stores.products.put(
        "B00123456",
        Product(
            id="B00123456",
            name="Echo Dot (3rd Gen)",
            description="Smart speaker with Alexa.",
            price=49.99,
            category="Electronics",
            availability=True,
        ),
    )
    stores.orders.put(
        "ORDER123456",
        Order(
            id="ORDER123456",
            customerId="CUST78910",
            orderDate=datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc),
            products=[OrderLine(productId="B00123456", quantity=2)],
            totalAmount=99.98,
            status="pending",
        ),
    )
    stores.pets.put(
        10,
        Pet(
            id=10,
            name="doggie",
            category=Category(id=1, name="Dogs"),
            photoUrls=["https://example.com/doggie.jpg"],
            tags=[Tag(id=1, name="tag1")],
            status="available",
        ),
    )
    stores.store_orders.put(
        10,
        StoreOrder(id=10, petId=198772, quantity=7, status="approved", complete=True),
    )
    stores.users.put(
        "theUser",
        User(
            id=10,
            username="theUser",
            firstName="John",
            lastName="James",
            email="john@email.com",
            password="12345",
            phone="12345",
            userStatus=1,
        ),
    )
    return stores
