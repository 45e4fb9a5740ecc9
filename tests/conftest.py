from __future__ import annotations

import copy
from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient


class FakeResponse:
    def __init__(self, data: list[dict], count: int | None = None) -> None:
        self.data = data
        self.count = count


class FakeQuery:
    """Subset of the supabase-py query builder evaluated against in-memory rows."""

    def __init__(self, backend: "FakeBackend", table: str) -> None:
        self._backend = backend
        self._table = table
        self._op = "select"
        self._payload: Any = None
        self._columns = "*"
        self._count: str | None = None
        self._filters: list[Callable[[dict], bool]] = []
        self._order: tuple[str, bool] | None = None
        self._limit: int | None = None
        self._range: tuple[int, int] | None = None

    def select(self, columns: str = "*", count: str | None = None) -> "FakeQuery":
        self._op = "select"
        self._columns = columns
        self._count = count
        return self

    def insert(self, payload: Any) -> "FakeQuery":
        self._op = "insert"
        self._payload = payload
        return self

    def update(self, payload: dict) -> "FakeQuery":
        self._op = "update"
        self._payload = payload
        return self

    def delete(self) -> "FakeQuery":
        self._op = "delete"
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self._filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column: str, values: Any) -> "FakeQuery":
        allowed = list(values)
        self._filters.append(lambda row: row.get(column) in allowed)
        return self

    def ilike(self, column: str, pattern: str) -> "FakeQuery":
        needle = pattern.strip("%").lower()
        self._filters.append(lambda row: needle in str(row.get(column) or "").lower())
        return self

    def order(self, column: str, desc: bool = False) -> "FakeQuery":
        self._order = (column, desc)
        return self

    def limit(self, size: int) -> "FakeQuery":
        self._limit = size
        return self

    def range(self, start: int, end: int) -> "FakeQuery":
        self._range = (start, end)
        return self

    def _matches(self, row: dict) -> bool:
        return all(check(row) for check in self._filters)

    def execute(self) -> FakeResponse:
        rows = self._backend.tables.setdefault(self._table, [])
        self._backend.calls.append((self._table, self._op))

        if self._op == "insert":
            payloads = self._payload if isinstance(self._payload, list) else [self._payload]
            created = [self._backend.add(self._table, item) for item in payloads]
            return FakeResponse(copy.deepcopy(created))

        matched = [row for row in rows if self._matches(row)]

        if self._op == "update":
            for row in matched:
                row.update(self._payload)
            return FakeResponse(copy.deepcopy(matched))

        if self._op == "delete":
            self._backend.tables[self._table] = [row for row in rows if row not in matched]
            return FakeResponse(copy.deepcopy(matched))

        total = len(matched)
        if self._order:
            column, desc = self._order
            matched = sorted(matched, key=lambda row: str(row.get(column) or ""), reverse=desc)
        if self._range:
            start, end = self._range
            matched = matched[start : end + 1]
        if self._limit is not None:
            matched = matched[: self._limit]
        if self._columns != "*":
            wanted = [name.strip() for name in self._columns.split(",")]
            matched = [{name: row.get(name) for name in wanted} for row in matched]
        return FakeResponse(copy.deepcopy(matched), count=total if self._count else None)


class FakeBackend:
    def __init__(self) -> None:
        self.tables: dict[str, list[dict]] = {}
        self.calls: list[tuple[str, str]] = []
        self._sequence = 0

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def add(self, table: str, row: dict) -> dict:
        self._sequence += 1
        record = {"id": f"{table}_{self._sequence}", "created": f"2024-01-01T00:00:{self._sequence:04d}", **row}
        self.tables.setdefault(table, []).append(record)
        return record


SHOP = (6.1145877, 125.1802737)


@pytest.fixture
def backend() -> FakeBackend:
    fake = FakeBackend()
    fake.add("products", {"id": "P1", "product_name": "Daikin Split-type 1.5HP", "category": "Airconditioner"})
    fake.add("products", {"id": "P2", "product_name": "LG Refrigerator", "category": "Appliance"})
    fake.add("products", {"id": "P3", "product_name": "Daikin Window Type", "category": "Airconditioner"})
    fake.add("product_pricing", {"product_id": "P1", "base_price": 1200, "final_price": 1000})
    fake.add("product_pricing", {"product_id": "P2", "base_price": 750, "final_price": None})
    fake.add("product_pricing", {"product_id": "P3", "base_price": 500, "final_price": 500})
    fake.add("product_stocks", {"product_id": "P1", "stock_quantity": 4})
    return fake


@pytest.fixture
def api_client(backend: FakeBackend) -> TestClient:
    from storefront.api.deps import get_backend_client, get_geolocation_client, get_optional_backend_client
    from storefront.main import create_app

    app = create_app()
    app.dependency_overrides[get_backend_client] = lambda: backend
    app.dependency_overrides[get_optional_backend_client] = lambda: backend
    app.dependency_overrides[get_geolocation_client] = lambda: None
    return TestClient(app)
