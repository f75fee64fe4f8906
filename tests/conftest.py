from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.db import ReminderStore, StoreError
from main import create_app


class InMemoryStore(ReminderStore):
    """Store de pruebas: guarda filas en memoria o falla siempre si offline=True."""

    def __init__(self, offline: bool = False) -> None:
        super().__init__(Settings())
        self.offline = offline
        self.rows: List[Dict[str, Any]] = []
        self.calls: List[tuple] = []
        self._next_id = 1

    def _check(self, op: str) -> None:
        if self.offline:
            raise StoreError(f"[lembretes.{op}] connection refused")

    def list_recent(self, limit: int) -> List[Dict[str, Any]]:
        self.calls.append(("select", limit))
        self._check("select")
        rows = sorted(self.rows, key=lambda r: r["created_at"], reverse=True)
        return rows[:limit]

    def insert(self, row: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.calls.append(("insert", row))
        self._check("insert")
        stored = {"id": self._next_id, **row}
        self._next_id += 1
        self.rows.append(stored)
        return stored

    def update(self, reminder_id: str, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        self.calls.append(("update", reminder_id, patch))
        self._check("update")
        for row in self.rows:
            if str(row["id"]) == reminder_id:
                row.update(patch)
                return row
        return None

    def delete(self, reminder_id: str) -> None:
        self.calls.append(("delete", reminder_id))
        self._check("delete")
        self.rows = [r for r in self.rows if str(r["id"]) != reminder_id]


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def offline_store() -> InMemoryStore:
    return InMemoryStore(offline=True)


@pytest.fixture
def client(store: InMemoryStore) -> TestClient:
    return TestClient(create_app(settings=Settings(), store=store))


@pytest.fixture
def offline_client(offline_store: InMemoryStore) -> TestClient:
    return TestClient(create_app(settings=Settings(), store=offline_store))
