# app/core/db.py

from typing import Any, Callable, Dict, List, Optional

from fastapi import Request
from supabase import Client

from app.core.config import Settings
from app.core.supabase_client import create_supabase_client


class StoreError(Exception):
    """Cualquier fallo del store (red, PostgREST, credenciales, cliente)."""


class ReminderStore:
    """
    Acceso a la tabla de lembretes en Supabase.
    Todas las operaciones devuelven filas (dicts) o lanzan StoreError.
    """

    def __init__(self, settings: Settings, client: Optional[Client] = None):
        self.settings = settings
        self.table_name = settings.reminders_table
        self._client = client

    @property
    def client(self) -> Client:
        # Se crea una sola vez y se reutiliza (solo lectura) entre requests
        if self._client is None:
            try:
                self._client = create_supabase_client(self.settings)
            except Exception as e:
                raise StoreError(f"[supabase] cannot create client: {e}") from e
        return self._client

    def _execute(self, op: str, build: Callable[[Client], Any]) -> List[Dict[str, Any]]:
        try:
            res = build(self.client).execute()
        except StoreError:
            raise
        except Exception as e:
            raise StoreError(f"[{self.table_name}.{op}] {e}") from e

        err = getattr(res, "error", None)
        if err:
            raise StoreError(f"[{self.table_name}.{op}] {err}")
        return getattr(res, "data", None) or []

    def list_recent(self, limit: int) -> List[Dict[str, Any]]:
        return self._execute(
            "select",
            lambda sb: sb.table(self.table_name)
            .select("*")
            .order("created_at", desc=True)
            .limit(limit),
        )

    def insert(self, row: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        # En v2 el insert ya devuelve la fila insertada (no encadenar .select())
        data = self._execute("insert", lambda sb: sb.table(self.table_name).insert(row))
        return data[0] if data else None

    def update(self, reminder_id: str, patch: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        data = self._execute(
            "update",
            lambda sb: sb.table(self.table_name).update(patch).eq("id", reminder_id),
        )
        return data[0] if data else None

    def delete(self, reminder_id: str) -> None:
        self._execute(
            "delete",
            lambda sb: sb.table(self.table_name).delete().eq("id", reminder_id),
        )


def get_store(request: Request) -> ReminderStore:
    """Dependencia: el store que se construyó al crear la app."""
    return request.app.state.store
