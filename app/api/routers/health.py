from datetime import datetime, timezone

from fastapi import APIRouter, Request

router = APIRouter(tags=["Health"])

ENDPOINTS = {
    "GET": "/api/lembretes - List reminders",
    "POST": "/api/lembretes - Create reminder",
    "PUT": "/api/lembretes/:id - Update reminder",
    "DELETE": "/api/lembretes/:id - Delete reminder",
}

@router.get("/")
@router.get("/api")
def health(request: Request):
    return {
        "success": True,
        "message": "🚀 Mind It API Online!",
        "version": request.app.version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "endpoints": ENDPOINTS,
    }
