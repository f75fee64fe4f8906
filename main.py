# main.py

import logging
import sys
from typing import Optional

from fastapi import FastAPI

from app.core.config import API_VERSION, Settings, get_settings
from app.core.cors import cors_and_logging
from app.core.db import ReminderStore
from app.core.errors import register_exception_handlers

# Routers de Mind It
from app.api.routers import health, reminders, not_found


def create_app(settings: Optional[Settings] = None, store: Optional[ReminderStore] = None) -> FastAPI:
    """
    Construye la app. `store` permite inyectar otro store (tests, otro backend);
    si no se pasa, se usa Supabase con la configuración del entorno.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Mind It API",
        description="""
Serverless API for the Mind It PWA: CRUD over reminders (`lembretes`) stored in Supabase.

**Notes**
- If Supabase is unreachable every operation still answers successfully with simulated data
  (offline mode); only a blank reminder text (400) or an unknown route (404) are errors.
- CORS is open to any origin.
""",
        version=API_VERSION,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.store = store or ReminderStore(settings)

    app.middleware("http")(cors_and_logging)
    register_exception_handlers(app)

    # Orden importa: el catch-all siempre al final
    app.include_router(health.router)
    app.include_router(reminders.router)
    app.include_router(not_found.router)

    return app


# -------------------------------------------------------------------
# Logging y app para el runtime serverless
# -------------------------------------------------------------------
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
