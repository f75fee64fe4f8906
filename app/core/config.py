# app/core/config.py

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel

# Valores de relleno: sin credenciales reales todas las operaciones caen a modo offline
DEFAULT_SUPABASE_URL = "https://your-project.supabase.co"
DEFAULT_SUPABASE_KEY = "your-anon-key"
DEFAULT_REMINDERS_TABLE = "lembretes"

API_VERSION = "1.0.0"


def _log_level(value) -> str:
    # Un nivel desconocido (p.ej. "verbose") haría fallar basicConfig al importar
    level = (value or "INFO").upper()
    return level if isinstance(logging.getLevelName(level), int) else "INFO"


class Settings(BaseModel):
    supabase_url: str = DEFAULT_SUPABASE_URL
    supabase_key: str = DEFAULT_SUPABASE_KEY
    reminders_table: str = DEFAULT_REMINDERS_TABLE
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Lee la configuración del entorno (y de .env si existe).
        Nunca falla: las variables ausentes quedan con su valor por defecto.
        """
        load_dotenv()
        return cls(
            supabase_url=(os.getenv("SUPABASE_URL") or DEFAULT_SUPABASE_URL).rstrip("/"),
            supabase_key=os.getenv("SUPABASE_KEY") or DEFAULT_SUPABASE_KEY,
            reminders_table=os.getenv("REMINDERS_TABLE") or DEFAULT_REMINDERS_TABLE,
            log_level=_log_level(os.getenv("LOG_LEVEL")),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
