# app/core/supabase_client.py

from supabase import create_client, Client

from app.core.config import Settings


def create_supabase_client(settings: Settings) -> Client:
    """
    Cliente base con la anon key del proyecto.
    supabase-py valida URL/key al construir, así que esto puede lanzar
    con la configuración de relleno; quien llama decide qué hacer.
    """
    return create_client(settings.supabase_url, settings.supabase_key)
