from supabase import Client, create_client

from app.core.config import get_settings

_client = None


def get_supabase_client() -> Client | None:
    """Shared client, or None when Supabase credentials are not configured."""
    global _client
    if _client:
        return _client
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_service_key:
        return None
    _client = create_client(settings.supabase_url, settings.supabase_service_key)
    return _client
