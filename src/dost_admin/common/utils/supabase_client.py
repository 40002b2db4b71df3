import logging
from functools import lru_cache

from supabase import Client, create_client

from dost_admin.common.utils.config import SupabaseSettings
from dost_admin.common.utils.custom_exceptions import NotConfigured

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _client_for(url: str, anon_key: str) -> Client:
    logger.info(f"Creating Supabase client for {url}")
    return create_client(url, anon_key)


def get_supabase_client(settings: SupabaseSettings) -> Client:
    if not settings.configured:
        raise NotConfigured("Supabase integration not configured.")
    return _client_for(settings.url, settings.anon_key)


def client_or_none(settings: SupabaseSettings):
    """The shared client, or None when the dashboard runs on fallback data."""
    if not settings.configured:
        logger.warning(
            "SUPABASE_URL / SUPABASE_ANON_KEY not set, running in demo mode"
        )
        return None
    return get_supabase_client(settings)


def describe_error(exc: Exception) -> str:
    message = getattr(exc, "message", None) or str(exc) or "Supabase request failed."
    details = getattr(exc, "details", None)
    hint = getattr(exc, "hint", None)
    parts = [str(message).strip()]
    if details:
        parts.append(f"Details: {details}")
    if hint:
        parts.append(f"Hint: {hint}")
    return " ".join(part for part in parts if part)
