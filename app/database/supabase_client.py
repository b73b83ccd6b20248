from typing import Optional

from supabase import create_client, Client
from supabase.client import ClientOptions

from app.config import Settings


def create_request_client(settings: Settings, authorization: Optional[str] = None) -> Client:
    """Build a client bound to one request.

    The caller's Authorization header is forwarded verbatim on every storage and
    table call, so row-level security applies as the caller.
    """
    options = None
    if authorization:
        options = ClientOptions(headers={"Authorization": authorization})
    return create_client(settings.supabase_url, settings.supabase_anon_key, options=options)
