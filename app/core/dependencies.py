"""
Request-scoped dependencies: settings, the per-request Supabase client and the
authenticated caller.
"""

from typing import Any, Dict
import logging

from fastapi import Depends, Request
from supabase import Client

from app.config import Settings, get_settings
from app.core.errors import BackendError
from app.database.supabase_client import create_request_client
from app.modules.auth.service import AuthService

logger = logging.getLogger(__name__)


def get_request_supabase(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> Client:
    """Client that forwards the caller's Authorization header downstream"""
    try:
        return create_request_client(settings, request.headers.get("Authorization"))
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        raise BackendError.from_exception(e)


def get_auth_service(supabase: Client = Depends(get_request_supabase)) -> AuthService:
    return AuthService(supabase)


def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Resolve the authenticated user; raises AuthenticationError otherwise"""
    return auth_service.get_current_user(request.headers.get("Authorization"))
