import logging
from typing import Any, Dict, Optional

from supabase import Client

from app.core.errors import AuthenticationError

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, supabase: Client):
        self.supabase = supabase

    @staticmethod
    def extract_token(authorization: Optional[str]) -> str:
        """Pull the bearer token out of an Authorization header value"""
        if not authorization:
            raise AuthenticationError()
        scheme, _, token = authorization.partition(" ")
        token = token.strip()
        if scheme.lower() != "bearer" or not token:
            raise AuthenticationError()
        return token

    def get_current_user(self, authorization: Optional[str]) -> Dict[str, Any]:
        """Resolve the caller from the Authorization header via Supabase Auth"""
        token = self.extract_token(authorization)
        try:
            user_response = self.supabase.auth.get_user(token)
        except Exception as e:
            logger.warning(f"Token rejected by auth backend: {e}")
            raise AuthenticationError()
        if not user_response or not user_response.user:
            raise AuthenticationError()
        return {"id": user_response.user.id}
