"""
Error taxonomy for the avatar endpoint.

Every kind currently maps to HTTP 400; the ``kind`` tag is kept so status codes
can be split later without touching the call sites.
"""


class AvatarError(Exception):
    kind = "error"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(AvatarError):
    kind = "authentication"

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)


class ValidationError(AvatarError):
    kind = "validation"


class BackendError(AvatarError):
    kind = "backend"

    @classmethod
    def from_exception(cls, exc: Exception) -> "BackendError":
        """Wrap an SDK error, keeping the backend's own message when it has one."""
        message = getattr(exc, "message", None) or str(exc)
        return cls(message)
