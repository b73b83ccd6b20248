from pydantic import BaseModel
from typing import Optional


class AvatarResponse(BaseModel):
    avatar_url: Optional[str] = None


class AvatarUploadResponse(BaseModel):
    message: str
    avatar_url: str


class ErrorResponse(BaseModel):
    error: str
