from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from starlette.datastructures import UploadFile
from app.config import Settings, get_settings
from app.core.dependencies import get_current_user, get_request_supabase
from app.core.errors import ValidationError
from app.modules.avatars.schemas import AvatarResponse, AvatarUploadResponse, ErrorResponse
from app.modules.avatars.service import AvatarService
from supabase import Client
from typing import Dict

router = APIRouter(tags=["avatars"], responses={400: {"model": ErrorResponse}})


def get_avatar_service(
    supabase: Client = Depends(get_request_supabase),
    settings: Settings = Depends(get_settings)
) -> AvatarService:
    return AvatarService(supabase, settings)


@router.options("/", response_class=PlainTextResponse)
async def preflight():
    """CORS preflight; answered without authentication"""
    return PlainTextResponse("ok")


# Every authenticated method other than POST reads the avatar
@router.api_route("/", methods=["GET", "PUT", "PATCH", "DELETE"], response_model=AvatarResponse)
async def get_avatar(
    user_data: Dict = Depends(get_current_user),
    service: AvatarService = Depends(get_avatar_service)
):
    """Return the caller's current avatar URL (null when none is stored)"""
    return AvatarResponse(avatar_url=service.get_avatar_url(user_data["id"]))


@router.post("/", response_model=AvatarUploadResponse)
async def upload_avatar(
    request: Request,
    user_data: Dict = Depends(get_current_user),
    service: AvatarService = Depends(get_avatar_service)
):
    """
    Upload the caller's avatar from the multipart field "avatar".
    The file is stored as "<user_id>.<ext>" with overwrite, and its public URL
    is written to the caller's profile row.
    """
    async with request.form() as form:
        avatar = form.get("avatar")
        # a plain text field named "avatar" is not a file
        if not isinstance(avatar, UploadFile) or not avatar.filename:
            raise ValidationError("No file provided")

        file_content = await avatar.read()
        avatar_url = service.upload_avatar(
            user_data["id"],
            avatar.filename,
            file_content,
            content_type=avatar.content_type
        )
    return AvatarUploadResponse(message="Avatar updated successfully", avatar_url=avatar_url)
