from supabase import Client
from app.config import Settings
from app.core.errors import BackendError
from typing import Optional
import logging

logger = logging.getLogger(__name__)


def avatar_storage_key(user_id: str, filename: str) -> str:
    """Object key for a user's avatar: "<user_id>.<ext>".

    ext is whatever follows the last "." in filename; a filename without a "."
    is used whole.
    """
    file_extension = filename.rsplit(".", 1)[-1]
    return f"{user_id}.{file_extension}"


class AvatarService:
    def __init__(self, supabase: Client, settings: Settings):
        self.supabase = supabase
        self.bucket_name = settings.avatars_bucket
        self.profiles_table = settings.profiles_table

    def upload_avatar(
        self,
        user_id: str,
        filename: str,
        file_content: bytes,
        content_type: Optional[str] = None
    ) -> str:
        """Store the avatar, point the user's profile at it and return its public URL"""
        file_name = avatar_storage_key(user_id, filename)
        bucket = self.supabase.storage.from_(self.bucket_name)

        file_options = {"upsert": "true"}
        if content_type:
            file_options["content-type"] = content_type
        try:
            bucket.upload(file_name, file_content, file_options=file_options)
            logger.info(f"Uploaded avatar to {self.bucket_name}/{file_name}")
        except Exception as e:
            logger.error(f"Avatar upload failed ({file_name}): {e}")
            raise BackendError.from_exception(e)

        try:
            public_url = bucket.get_public_url(file_name)
        except Exception as e:
            logger.error(f"Could not build public URL for {file_name}: {e}")
            raise BackendError.from_exception(e)

        self.set_avatar_url(user_id, public_url)
        return public_url

    def set_avatar_url(self, user_id: str, avatar_url: str) -> None:
        """Update avatar_url on the user's profile row; a missing row is left missing"""
        try:
            result = self.supabase.table(self.profiles_table)\
                .update({"avatar_url": avatar_url})\
                .eq("user_id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Failed to update avatar_url for user {user_id}: {e}")
            raise BackendError.from_exception(e)

        if not result.data:
            logger.warning("No %s row for user %s; avatar_url not stored", self.profiles_table, user_id)

    def get_avatar_url(self, user_id: str) -> Optional[str]:
        """Current avatar URL, or None when the user has no row or no avatar"""
        try:
            result = self.supabase.table(self.profiles_table)\
                .select("avatar_url")\
                .eq("user_id", user_id)\
                .maybe_single()\
                .execute()
        except Exception as e:
            logger.error(f"Failed to read avatar_url for user {user_id}: {e}")
            raise BackendError.from_exception(e)

        # maybe_single() yields no response at all when nothing matched
        if not result or not result.data:
            return None
        return result.data.get("avatar_url") or None
