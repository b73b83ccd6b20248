from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""

    # Storage / tables
    avatars_bucket: str = "avatars"
    profiles_table: str = "user_profiles"

    # App
    app_name: str = "user-avatar"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )

def get_settings() -> Settings:
    """Read settings from the environment. Called per request so each invocation sees the current values."""
    return Settings()
