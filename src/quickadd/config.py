from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    user_timezone: str = "Europe/Berlin"
    log_level: str = "INFO"

    # Defaults applied when a parsed entry is turned into a task draft
    default_category: str = "Household"
    default_stake: float = 0.0
    default_start_offset_minutes: int = 60
    default_duration_minutes: int = 120
    default_reminder_minutes: int = 30

    @property
    def has_default_stake(self) -> bool:
        return self.default_stake > 0


settings = Settings()
