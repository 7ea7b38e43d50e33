from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "AskYou"
    TAGLINE: str = "Experience the Future of ESG Reporting Automation"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    CONTACT_EMAIL: str = "askyou.official@gmail.com"
    CONTACT_PHONE: str = "+852 XXXX XXXX"

    # SMTP is optional; without SMTP_HOST the contact form only offers a mailto link
    SMTP_HOST: str | None = None
    SMTP_PORT: int = 587
    SMTP_USER: str | None = None
    SMTP_PASS: str | None = None
    MAIL_FROM: str | None = None

    class Config:
        env_file = ".env"
        extra = "ignore"

    @property
    def smtp_enabled(self) -> bool:
        return bool(self.SMTP_HOST)


@lru_cache
def get_settings() -> Settings:
    return Settings()
