from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    # Application
    APP_NAME: str = Field(default="Freelance Marketplace API")
    APP_VERSION: str = Field(default="0.1.0")

    # Environment
    ENV: str = Field(default="development")
    LOG_TO_FILE: bool = Field(default=True, description="Write a log file per server start under logs/")


    # Database
    DATABASE_URL: str = Field(default="sqlite+aiosqlite:///./marketplace.db")
    DB_POOL_SIZE: int = Field(default=10, description="Database connection pool size")
    DB_MAX_OVERFLOW: int = Field(default=20, description="Maximum connections beyond pool_size")
    DB_POOL_TIMEOUT: int = Field(default=30, description="Seconds to wait for connection from pool")
    DB_POOL_RECYCLE: int = Field(default=3600, description="Recycle connections after N seconds")
    DB_ECHO: bool = Field(default=False)
    DB_CREATE_ALL: bool = Field(default=True, description="Create missing tables on startup")

    # Authentication
    JWT_SECRET_KEY: str = Field(default="change-me-in-production")
    JWT_ALGORITHM: str = Field(default="HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60 * 24 * 7, description="Token lifetime (7 days)")
    ADMIN_EMAILS: list[str] = Field(
        default_factory=list,
        description="Emails that are registered with the admin role",
    )

    # Lifecycle
    AUTO_REJECT_SIBLING_PROPOSALS: bool = Field(
        default=True,
        description="Reject the other pending proposals of a project when one is accepted",
    )
    NOTIFICATION_INBOX_LIMIT: int = Field(default=50)
    FREELANCER_SEARCH_LIMIT: int = Field(default=50)

    # Payments
    STRIPE_SECRET_KEY: str | None = Field(default=None)
    PAYMENT_DEFAULT_CURRENCY: str = Field(default="usd")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


settings = Settings()
