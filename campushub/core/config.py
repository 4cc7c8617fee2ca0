from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    database_url: str
    database_echo: bool = False
    jwt_secret: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # Повторы при конфликте версий документа и при гонке лайков
    optimistic_retry_attempts: int = 5
    like_retry_attempts: int = 3

    log_level: str = "INFO"

    # PostgreSQL variables for Docker
    postgres_user: str = ""
    postgres_password: str = ""
    postgres_db: str = ""

    model_config = {"env_file": ".env", "extra": "ignore"}

settings = Settings()
