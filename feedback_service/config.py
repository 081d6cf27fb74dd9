from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite:///./session_feedback.db"
    sql_echo: bool = False

    # Bind address (PORT falls back to 8080)
    host: str = "0.0.0.0"
    port: int = 8080

    log_level: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
