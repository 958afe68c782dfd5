from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "Student CRUD API"
    debug: bool = False
    api_prefix: str = "/api/v1"

    # Audit log settings
    log_dir: str = "logs"
    audit_log_enabled: bool = True

    # Client settings
    student_api_base: str = "http://localhost:8000/api/v1"
    request_timeout: float = 30.0

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
