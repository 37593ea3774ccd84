from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App
    app_name: str = "gradebridge"
    environment: str = "development"  # development, production
    log_level: str = ""  # DEBUG, INFO, WARNING, ERROR, CRITICAL (empty = auto based on environment)
    log_to_file: bool = False  # Enable file logging
    log_dir: str = "logs"

    # IANA zone used to compose Classroom due dates (empty = host local time)
    local_timezone: str = ""

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
