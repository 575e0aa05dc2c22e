from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Application
    app_name: str = "MathSheet"
    debug: bool = False

    # Supabase (optional: missing credentials disable persistence)
    supabase_url: str = ""
    supabase_service_key: str = ""
    persist_worksheets: bool = True

    # PDF
    pdf_brand: str = "MathSheet  |  printable maths practice"

    # CORS
    frontend_url: str = "http://localhost:3000"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    return Settings()
