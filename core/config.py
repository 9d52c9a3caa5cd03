from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    index_name: str = "index.html"
    source_suffix: str = ".html"

    description_placeholder: str = "Descripción no disponible"
    # DocumentEntry caps descriptions at 160 as well
    description_limit: int = Field(default=160, ge=4, le=160)
    ellipsis: str = "..."

    page_title: str = "Índice de Documentos"
    page_lang: str = "es"
    timestamp_format: str = "%d/%m/%Y a las %H:%M"

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    model_config = SettingsConfigDict(env_prefix="MKINDEX_", env_file=".env", env_file_encoding="utf-8")

    @model_validator(mode="after")
    def ellipsis_fits_limit(self):
        if len(self.ellipsis) >= self.description_limit:
            raise ValueError("ellipsis must be shorter than description_limit")
        return self

settings = Settings()
