from pydantic_settings import BaseSettings, SettingsConfigDict
from app.generators.entity_gen.types import TemplateVariant

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "entity-generator"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    default_variant: TemplateVariant = TemplateVariant.ORM
    validate_before_generate: bool = True


settings = Settings()
