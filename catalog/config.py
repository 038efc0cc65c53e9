from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import List, Optional


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Application
    app_name: str = "catalog-service"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    
    # HTTP
    api_prefix: str = Field(default="/api/v1/internal", validation_alias="API_PREFIX")
    allowed_origins: List[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        validation_alias="ALLOWED_ORIGINS"
    )
    
    # Catalog data
    # JSON file with {"categories": [...], "products": [...]}; built-in seed data when unset
    catalog_data_file: Optional[str] = Field(None, validation_alias="CATALOG_DATA_FILE")
    seed_sample_products: bool = Field(default=True, validation_alias="SEED_SAMPLE_PRODUCTS")


settings = Settings()
