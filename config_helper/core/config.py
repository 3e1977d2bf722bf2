"""
Core configuration for the configuration helper.
Manages environment variables and AWS service settings.
"""
import os
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # AWS Configuration
    aws_region: str = os.getenv("AWS_REGION", "us-east-1")

    # Logging
    service_name: str = os.getenv("SERVICE_NAME", "config-helper")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Elasticsearch sink
    elasticsearch_secret_name: str = os.getenv("ELASTICSEARCH_SECRET_NAME", "")
    elasticsearch_index_format: str = os.getenv("ELASTICSEARCH_INDEX_FORMAT", "logs-{0:%Y.%m.%d}")
    elasticsearch_auto_register_template: bool = (
        os.getenv("ELASTICSEARCH_AUTO_REGISTER_TEMPLATE", "true").lower() == "true"
    )

    # Parameter Store
    parameter_timeout_seconds: float = float(os.getenv("PARAMETER_TIMEOUT_SECONDS", "0"))

    # Environment
    environment: str = os.getenv("ENVIRONMENT", "dev")

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
