"""
Dependency wiring for host applications.
Provides singleton providers usable with FastAPI's Depends, plus hooks that
register the configuration service on an application.
"""
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI
from config_helper.core import config
from config_helper.core.exception_handler import register_exception_handlers
from config_helper.core.logging_setup import get_logger
from config_helper.repositories.parameter_store import ParameterStore
from config_helper.repositories.ssm_parameter_store import SSMParameterStore
from config_helper.services.configuration_service import ConfigurationService
from config_helper.services.elasticsearch_handler import detach_elasticsearch_handler
from config_helper.services.logging_bootstrap import configure_elasticsearch_logging_from_secrets_manager


@lru_cache()
def get_parameter_store() -> ParameterStore:
    """Get SSMParameterStore singleton instance."""
    return SSMParameterStore()


@lru_cache()
def get_configuration_service() -> ConfigurationService:
    """Get ConfigurationService singleton instance with injected dependencies."""
    timeout = config.settings.parameter_timeout_seconds
    return ConfigurationService(
        parameter_store=get_parameter_store(),
        logger=get_logger("config_helper.configuration_service"),
        default_timeout=timeout if timeout > 0 else None
    )


def add_configuration_service(app: FastAPI) -> FastAPI:
    """Register the configuration service and its exception handlers on app."""
    register_exception_handlers(app)
    app.state.configuration_service = get_configuration_service()
    return app


def elasticsearch_logging_lifespan(secret_name: str = ""):
    """
    Build a FastAPI lifespan that configures Elasticsearch logging at startup.

    The sink is ready before the application accepts requests, and the
    configuration service is then placed on app.state. Exception handlers
    must exist before startup, so hosts still call
    add_configuration_service(app) when building the app:

        app = FastAPI(lifespan=elasticsearch_logging_lifespan("prod/elasticsearch"))
        add_configuration_service(app)

    Args:
        secret_name: Secrets Manager secret with the sink credentials;
            defaults to settings.elasticsearch_secret_name
    """
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        listener = await configure_elasticsearch_logging_from_secrets_manager(
            secret_name or config.settings.elasticsearch_secret_name
        )
        app.state.configuration_service = get_configuration_service()
        try:
            yield
        finally:
            detach_elasticsearch_handler(listener)

    return lifespan
