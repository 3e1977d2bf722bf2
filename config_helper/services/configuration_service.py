"""
Configuration service for reading application settings from a parameter store.
Validates the request, fetches the decrypted value and logs every outcome.
"""
import asyncio
import time
from typing import Optional
from config_helper.core.exceptions import (
    InvalidArgumentException,
    ParameterNotFoundException,
    UnexpectedConfigurationException
)
from config_helper.repositories.parameter_store import ParameterStore
from config_helper.services.log_formatter import build_diagnostic_record, serialize


def build_parameter_path(key: str, namespace: str) -> str:
    """Build the full parameter name, e.g. /my-app/db-password."""
    return f"/{namespace}/{key}"


class ConfigurationService:
    """Service for retrieving configuration values."""

    def __init__(self, parameter_store: ParameterStore, logger, default_timeout: Optional[float] = None):
        """
        Args:
            parameter_store: Store the values are read from
            logger: structlog logger handle used for all log entries
            default_timeout: Seconds to wait for the store when a call gives no timeout
        """
        if parameter_store is None:
            raise ValueError("parameter_store must not be None")
        if logger is None:
            raise ValueError("logger must not be None")

        self.parameter_store = parameter_store
        self.logger = logger
        self.default_timeout = default_timeout

    async def get_configuration_value(self, key: str, namespace: str, timeout: Optional[float] = None) -> str:
        """
        Retrieve a configuration value from /{namespace}/{key}.

        Args:
            key: Parameter key name
            namespace: Application namespace the key belongs to
            timeout: Optional number of seconds to wait for the store

        Returns:
            str: The decrypted parameter value

        Raises:
            InvalidArgumentException: If key or namespace is blank
            ParameterNotFoundException: If the parameter does not exist
            UnexpectedConfigurationException: If the lookup fails for any other reason
        """
        if not key or not key.strip():
            self.logger.error("Key name cannot be null or whitespace.")
            raise InvalidArgumentException("Key name cannot be null or whitespace.")

        if not namespace or not namespace.strip():
            self.logger.error("Application type cannot be null or whitespace.")
            raise InvalidArgumentException("Application type cannot be null or whitespace.")

        parameter_name = build_parameter_path(key, namespace)
        self.logger.info("Attempting to retrieve parameter", parameter_name=parameter_name)

        effective_timeout = timeout if timeout is not None else self.default_timeout
        started = time.perf_counter()
        try:
            value = await asyncio.wait_for(
                asyncio.to_thread(self.parameter_store.get_parameter, parameter_name, True),
                timeout=effective_timeout
            )
        except ParameterNotFoundException as e:
            self._log_failure(e, started, parameter_name)
            raise
        except Exception as e:
            detail = str(e)
            if isinstance(e, asyncio.TimeoutError) and not detail:
                detail = f"Timed out after {effective_timeout}s"
            self._log_failure(e, started, parameter_name, message=detail or None)
            raise UnexpectedConfigurationException(
                f"Unexpected error retrieving parameter {parameter_name}: {detail}", original=e
            ) from e

        self.logger.info(
            "Successfully retrieved parameter",
            parameter_name=parameter_name,
            time_taken_ms=self._elapsed_ms(started)
        )
        return value

    def _log_failure(
        self, exception: Exception, started: float, parameter_name: str, message: Optional[str] = None
    ) -> None:
        record = build_diagnostic_record(exception, self._elapsed_ms(started), message=message)
        self.logger.error(serialize(record), parameter_name=parameter_name)

    @staticmethod
    def _elapsed_ms(started: float) -> int:
        return int((time.perf_counter() - started) * 1000)
