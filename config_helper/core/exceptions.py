"""
Custom exceptions for the configuration helper.
Provides specific error types for different failure scenarios.
"""
from typing import Optional


class ConfigHelperException(Exception):
    """Base exception for all configuration helper errors."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidArgumentException(ConfigHelperException, ValueError):
    """Raised when a key name or application namespace is blank."""
    pass


class ParameterNotFoundException(ConfigHelperException):
    """Raised when the parameter path does not exist in the store."""
    def __init__(self, parameter_name: str, message: Optional[str] = None):
        self.parameter_name = parameter_name
        super().__init__(message or f"Parameter not found: {parameter_name}")


class UnexpectedConfigurationException(ConfigHelperException):
    """Raised for any other failure while reading configuration or secrets."""
    def __init__(self, message: str, original: Optional[BaseException] = None):
        self.original = original
        super().__init__(message)
