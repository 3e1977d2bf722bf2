"""
Abstract base class for parameter stores.
Defines the contract for reading a single configuration value.
"""
from abc import ABC, abstractmethod


class ParameterStore(ABC):
    """Abstract key-value store for configuration parameters."""

    @abstractmethod
    def get_parameter(self, name: str, with_decryption: bool = True) -> str:
        """
        Read one parameter value.

        Raises:
            ParameterNotFoundException: If no parameter exists under name
        """
        pass
