"""
AWS Secrets Manager repository.
Reads secret strings used to bootstrap the logging sink.
"""
from typing import Optional
import boto3
from botocore.exceptions import ClientError
from config_helper.core import config
from config_helper.core.exceptions import UnexpectedConfigurationException


class SecretsRepository:
    """Repository for Secrets Manager operations."""

    def __init__(self, region: Optional[str] = None):
        self.secrets_client = boto3.client('secretsmanager', region_name=region or config.settings.aws_region)

    def get_secret_string(self, secret_id: str) -> str:
        """
        Retrieve the string value of a secret.

        Args:
            secret_id: Secret name or ARN

        Returns:
            str: SecretString of the current version

        Raises:
            UnexpectedConfigurationException: If the secret cannot be read or has no string value
        """
        try:
            response = self.secrets_client.get_secret_value(SecretId=secret_id)
        except ClientError as e:
            raise UnexpectedConfigurationException(
                f"Failed to retrieve secret '{secret_id}': {str(e)}", original=e
            ) from e

        secret_string = response.get('SecretString')
        if secret_string is None:
            raise UnexpectedConfigurationException(f"Secret '{secret_id}' has no string value")
        return secret_string
