"""
AWS Systems Manager Parameter Store repository.
Reads single parameters, decrypting SecureString values on request.
"""
from typing import Optional
import boto3
from botocore.exceptions import ClientError
from config_helper.core import config
from config_helper.core.exceptions import ParameterNotFoundException
from config_helper.repositories.parameter_store import ParameterStore


class SSMParameterStore(ParameterStore):
    """Repository for SSM Parameter Store operations."""

    def __init__(self, region: Optional[str] = None):
        self.ssm_client = boto3.client('ssm', region_name=region or config.settings.aws_region)

    def get_parameter(self, name: str, with_decryption: bool = True) -> str:
        """
        Fetch a parameter from Parameter Store.

        Args:
            name: Full parameter name (e.g., /my-app/db-password)
            with_decryption: Decrypt SecureString values

        Returns:
            Parameter value

        Raises:
            ParameterNotFoundException: If the parameter does not exist
            ClientError: For any other SSM failure
        """
        try:
            response = self.ssm_client.get_parameter(Name=name, WithDecryption=with_decryption)
            return response['Parameter']['Value']
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') == 'ParameterNotFound':
                raise ParameterNotFoundException(name) from e
            raise
