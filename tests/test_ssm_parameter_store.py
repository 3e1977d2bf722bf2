"""
Unit tests for SSMParameterStore.
Uses moto to mock AWS Systems Manager.
"""
from unittest.mock import patch
import pytest
from moto import mock_aws
import boto3
from botocore.exceptions import ClientError
from config_helper.repositories.ssm_parameter_store import SSMParameterStore
from config_helper.core.exceptions import ParameterNotFoundException


class TestSSMParameterStore:
    """Test suite for SSMParameterStore."""

    @mock_aws
    def test_get_parameter_string(self):
        """Test reading a plain String parameter."""
        ssm = boto3.client('ssm', region_name='us-east-1')
        ssm.put_parameter(Name='/app/test', Value='test-value', Type='String')

        store = SSMParameterStore(region='us-east-1')

        assert store.get_parameter('/app/test') == 'test-value'

    @mock_aws
    def test_get_parameter_decrypts_secure_string(self):
        """Test SecureString values are returned decrypted."""
        ssm = boto3.client('ssm', region_name='us-east-1')
        ssm.put_parameter(Name='/app/db-password', Value='s3cret', Type='SecureString')

        store = SSMParameterStore(region='us-east-1')

        assert store.get_parameter('/app/db-password', with_decryption=True) == 's3cret'

    @mock_aws
    def test_get_parameter_uses_settings_region(self):
        """Test the region falls back to settings."""
        from config_helper.core import config
        config.settings = config.Settings(aws_region='eu-west-1')

        store = SSMParameterStore()

        assert store.ssm_client.meta.region_name == 'eu-west-1'
        config.settings = config.Settings()

    @mock_aws
    def test_get_parameter_not_found(self):
        """Test missing parameter raises ParameterNotFoundException."""
        store = SSMParameterStore(region='us-east-1')

        with pytest.raises(ParameterNotFoundException) as exc_info:
            store.get_parameter('/app/missing')

        assert exc_info.value.parameter_name == '/app/missing'
        assert "Parameter not found" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ClientError)

    @mock_aws
    def test_get_parameter_other_client_error_propagates(self):
        """Test non not-found client errors are not translated."""
        store = SSMParameterStore(region='us-east-1')
        error = ClientError(
            {'Error': {'Code': 'AccessDeniedException', 'Message': 'denied'}},
            'GetParameter'
        )

        with patch.object(store.ssm_client, 'get_parameter', side_effect=error):
            with pytest.raises(ClientError) as exc_info:
                store.get_parameter('/app/test')

        assert exc_info.value.response['Error']['Code'] == 'AccessDeniedException'
