"""
Startup wiring for Elasticsearch logging.
Fetches the sink credentials from Secrets Manager once and attaches the
Elasticsearch handler before any configuration lookups run.
"""
import asyncio
import logging
from logging.handlers import QueueListener
from typing import Optional
from elasticsearch import ApiError, Elasticsearch, TransportError
from pydantic import ValidationError
from config_helper.core import config
from config_helper.core.exceptions import UnexpectedConfigurationException
from config_helper.core.logging_setup import configure_logging
from config_helper.models.elasticsearch_credentials import ElasticsearchCredentials
from config_helper.repositories.secrets_repository import SecretsRepository
from config_helper.services.elasticsearch_handler import attach_elasticsearch_handler


def parse_credentials(secret_string: str) -> ElasticsearchCredentials:
    """
    Parse the Elasticsearch credentials JSON stored in a secret.

    Raises:
        UnexpectedConfigurationException: If the JSON is malformed or a field is missing
    """
    try:
        return ElasticsearchCredentials.model_validate_json(secret_string)
    except ValidationError as e:
        # Never include the input; it holds the password.
        fields = ", ".join(str(error['loc'][0]) for error in e.errors() if error.get('loc')) or "document"
        raise UnexpectedConfigurationException(
            f"Invalid Elasticsearch credentials secret ({fields})", original=e
        ) from e


def index_pattern(index_format: str) -> str:
    """Wildcard pattern matching every index produced by index_format."""
    return index_format.split('{', 1)[0] + '*'


def register_index_template(client: Elasticsearch, index_format: str) -> None:
    """Register an index template so daily log indices share one mapping."""
    pattern = index_pattern(index_format)
    client.indices.put_index_template(
        name=pattern.rstrip('-*') or "logs",
        index_patterns=[pattern],
        template={
            'mappings': {
                'properties': {
                    '@timestamp': {'type': 'date'},
                    'timestamp': {'type': 'date'},
                    'level': {'type': 'keyword'},
                    'logger': {'type': 'keyword'},
                    'service': {'type': 'keyword'},
                    'env': {'type': 'keyword'},
                    'event': {'type': 'text'},
                    'message': {'type': 'text'}
                }
            }
        }
    )


async def configure_elasticsearch_logging_from_secrets_manager(
    secret_name: str,
    secrets_repository: Optional[SecretsRepository] = None,
    settings: Optional[config.Settings] = None
) -> QueueListener:
    """
    Configure structured logging with an Elasticsearch sink.

    Args:
        secret_name: Secrets Manager secret holding {"Uri", "Username", "Password"}
        secrets_repository: Repository used to read the secret
        settings: Settings to use instead of the global instance

    Returns:
        QueueListener: Running listener that ships records to Elasticsearch

    Raises:
        UnexpectedConfigurationException: If the secret cannot be read or parsed,
            or the index template cannot be registered
    """
    settings = settings or config.settings
    secrets_repository = secrets_repository or SecretsRepository(region=settings.aws_region)

    secret_string = await asyncio.to_thread(secrets_repository.get_secret_string, secret_name)
    credentials = parse_credentials(secret_string)

    client = Elasticsearch(credentials.uri, basic_auth=(credentials.username, credentials.password))

    if settings.elasticsearch_auto_register_template:
        try:
            await asyncio.to_thread(register_index_template, client, settings.elasticsearch_index_format)
        except (ApiError, TransportError) as e:
            client.close()
            raise UnexpectedConfigurationException(
                f"Failed to register Elasticsearch index template: {str(e)}", original=e
            ) from e

    configure_logging(settings.log_level)
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    return attach_elasticsearch_handler(client, settings.elasticsearch_index_format, level=level)
