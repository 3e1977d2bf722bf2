"""
Logging handler that indexes log entries into Elasticsearch.
Entries are shipped from a background queue listener so callers never wait
on the cluster.
"""
import json
import logging
import queue
from datetime import datetime, timezone
from logging.handlers import QueueHandler, QueueListener
from elasticsearch import Elasticsearch

DEFAULT_INDEX_FORMAT = "logs-{0:%Y.%m.%d}"

# The client logs each request it makes; indexing those would loop forever.
IGNORED_LOGGER_PREFIXES = ("elastic_transport", "elasticsearch", "urllib3")


class ElasticsearchHandler(logging.Handler):
    """Send each log record to a date-based Elasticsearch index."""

    def __init__(self, client: Elasticsearch, index_format: str = DEFAULT_INDEX_FORMAT, level=logging.NOTSET):
        super().__init__(level)
        self.client = client
        self.index_format = index_format

    def emit(self, record: logging.LogRecord) -> None:
        if record.name.startswith(IGNORED_LOGGER_PREFIXES):
            return
        try:
            self.client.index(index=self.index_name(record), document=self.build_document(record))
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        """Close the Elasticsearch client along with the handler."""
        try:
            self.client.close()
        finally:
            super().close()

    def index_name(self, record: logging.LogRecord) -> str:
        """Index for the record's creation date, e.g. logs-2024.05.01."""
        return self.index_format.format(datetime.fromtimestamp(record.created, tz=timezone.utc))

    def build_document(self, record: logging.LogRecord) -> dict:
        """
        Convert a record into an Elasticsearch document.

        JSON messages rendered by structlog are indexed field by field; any
        other message is stored under 'message'.
        """
        message = record.getMessage()
        try:
            document = json.loads(message)
        except ValueError:
            document = None
        if not isinstance(document, dict):
            document = {'message': message}

        document.setdefault('@timestamp', datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat())
        document.setdefault('level', record.levelname.lower())
        document.setdefault('logger', record.name)
        if record.exc_info and 'exception' not in document:
            document['exception'] = logging.Formatter().formatException(record.exc_info)
        return document


def attach_elasticsearch_handler(
    client: Elasticsearch,
    index_format: str = DEFAULT_INDEX_FORMAT,
    level: int = logging.INFO
) -> QueueListener:
    """
    Route root logger output to Elasticsearch through a queue.

    Returns:
        QueueListener: The started listener; pass it to detach_elasticsearch_handler on shutdown
    """
    log_queue = queue.Queue(-1)
    es_handler = ElasticsearchHandler(client, index_format, level=level)
    listener = QueueListener(log_queue, es_handler, respect_handler_level=True)

    logging.getLogger().addHandler(QueueHandler(log_queue))
    listener.start()
    return listener


def detach_elasticsearch_handler(listener: QueueListener) -> None:
    """Remove the queue handler, flush pending records and close the sink."""
    # Remove first so nothing is queued after the listener drains.
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler, QueueHandler) and handler.queue is listener.queue:
            root_logger.removeHandler(handler)
            handler.close()
    listener.stop()
    for handler in listener.handlers:
        handler.close()
