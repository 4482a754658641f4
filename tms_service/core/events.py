import json
import logging
import threading
from typing import Dict, Any
import pika
import pika.exceptions

from .config import Settings

logger = logging.getLogger(__name__)


class EventPublisher:
    """
    RabbitMQ publisher for entity lifecycle events.

    Route handlers run on a thread pool while pika connections and channels
    are not thread-safe, so one lock guards the connection and every publish.
    """

    def __init__(self, settings: Settings):
        self.enabled = settings.events_enabled
        self.host = settings.rabbitmq_host
        self.port = settings.rabbitmq_port
        self.user = settings.rabbitmq_user
        self.password = settings.rabbitmq_password
        self.exchange = settings.rabbitmq_exchange
        self.connection = None
        self.channel = None
        self._lock = threading.RLock()

    def connect(self) -> bool:
        """Establish connection to RabbitMQ"""
        if not self.enabled:
            logger.info("Event publishing disabled")
            return False

        with self._lock:
            try:
                credentials = pika.PlainCredentials(self.user, self.password)
                parameters = pika.ConnectionParameters(
                    host=self.host,
                    port=self.port,
                    credentials=credentials,
                    heartbeat=600,
                    blocked_connection_timeout=300,
                )

                self.connection = pika.BlockingConnection(parameters)
                self.channel = self.connection.channel()

                # Declare exchange
                self.channel.exchange_declare(
                    exchange=self.exchange,
                    exchange_type='topic',
                    durable=True
                )

                logger.info(f"Connected to RabbitMQ at {self.host}:{self.port}")
                return True

            except pika.exceptions.AMQPConnectionError as e:
                logger.warning(f"Could not connect to RabbitMQ: {e}")
                return False

    def publish_event(self, event_type: str, data: Dict[str, Any]) -> bool:
        """Publish event to RabbitMQ, routed by its event type"""
        if not self.enabled:
            logger.debug(f"Skipping {event_type} event - publishing disabled")
            return False

        with self._lock:
            if not self.connection or self.connection.is_closed:
                if not self.connect():
                    logger.warning("Failed to publish event - no connection")
                    return False

            try:
                message = {
                    'event_type': event_type,
                    'data': data
                }

                self.channel.basic_publish(
                    exchange=self.exchange,
                    routing_key=event_type,
                    body=json.dumps(message),
                    properties=pika.BasicProperties(
                        delivery_mode=2,  # Persistent
                        content_type='application/json'
                    )
                )

                logger.info(f"Published {event_type} event to RabbitMQ")
                return True

            except pika.exceptions.AMQPError as e:
                logger.error(f"Error publishing event: {e}")
                return False

    def close(self):
        """Close connection"""
        with self._lock:
            try:
                if self.connection and not self.connection.is_closed:
                    self.connection.close()
                    logger.info("RabbitMQ connection closed")
            except pika.exceptions.AMQPError as e:
                logger.error(f"Error closing connection: {e}")
