"""Redis pub/sub event publisher."""

import json
import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..entities.domain_event import DomainEvent
from ....core.exceptions import EventPublishError

logger = logging.getLogger(__name__)


class RedisEventPublisher:
    """Publishes events as JSON messages on a Redis channel.
    
    Delivery is at-most-once: subscribers that are not listening when the
    message is published never see it.
    """
    
    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        channel: str = "store-events",
        client: Optional[redis.Redis] = None,
    ):
        self.redis_url = redis_url
        self.channel = channel
        self.redis_client = client
    
    async def publish(self, event: DomainEvent) -> None:
        """Publish event to the configured channel."""
        if self.redis_client is None:
            self.redis_client = redis.from_url(self.redis_url)
        
        message = json.dumps(event.to_dict(), default=str)
        try:
            receivers = await self.redis_client.publish(self.channel, message)
        except RedisError as e:
            raise EventPublishError(
                f"Failed to publish {event.event_type.value} to channel '{self.channel}': {e}",
                details={"event_id": str(event.id.value)},
            )
        
        logger.debug(f"Published {event.event_type.value} to '{self.channel}' ({receivers} receivers)")
    
    async def close(self) -> None:
        """Close the Redis connection."""
        if self.redis_client is not None:
            await self.redis_client.aclose()
            self.redis_client = None
