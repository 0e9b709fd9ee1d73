import logging
from typing import Any, Dict, Optional

from redis.asyncio import Redis

from timestack.config import Settings
from timestack.exceptions import RedisNotStartedError

logger = logging.getLogger(__name__)


def create_redis_config(config: Settings) -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "host": config.redis_host,
        "port": config.redis_port,
        "db": config.redis_db,
    }
    # TLS only for production deployments that ask for it
    if config.is_production and config.redis_tls:
        options["ssl"] = True
        options["ssl_cert_reqs"] = "none" if config.redis_tls_insecure else "required"
    return options


class RedisService:
    """Holds the single process-wide Redis connection.

    ``start`` connects and pings, so an unreachable server fails startup.
    ``stop`` closes the client exactly once; calling it again is a no-op.
    """

    def __init__(self, options: Dict[str, Any], client_class=Redis):
        self.options = options
        self.client_class = client_class
        self._client: Optional[Redis] = None

    @property
    def started(self) -> bool:
        return self._client is not None

    async def start(self) -> None:
        if self._client is not None:
            return
        client = self.client_class(**self.options)
        try:
            await client.ping()
        except Exception:
            await client.aclose()
            raise
        self._client = client
        logger.info("Connected to Redis at %s:%s/%s", self.options.get("host"), self.options.get("port"), self.options.get("db"))

    async def stop(self) -> None:
        client, self._client = self._client, None
        if client is None:
            return
        await client.aclose()
        logger.info("Redis connection closed")

    def get_client(self) -> Redis:
        if self._client is None:
            raise RedisNotStartedError("redis client not initialized")
        return self._client

    async def ping(self) -> bool:
        return await self.get_client().ping()
