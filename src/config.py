
import time
import logging
import boto3
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger("abtest.config")

@dataclass
class StoreConfig:
    backend: str = "redis"
    redis_url: str = "redis://localhost:6379/0"
    socket_timeout: float = 5.0

class ConfigManager:
    def __init__(self, ttl_seconds: float = 60.0):
        self.ttl_seconds = ttl_seconds
        self._cached_config: Optional[StoreConfig] = None
        self._last_fetched_at: float = 0.0
        self._ssm_client = boto3.client('ssm')

    def get_config(self) -> StoreConfig:
        current_time = time.time()

        if self._cached_config and (current_time - self._last_fetched_at < self.ttl_seconds):
            return self._cached_config

        try:
            config = self._fetch_from_ssm()
            self._cached_config = config
            self._last_fetched_at = current_time
            return config
        except Exception as e:
            logger.warning("Error fetching store config from SSM, using defaults: %s", e)
            return self._get_default_config()

    def _fetch_from_ssm(self) -> StoreConfig:
        names = [
            '/abtest/store/backend',
            '/abtest/store/redis_url',
            '/abtest/store/socket_timeout'
        ]

        response = self._ssm_client.get_parameters(Names=names)
        params = {p['Name']: p['Value'] for p in response.get('Parameters', [])}

        backend = params.get('/abtest/store/backend', 'redis').lower()
        redis_url = params.get('/abtest/store/redis_url', 'redis://localhost:6379/0')
        socket_timeout = float(params.get('/abtest/store/socket_timeout', '5.0'))

        return StoreConfig(
            backend=backend,
            redis_url=redis_url,
            socket_timeout=socket_timeout
        )

    def _get_default_config(self) -> StoreConfig:
        # ローカルのredisを向く
        return StoreConfig()
